# -*- coding: utf-8 -*-
"""
app/modules/payments/services/__init__.py

Servicios de bajo nivel del módulo Payments.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from .code_issuer import (
    CODE_LENGTH,
    generate_registration_code,
    issue_registration_code,
    normalize_registration_code,
)

__all__ = [
    "CODE_LENGTH",
    "generate_registration_code",
    "issue_registration_code",
    "normalize_registration_code",
]
