# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/__init__.py

Superficie de exportación de enums del módulo Payments.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from .payment_status_enum import PaymentStatus
from .payment_status_transitions import (
    TERMINAL_STATUSES,
    VALID_STATUS_TRANSITIONS,
    is_terminal,
    is_valid_status_transition,
)
from .registration_code_status_enum import RegistrationCodeStatus

__all__ = [
    "PaymentStatus",
    "RegistrationCodeStatus",
    "TERMINAL_STATUSES",
    "VALID_STATUS_TRANSITIONS",
    "is_terminal",
    "is_valid_status_transition",
]

# Fin del archivo app/modules/payments/enums/__init__.py
