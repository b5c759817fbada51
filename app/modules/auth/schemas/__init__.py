# -*- coding: utf-8 -*-
"""
app/modules/auth/schemas/__init__.py

Schemas del módulo Auth.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from .auth_schemas import (
    RegisterRequest,
    RegisterResponse,
    ValidateCodeRequest,
    ValidateCodeResponse,
)
from .user_schemas import UserAccountSnapshot

__all__ = [
    "RegisterRequest",
    "RegisterResponse",
    "ValidateCodeRequest",
    "ValidateCodeResponse",
    "UserAccountSnapshot",
]
