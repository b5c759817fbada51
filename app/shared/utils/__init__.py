# -*- coding: utf-8 -*-
"""
app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from .log_masking import mask_email, mask_secret
from .saga import Saga, SagaStep
from .security import (
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    PasswordTooLongError,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

__all__ = [
    # Logging
    "mask_email",
    "mask_secret",

    # Saga
    "Saga",
    "SagaStep",

    # Security
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "MAX_PASSWORD_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "PasswordTooLongError",
]
