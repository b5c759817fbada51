# -*- coding: utf-8 -*-
"""
app/modules/payments/services/webhooks/__init__.py

Servicios relacionados con webhooks de pagos.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from .payload_paths import ABSENT, coerce_to_signature_string, resolve_path
from .signature_verification import (
    ChecksumVerification,
    build_string_to_sign,
    compute_checksum,
    verify_event_checksum,
)

__all__ = [
    # Rutas en el payload
    "ABSENT",
    "resolve_path",
    "coerce_to_signature_string",

    # Verificación de checksum
    "ChecksumVerification",
    "build_string_to_sign",
    "compute_checksum",
    "verify_event_checksum",
]
