# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/__init__.py

Schemas Pydantic del módulo Payments.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from .payment_status_schemas import PaymentStatusResponse
from .record_schemas import (
    AttachResult,
    PaymentRecordSnapshot,
    RegistrationCodeSnapshot,
)

__all__ = [
    "AttachResult",
    "PaymentRecordSnapshot",
    "RegistrationCodeSnapshot",
    "PaymentStatusResponse",
]
