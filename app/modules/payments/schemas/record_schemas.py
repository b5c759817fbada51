# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/record_schemas.py

Snapshots inmutables de los registros de pago y códigos.

Los almacenes (SQL y en memoria) devuelven siempre estos modelos, nunca
objetos ORM, para que los llamadores no dependan de una sesión abierta.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from app.modules.payments.enums import PaymentStatus, RegistrationCodeStatus


class PaymentRecordSnapshot(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    transaction_id: str
    reference: Optional[str] = None
    status: PaymentStatus = PaymentStatus.UNKNOWN
    registration_code: Optional[str] = None
    amount_in_cents: Optional[int] = None
    event_type: Optional[str] = None
    raw_event: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime


class RegistrationCodeSnapshot(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    code: str
    status: RegistrationCodeStatus = RegistrationCodeStatus.APPROVED
    transaction_id: str
    used: bool = False
    used_by: Optional[str] = None
    used_at: Optional[datetime] = None
    created_at: datetime


class AttachResult(BaseModel):
    """
    Resultado de attach_registration_code.

    attached=False indica que el registro ya tenía código (entrega repetida)
    o que aún no está APPROVED; en ese caso record refleja el estado vigente.
    """

    model_config = ConfigDict(frozen=True)

    record: PaymentRecordSnapshot
    attached: bool


__all__ = [
    "PaymentRecordSnapshot",
    "RegistrationCodeSnapshot",
    "AttachResult",
]

# Fin del archivo app/modules/payments/schemas/record_schemas.py
