# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/payment_status_schemas.py

Schemas para el endpoint de estado de pago (polling desde la página de
confirmación).

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.payments.enums import PaymentStatus, is_terminal
from .record_schemas import PaymentRecordSnapshot


class PaymentStatusResponse(BaseModel):
    """
    Respuesta del endpoint de estado de pago.

    Contrato estable para FE:
    - isFinal=False → seguir haciendo polling
    - isFinal=True → estado definitivo, dejar de hacer polling
    - registrationCode solo aparece cuando status es APPROVED
    - retryAfterSeconds sugiere cuánto esperar antes del próximo poll
    """

    model_config = ConfigDict(populate_by_name=True)

    transaction_id: str = Field(..., alias="transactionId")
    reference: Optional[str] = None
    status: PaymentStatus
    registration_code: Optional[str] = Field(default=None, alias="registrationCode")
    is_final: bool = Field(..., alias="isFinal")
    updated_at: datetime = Field(..., alias="updatedAt")
    retry_after_seconds: int = Field(default=5, ge=1, le=60, alias="retryAfterSeconds")

    @classmethod
    def from_record(cls, record: PaymentRecordSnapshot) -> "PaymentStatusResponse":
        approved = record.status == PaymentStatus.APPROVED
        # Aprobado sin código todavía: la emisión está en curso
        final = is_terminal(record.status) and not (approved and not record.registration_code)
        return cls(
            transaction_id=record.transaction_id,
            reference=record.reference,
            status=record.status,
            registration_code=record.registration_code if approved else None,
            is_final=final,
            updated_at=record.updated_at,
            retry_after_seconds=60 if final else 5,
        )


__all__ = ["PaymentStatusResponse"]

# Fin del archivo app/modules/payments/schemas/payment_status_schemas.py
