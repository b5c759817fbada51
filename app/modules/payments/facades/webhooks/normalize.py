# -*- coding: utf-8 -*-
"""
app/modules/payments/facades/webhooks/normalize.py

Normalización de eventos Wompi a un DTO interno.

Las variantes del payload han cambiado entre versiones de la integración:
solo el id de la transacción es obligatorio. Referencia, monto, estado y
nombre del evento se toleran ausentes.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.payments.enums import PaymentStatus
from app.shared.errors import MalformedRequestError

logger = logging.getLogger(__name__)


class NormalizedWompiEvent(BaseModel):
    """DTO normalizado de un evento de transacción Wompi."""

    model_config = ConfigDict(frozen=True)

    transaction_id: str = Field(description="ID de la transacción en Wompi")
    status: PaymentStatus = Field(
        default=PaymentStatus.UNKNOWN,
        description="Estado normalizado (mayúsculas, UNKNOWN si no se reconoce)",
    )
    raw_status: Optional[str] = Field(default=None, description="Estado tal como llegó")
    reference: Optional[str] = Field(default=None, description="Referencia del checkout")
    amount_in_cents: Optional[int] = None
    event_type: Optional[str] = Field(default=None, description="p. ej. transaction.updated")


def _as_identifier(value: Any) -> Optional[str]:
    # bool es subclase de int: no es un identificador válido
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _as_amount(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def normalize_wompi_event(payload: Mapping[str, Any]) -> NormalizedWompiEvent:
    """
    Extrae la transacción de un payload ya verificado.

    Raises:
        MalformedRequestError: si falta data.transaction o su id.
    """
    data = payload.get("data")
    transaction = data.get("transaction") if isinstance(data, Mapping) else None
    if not isinstance(transaction, Mapping):
        raise MalformedRequestError("Missing transaction.")

    transaction_id = _as_identifier(transaction.get("id"))
    if transaction_id is None:
        raise MalformedRequestError("Missing transaction id.")

    raw_status = transaction.get("status")
    event_type = payload.get("event")

    return NormalizedWompiEvent(
        transaction_id=transaction_id,
        status=PaymentStatus.normalize(raw_status),
        raw_status=raw_status if isinstance(raw_status, str) else None,
        reference=_as_identifier(transaction.get("reference")),
        amount_in_cents=_as_amount(transaction.get("amount_in_cents")),
        event_type=event_type if isinstance(event_type, str) else None,
    )


__all__ = ["NormalizedWompiEvent", "normalize_wompi_event"]

# Fin del archivo app/modules/payments/facades/webhooks/normalize.py
