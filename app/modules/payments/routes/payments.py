# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/payments.py

Rutas de consulta de pagos.

Endpoints:
- GET /payments/status?transaction_id=...  (o ?reference=...)

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.shared.errors import InvalidArgumentError, NotFoundError
from app.modules.payments.repositories.payment_store import PaymentStore
from app.modules.payments.schemas.payment_status_schemas import PaymentStatusResponse
from .deps import get_payment_store

router = APIRouter(
    prefix="",
    tags=["payments"],
)


@router.get(
    "/status",
    response_model=PaymentStatusResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="Estado de pago para polling",
    description="""
    Endpoint de estado para la página de confirmación.

    El Frontend puede:
    - Hacer polling hasta que isFinal=True
    - Usar retryAfterSeconds para el intervalo de polling
    - Mostrar registrationCode cuando status=APPROVED

    La referencia es solo una conveniencia de búsqueda: si varias
    transacciones comparten referencia, gana la más reciente.
    """,
)
async def get_payment_status_route(
    transaction_id: Optional[str] = Query(default=None, max_length=128),
    reference: Optional[str] = Query(default=None, max_length=255),
    store: PaymentStore = Depends(get_payment_store),
) -> PaymentStatusResponse:
    transaction_id = (transaction_id or "").strip() or None
    reference = (reference or "").strip() or None

    if (transaction_id is None) == (reference is None):
        raise InvalidArgumentError("Indica exactamente uno de transaction_id o reference.")

    if transaction_id is not None:
        record = await store.get_payment(transaction_id)
    else:
        record = await store.get_latest_payment_by_reference(reference)

    if record is None:
        raise NotFoundError("No encontramos el pago. Si acabas de pagar, intenta de nuevo en unos segundos.")

    return PaymentStatusResponse.from_record(record)


# Fin del archivo app/modules/payments/routes/payments.py
