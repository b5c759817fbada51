# -*- coding: utf-8 -*-
"""
app/modules/payments/facades/webhooks/handler.py

Función de alto nivel para verificar y manejar eventos Wompi.

1. Verifica el checksum (sin efectos si falla)
2. Normaliza la transacción
3. Registra/fusiona el estado por transaction_id
4. Si el pago quedó APPROVED sin código, emite uno (compare-and-set)

Entregas repetidas del mismo evento producen el mismo estado final y a lo
sumo un código por transacción.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping, Optional

from app.modules.payments.enums import PaymentStatus
from app.modules.payments.repositories.payment_store import PaymentStore
from app.modules.payments.services.code_issuer import (
    CodeGenerator,
    generate_registration_code,
    issue_registration_code,
)
from app.modules.payments.services.webhooks import verify_event_checksum
from app.shared.errors import SignatureMismatchError
from .normalize import normalize_wompi_event

logger = logging.getLogger(__name__)


class WebhookOutcomeKind(StrEnum):
    CODE_ISSUED = "code_issued"
    CODE_EXISTING = "code_existing"
    STATUS_RECORDED = "status_recorded"
    TRANSITION_IGNORED = "transition_ignored"


@dataclass(frozen=True)
class WebhookOutcome:
    transaction_id: str
    status: PaymentStatus
    outcome: WebhookOutcomeKind
    registration_code_issued: bool = False


async def handle_wompi_event(
    payload: Mapping[str, Any],
    *,
    store: PaymentStore,
    secret: Optional[str],
    code_generator: CodeGenerator = generate_registration_code,
    max_code_attempts: int = 5,
) -> WebhookOutcome:
    """
    Procesa un evento Wompi ya parseado.

    Raises:
        ConfigurationError: secreto no configurado (500)
        MalformedRequestError: faltan campos estructurales (400)
        SignatureMismatchError: checksum inválido (403)
        StorageError: fallo de persistencia (500, el procesador reintenta)
    """
    verification = verify_event_checksum(payload, secret)
    if not verification.valid:
        raise SignatureMismatchError()

    event = normalize_wompi_event(payload)
    logger.info(
        f"[wompi] evento {event.event_type or '-'} tx={event.transaction_id} "
        f"status={event.raw_status!r}→{event.status.value} ref={event.reference or '-'}"
    )

    record = await store.record_event(
        event.transaction_id,
        status=event.status,
        reference=event.reference,
        amount_in_cents=event.amount_in_cents,
        event_type=event.event_type,
        raw_event=dict(payload),
    )

    if record.status != event.status:
        return WebhookOutcome(
            transaction_id=record.transaction_id,
            status=record.status,
            outcome=WebhookOutcomeKind.TRANSITION_IGNORED,
        )

    if event.status != PaymentStatus.APPROVED:
        return WebhookOutcome(
            transaction_id=record.transaction_id,
            status=record.status,
            outcome=WebhookOutcomeKind.STATUS_RECORDED,
        )

    if record.registration_code:
        logger.info(f"[wompi] tx={record.transaction_id} ya tiene código; no se regenera")
        return WebhookOutcome(
            transaction_id=record.transaction_id,
            status=record.status,
            outcome=WebhookOutcomeKind.CODE_EXISTING,
        )

    result = await issue_registration_code(
        store,
        record.transaction_id,
        generator=code_generator,
        max_attempts=max_code_attempts,
    )
    if result.attached:
        logger.info(f"[wompi] código emitido tx={record.transaction_id}")
        outcome = WebhookOutcomeKind.CODE_ISSUED
    else:
        # Una entrega concurrente asignó el código primero
        outcome = WebhookOutcomeKind.CODE_EXISTING

    return WebhookOutcome(
        transaction_id=result.record.transaction_id,
        status=result.record.status,
        outcome=outcome,
        registration_code_issued=result.attached,
    )


__all__ = ["WebhookOutcome", "WebhookOutcomeKind", "handle_wompi_event"]

# Fin del archivo app/modules/payments/facades/webhooks/handler.py
