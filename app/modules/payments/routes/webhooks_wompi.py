# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/webhooks_wompi.py

Webhook endpoint para Wompi.

Endpoint:
- POST /payments/webhooks/wompi

Contrato de respuesta (Wompi reintenta todo lo que no sea 200):
- 200 {"received": true}  en todo outcome de negocio tras verificar el checksum
- 400 {"error": str}      cuerpo o firma mal formados
- 403 {"error": str}      checksum inválido
- 500 {"error": str}      secreto no configurado o fallo de persistencia

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, status

from app.shared.config import PaymentsSettings
from app.shared.errors import ConfigurationError, DomainError, SignatureMismatchError
from app.shared.utils.json_response import json_response_utf8
from app.modules.payments.facades.webhooks import handle_wompi_event
from app.modules.payments.metrics.exporters.prometheus_exporter import (
    WEBHOOKS_PROCESSING_SECONDS,
    PROVIDER,
    observe_webhook_outcome,
    observe_webhook_received,
    observe_webhook_rejected,
    observe_webhook_verified,
)
from app.modules.payments.repositories.payment_store import PaymentStore
from app.modules.payments.services.code_issuer import CodeGenerator
from .deps import (
    get_code_generator,
    get_payment_store,
    get_payments_config,
    get_wompi_events_secret,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/webhooks",
    tags=["payments:webhooks"],
)


def _reject(message: str, status_code: int, reason: str, started: float):
    observe_webhook_rejected(reason)
    WEBHOOKS_PROCESSING_SECONDS.labels(provider=PROVIDER).observe(time.perf_counter() - started)
    return json_response_utf8({"error": message}, status_code=status_code)


@router.post("/wompi", status_code=status.HTTP_200_OK)
async def wompi_webhook(
    request: Request,
    store: PaymentStore = Depends(get_payment_store),
    secret: Optional[str] = Depends(get_wompi_events_secret),
    settings: PaymentsSettings = Depends(get_payments_config),
    code_generator: CodeGenerator = Depends(get_code_generator),
) -> Dict[str, Any]:
    """
    Recibe eventos de transacción de Wompi.

    Idempotente por transaction_id: entregas repetidas no regeneran el
    código de registro.
    """
    observe_webhook_received()
    started = time.perf_counter()

    # Sin secreto no se procesa el payload
    if not secret:
        logger.error("[wompi] WOMPI_EVENTS_SECRET no configurado")
        err = ConfigurationError("Webhook secret not configured.")
        return _reject(err.message, err.http_status, err.kind, started)

    try:
        payload = await request.json()
    except (ValueError, UnicodeDecodeError):
        return _reject("Invalid JSON body.", status.HTTP_400_BAD_REQUEST, "malformed-request", started)
    if not isinstance(payload, dict):
        return _reject("Body must be a JSON object.", status.HTTP_400_BAD_REQUEST, "malformed-request", started)

    if settings.webhook_log_payloads:
        logger.debug(f"[wompi] payload recibido: {payload}")

    try:
        outcome = await handle_wompi_event(
            payload,
            store=store,
            secret=secret,
            code_generator=code_generator,
            max_code_attempts=settings.registration_code_max_attempts,
        )
    except SignatureMismatchError as e:
        observe_webhook_verified("failure", time.perf_counter() - started)
        observe_webhook_rejected(e.kind)
        return json_response_utf8({"error": e.message}, status_code=e.http_status)
    except DomainError as e:
        if e.http_status >= 500:
            logger.error(f"[wompi] {e.kind}: {e.message}")
        else:
            logger.info(f"[wompi] rechazado {e.kind}: {e.message}")
        return _reject(e.message, e.http_status, e.kind, started)
    except Exception:
        logger.exception("[wompi] error inesperado procesando el evento")
        return _reject("Internal server error.", status.HTTP_500_INTERNAL_SERVER_ERROR, "internal", started)

    observe_webhook_verified("success", time.perf_counter() - started)
    observe_webhook_outcome(outcome.outcome.value)
    logger.info(f"[wompi] tx={outcome.transaction_id} outcome={outcome.outcome.value}")
    return {"received": True}


# Fin del archivo app/modules/payments/routes/webhooks_wompi.py
