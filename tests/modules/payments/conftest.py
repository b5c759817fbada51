# tests/modules/payments/conftest.py
# -*- coding: utf-8 -*-
"""
Fixtures del módulo Payments: constructor de eventos Wompi firmados.
"""

import copy
import hashlib
from typing import Any, Callable, Dict, Optional

import pytest

from app.modules.payments.services.webhooks.payload_paths import (
    coerce_to_signature_string,
    resolve_path,
)

DEFAULT_PROPERTIES = [
    "transaction.id",
    "transaction.status",
    "transaction.amount_in_cents",
]


def sign(payload: Dict[str, Any], secret: str) -> str:
    props = payload["signature"]["properties"]
    values = "".join(coerce_to_signature_string(resolve_path(payload["data"], p)) for p in props)
    to_sign = values + coerce_to_signature_string(payload.get("timestamp")) + secret
    return hashlib.sha256(to_sign.encode("utf-8")).hexdigest()


@pytest.fixture
def sign_event(events_secret) -> Callable[..., str]:
    """Recalcula el checksum de un payload ya modificado."""

    def _sign(payload: Dict[str, Any], secret: Optional[str] = None) -> str:
        return sign(payload, secret or events_secret)

    return _sign


@pytest.fixture
def wompi_event(events_secret) -> Callable[..., Dict[str, Any]]:
    """
    Fábrica de eventos transaction.updated firmados con el secreto de pruebas.

    Uso:
        payload = wompi_event("tx-1", status="APPROVED", reference="ref-1")
    """

    def _build(
        transaction_id: Any = "tx-1",
        *,
        status: Optional[str] = "APPROVED",
        reference: Optional[str] = "ref-1",
        amount_in_cents: Optional[int] = 4000000,
        timestamp: Any = 1530291411,
        secret: Optional[str] = None,
        properties: Optional[list] = None,
    ) -> Dict[str, Any]:
        transaction: Dict[str, Any] = {"id": transaction_id}
        if status is not None:
            transaction["status"] = status
        if reference is not None:
            transaction["reference"] = reference
        if amount_in_cents is not None:
            transaction["amount_in_cents"] = amount_in_cents
        payload: Dict[str, Any] = {
            "event": "transaction.updated",
            "data": {"transaction": transaction},
            "environment": "test",
            "signature": {
                "properties": copy.copy(properties or DEFAULT_PROPERTIES),
                "checksum": "",
            },
            "timestamp": timestamp,
        }
        payload["signature"]["checksum"] = sign(payload, secret or events_secret)
        return payload

    return _build

# Fin del archivo tests/modules/payments/conftest.py
