# tests/modules/payments/facades/test_normalize_wompi_event.py
# -*- coding: utf-8 -*-
import pytest

from app.modules.payments.enums import PaymentStatus
from app.modules.payments.facades.webhooks import normalize_wompi_event
from app.shared.errors import MalformedRequestError


def test_full_transaction_is_normalized():
    event = normalize_wompi_event({
        "event": "transaction.updated",
        "data": {"transaction": {
            "id": "1234-1610641025-49201",
            "status": "approved",
            "reference": "qhph-ref-01",
            "amount_in_cents": 4490000,
        }},
    })
    assert event.transaction_id == "1234-1610641025-49201"
    assert event.status is PaymentStatus.APPROVED
    assert event.raw_status == "approved"
    assert event.reference == "qhph-ref-01"
    assert event.amount_in_cents == 4490000
    assert event.event_type == "transaction.updated"


def test_only_transaction_id_is_required():
    event = normalize_wompi_event({"data": {"transaction": {"id": "tx-9"}}})
    assert event.status is PaymentStatus.UNKNOWN
    assert event.reference is None
    assert event.amount_in_cents is None
    assert event.event_type is None


def test_numeric_id_becomes_string():
    assert normalize_wompi_event({"data": {"transaction": {"id": 98765}}}).transaction_id == "98765"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": None},
        {"data": {}},
        {"data": {"transaction": "tx-1"}},
    ],
)
def test_missing_transaction_is_malformed(payload):
    with pytest.raises(MalformedRequestError, match="Missing transaction"):
        normalize_wompi_event(payload)


@pytest.mark.parametrize("tid", [None, "", "   ", True, {"id": 1}])
def test_missing_transaction_id_is_malformed(tid):
    with pytest.raises(MalformedRequestError, match="Missing transaction id"):
        normalize_wompi_event({"data": {"transaction": {"id": tid}}})

# Fin del archivo tests/modules/payments/facades/test_normalize_wompi_event.py
