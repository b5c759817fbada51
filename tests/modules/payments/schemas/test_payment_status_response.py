# tests/modules/payments/schemas/test_payment_status_response.py
# -*- coding: utf-8 -*-
from datetime import datetime, timezone

import pytest

from app.modules.payments.enums import PaymentStatus
from app.modules.payments.schemas import PaymentRecordSnapshot, PaymentStatusResponse

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def _record(status, code=None):
    return PaymentRecordSnapshot(
        transaction_id="tx-1",
        reference="ref-1",
        status=status,
        registration_code=code,
        created_at=NOW,
        updated_at=NOW,
    )


def test_approved_with_code_is_final_and_exposes_code():
    resp = PaymentStatusResponse.from_record(_record(PaymentStatus.APPROVED, "K4PX7Q"))
    body = resp.model_dump(by_alias=True, exclude_none=True)

    assert body["transactionId"] == "tx-1"
    assert body["registrationCode"] == "K4PX7Q"
    assert body["isFinal"] is True
    assert body["retryAfterSeconds"] == 60


def test_approved_without_code_keeps_polling():
    resp = PaymentStatusResponse.from_record(_record(PaymentStatus.APPROVED))
    assert resp.is_final is False
    assert resp.retry_after_seconds == 5
    assert resp.registration_code is None


def test_pending_is_not_final():
    resp = PaymentStatusResponse.from_record(_record(PaymentStatus.PENDING))
    assert resp.is_final is False


@pytest.mark.parametrize("status", [PaymentStatus.DECLINED, PaymentStatus.VOIDED, PaymentStatus.ERROR])
def test_failed_statuses_are_final_without_code(status):
    resp = PaymentStatusResponse.from_record(_record(status, code="SHOULD1"))
    assert resp.is_final is True
    assert resp.registration_code is None

# Fin del archivo tests/modules/payments/schemas/test_payment_status_response.py
