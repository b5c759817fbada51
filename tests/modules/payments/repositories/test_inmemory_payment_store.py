# tests/modules/payments/repositories/test_inmemory_payment_store.py
# -*- coding: utf-8 -*-
import asyncio

import pytest
from pydantic import ValidationError

from app.modules.payments.enums import PaymentStatus
from app.shared.errors import AlreadyUsedError


@pytest.mark.asyncio
async def test_concurrent_attach_assigns_a_single_code(payment_store):
    await payment_store.record_event("tx-1", status=PaymentStatus.APPROVED)

    results = await asyncio.gather(
        *(payment_store.attach_registration_code("tx-1", f"CODE{i:02d}") for i in range(5))
    )

    assert sum(r.attached for r in results) == 1
    assert len(payment_store.codes) == 1
    winner = next(r for r in results if r.attached).record.registration_code
    assert all(r.record.registration_code == winner for r in results)


@pytest.mark.asyncio
async def test_concurrent_redeem_has_one_winner(payment_store):
    await payment_store.record_event("tx-1", status=PaymentStatus.APPROVED)
    await payment_store.attach_registration_code("tx-1", "K4PX7Q")

    results = await asyncio.gather(
        payment_store.redeem_registration_code("K4PX7Q", uid="uid-1", email="ana@quehaypahoy.co"),
        payment_store.redeem_registration_code("K4PX7Q", uid="uid-2", email="luis@quehaypahoy.co"),
        return_exceptions=True,
    )

    winners = [r for r in results if not isinstance(r, Exception)]
    losers = [r for r in results if isinstance(r, Exception)]
    assert len(winners) == 1
    assert len(losers) == 1 and isinstance(losers[0], AlreadyUsedError)
    assert len(payment_store.accounts) == 1


@pytest.mark.asyncio
async def test_ignored_transition_does_not_count_as_write(payment_store):
    await payment_store.record_event("tx-1", status=PaymentStatus.DECLINED)
    before = payment_store.write_count
    await payment_store.record_event("tx-1", status=PaymentStatus.APPROVED)

    assert payment_store.write_count == before
    assert payment_store.records["tx-1"]["status"] is PaymentStatus.DECLINED


@pytest.mark.asyncio
async def test_snapshots_are_detached_from_internal_state(payment_store):
    raw = {"data": {"transaction": {"id": "tx-1"}}}
    rec = await payment_store.record_event("tx-1", status=PaymentStatus.PENDING, raw_event=raw)
    raw["data"]["transaction"]["id"] = "mutado"

    assert payment_store.records["tx-1"]["raw_event"]["data"]["transaction"]["id"] == "tx-1"
    with pytest.raises(ValidationError):
        rec.status = PaymentStatus.APPROVED

# Fin del archivo tests/modules/payments/repositories/test_inmemory_payment_store.py
