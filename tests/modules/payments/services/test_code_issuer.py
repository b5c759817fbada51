# tests/modules/payments/services/test_code_issuer.py
# -*- coding: utf-8 -*-
import random
import re

import pytest

from app.modules.payments.enums import PaymentStatus
from app.modules.payments.services.code_issuer import (
    CODE_LENGTH,
    generate_registration_code,
    issue_registration_code,
    normalize_registration_code,
)
from app.shared.errors import StorageError

CODE_RE = re.compile(r"^[A-Z0-9]{6}$")


def test_generated_codes_have_four_letters_and_two_digits():
    rng = random.Random(20261018)
    codes = [generate_registration_code(rng) for _ in range(1000)]
    for code in codes:
        assert len(code) == CODE_LENGTH == 6
        assert CODE_RE.match(code), code
        assert sum(c.isalpha() for c in code) == 4
        assert sum(c.isdigit() for c in code) == 2


def test_digit_positions_vary():
    rng = random.Random(7)
    positions = {
        tuple(i for i, c in enumerate(generate_registration_code(rng)) if c.isdigit())
        for _ in range(200)
    }
    assert len(positions) > 1


def test_default_generator_needs_no_rng():
    assert CODE_RE.match(generate_registration_code())


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("k4px7q", "K4PX7Q"),
        (" K4-PX 7Q ", "K4PX7Q"),
        ("Ｋ４ＰＸ７Ｑ", "K4PX7Q"),
        ("ñK4PX7Q", "K4PX7Q"),
        ("", ""),
        (None, ""),
        ("---", ""),
    ],
)
def test_normalize_registration_code(raw, expected):
    assert normalize_registration_code(raw) == expected


async def _approved(store, tid="tx-1"):
    return await store.record_event(tid, status=PaymentStatus.APPROVED, reference="ref-1")


@pytest.mark.asyncio
async def test_issue_attaches_code_to_approved_payment(payment_store):
    await _approved(payment_store)
    result = await issue_registration_code(payment_store, "tx-1", generator=lambda: "ABCD12")

    assert result.attached is True
    assert result.record.registration_code == "ABCD12"
    assert payment_store.codes["ABCD12"]["transaction_id"] == "tx-1"
    assert payment_store.codes["ABCD12"]["used"] is False


@pytest.mark.asyncio
async def test_issue_regenerates_on_collision(payment_store):
    await _approved(payment_store, "tx-1")
    await _approved(payment_store, "tx-2")
    await issue_registration_code(payment_store, "tx-1", generator=lambda: "AAAA11")

    candidates = iter(["AAAA11", "AAAA11", "BBBB22"])
    result = await issue_registration_code(payment_store, "tx-2", generator=lambda: next(candidates))

    assert result.attached is True
    assert result.record.registration_code == "BBBB22"
    assert payment_store.codes["AAAA11"]["transaction_id"] == "tx-1"


@pytest.mark.asyncio
async def test_issue_gives_up_after_max_attempts(payment_store):
    await _approved(payment_store, "tx-1")
    await _approved(payment_store, "tx-2")
    await issue_registration_code(payment_store, "tx-1", generator=lambda: "AAAA11")

    with pytest.raises(StorageError):
        await issue_registration_code(
            payment_store, "tx-2", generator=lambda: "AAAA11", max_attempts=3
        )
    assert payment_store.records["tx-2"]["registration_code"] is None


@pytest.mark.asyncio
async def test_issue_does_not_replace_existing_code(payment_store):
    await _approved(payment_store)
    await issue_registration_code(payment_store, "tx-1", generator=lambda: "FIRST1")
    result = await issue_registration_code(payment_store, "tx-1", generator=lambda: "OTHER2")

    assert result.attached is False
    assert result.record.registration_code == "FIRST1"
    assert "OTHER2" not in payment_store.codes

# Fin del archivo tests/modules/payments/services/test_code_issuer.py
