# tests/modules/payments/repositories/test_sql_payment_store.py
# -*- coding: utf-8 -*-
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.modules.auth.models import UserAccount
from app.modules.payments.enums import PaymentStatus
from app.modules.payments.models import PaymentRecord, RegistrationCode
from app.modules.payments.repositories import SqlPaymentStore
from app.shared.database import build_session_factory
from app.shared.errors import StorageError


@pytest.mark.asyncio
async def test_rows_are_persisted(sql_engine, sql_store):
    await sql_store.record_event("tx-1", status=PaymentStatus.APPROVED, reference="ref-1")
    await sql_store.attach_registration_code("tx-1", "K4PX7Q")
    await sql_store.redeem_registration_code("K4PX7Q", uid="uid-1", email="ana@quehaypahoy.co")

    factory = build_session_factory(sql_engine)
    async with factory() as session:
        record = await session.get(PaymentRecord, "tx-1")
        code = await session.get(RegistrationCode, "K4PX7Q")
        accounts = (await session.execute(select(func.count()).select_from(UserAccount))).scalar_one()

    assert record.status == "APPROVED"
    assert record.registration_code == "K4PX7Q"
    assert code.used is True
    assert code.used_by == "uid-1"
    assert accounts == 1


@pytest.mark.asyncio
async def test_redeem_with_duplicate_email_fails_without_consuming(sql_store):
    for tid, code in (("tx-1", "AAAA11"), ("tx-2", "BBBB22")):
        await sql_store.record_event(tid, status=PaymentStatus.APPROVED)
        await sql_store.attach_registration_code(tid, code)
    await sql_store.redeem_registration_code("AAAA11", uid="uid-1", email="ana@quehaypahoy.co")

    with pytest.raises(StorageError):
        await sql_store.redeem_registration_code("BBBB22", uid="uid-2", email="ana@quehaypahoy.co")

    # La transacción se revirtió completa
    snap = await sql_store.get_registration_code("BBBB22")
    assert snap.used is False


@pytest.mark.asyncio
async def test_driver_errors_become_storage_errors():
    class _BrokenSession:
        async def __aenter__(self):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        async def __aexit__(self, *exc):
            return False

    store = SqlPaymentStore(lambda: _BrokenSession())
    with pytest.raises(StorageError):
        await store.get_payment("tx-1")

# Fin del archivo tests/modules/payments/repositories/test_sql_payment_store.py
