# tests/modules/payments/repositories/conftest.py
# -*- coding: utf-8 -*-
"""
Fixture `store`: el mismo contrato contra InMemoryPaymentStore y
SqlPaymentStore (SQLite en archivo temporal vía aiosqlite).
"""

import pytest
import pytest_asyncio

from app.modules.payments.repositories import InMemoryPaymentStore, SqlPaymentStore
from app.shared.database import build_engine, build_session_factory, create_all


@pytest_asyncio.fixture
async def sql_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'payments.db'}")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def sql_store(sql_engine) -> SqlPaymentStore:
    return SqlPaymentStore(build_session_factory(sql_engine))


@pytest_asyncio.fixture(params=["memory", "sql"])
async def store(request, tmp_path):
    if request.param == "memory":
        yield InMemoryPaymentStore()
        return
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'contract.db'}")
    await create_all(engine)
    try:
        yield SqlPaymentStore(build_session_factory(engine))
    finally:
        await engine.dispose()

# Fin del archivo tests/modules/payments/repositories/conftest.py
