# tests/test_health_and_app.py
# -*- coding: utf-8 -*-
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.modules.auth.services import LocalIdentityProvider
from app.modules.payments.repositories import InMemoryPaymentStore, SqlPaymentStore
from app.shared.config.settings_testing import EnvTestingSettings


def test_health_with_memory_storage(client):
    body = client.get("/health").json()

    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert body["storage"] == {"backend": "memory", "reachable": True}


def test_cors_preflight(client):
    resp = client.options(
        "/auth/register",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code == 200
    assert "access-control-allow-origin" in resp.headers


@pytest.mark.asyncio
async def test_lifespan_builds_memory_backends():
    app = create_app(EnvTestingSettings())

    async with LifespanManager(app):
        assert isinstance(app.state.payment_store, InMemoryPaymentStore)
        assert app.state.engine is None
        assert callable(app.state.code_generator)


@pytest.mark.asyncio
async def test_lifespan_builds_sql_backends(tmp_path):
    settings = EnvTestingSettings(
        storage_backend="sql",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'app.db'}",
    )
    app = create_app(settings)

    async with LifespanManager(app):
        assert isinstance(app.state.payment_store, SqlPaymentStore)
        assert isinstance(app.state.identity_provider, LocalIdentityProvider)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            body = (await client.get("/health")).json()

    assert body["storage"] == {"backend": "sql", "reachable": True}

# Fin del archivo tests/test_health_and_app.py
