# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para Qué hay Pa' hoy.

- Fuerza PYTHON_ENV=test ANTES de importar la app (almacenes en memoria)
- Secreto de eventos Wompi fijo para firmar payloads de prueba
- App FastAPI nueva por test, con almacenes inyectados en app.state
- Cliente httpx asíncrono (ASGITransport + asgi-lifespan) y TestClient
"""

import os
from collections.abc import AsyncIterator

# -----------------------------------------------------------------------------
# 0) Variables mínimas de entorno (antes de cualquier import de app.*)
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-for-registration-suite-0001")
os.environ.setdefault("WOMPI_EVENTS_SECRET", "test_events_Zr8mQ2pL")

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from app.modules.auth.services import InMemoryIdentityProvider, TokenIssuerService
from app.modules.payments.repositories import InMemoryPaymentStore
from app.shared.config import get_settings, reset_payments_settings

EVENTS_SECRET = os.environ["WOMPI_EVENTS_SECRET"]


@pytest.fixture(autouse=True)
def _fresh_payments_settings():
    """Cada test relee el entorno de pagos (p. ej. tras monkeypatch.setenv)."""
    reset_payments_settings()
    yield
    reset_payments_settings()


@pytest.fixture
def events_secret() -> str:
    return EVENTS_SECRET


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def token_issuer() -> TokenIssuerService:
    return TokenIssuerService(
        secret="test-secret-for-registration-suite-0001",
        algorithm="HS256",
        ttl_minutes=5,
    )


@pytest.fixture
def payment_store() -> InMemoryPaymentStore:
    return InMemoryPaymentStore()


@pytest.fixture
def identity_provider(token_issuer) -> InMemoryIdentityProvider:
    return InMemoryIdentityProvider(token_issuer)


# -----------------------------------------------------------------------------
# 1) App FastAPI y clientes
# -----------------------------------------------------------------------------
@pytest.fixture
def app(settings, payment_store, identity_provider):
    """
    App nueva por test. El lifespan respeta los almacenes ya presentes en
    app.state, así cada test inspecciona su propio InMemoryPaymentStore.
    """
    from app.main import create_app

    fastapi_app = create_app(settings)
    fastapi_app.state.payment_store = payment_store
    fastapi_app.state.identity_provider = identity_provider
    fastapi_app.state.engine = None
    return fastapi_app


@pytest_asyncio.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport y gestión de
    startup/shutdown mediante asgi-lifespan.
    """
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c

# Fin del archivo tests/conftest.py
