# tests/modules/auth/routes/test_register_routes.py
# -*- coding: utf-8 -*-
"""
POST /auth/register y POST /auth/registration-codes/validate

Cada fallo de validación llega con un kind distinto para que la UI muestre
el mensaje correcto.
"""

import asyncio

import pytest

from app.modules.auth.routes.deps import get_identity_provider
from app.modules.auth.services import InMemoryIdentityProvider

REGISTER = "/auth/register"
VALIDATE = "/auth/registration-codes/validate"
PASSWORD = "papas-con-aji"


def _body(code, email="ana@quehaypahoy.co", password=PASSWORD):
    return {"email": email, "password": password, "registrationCode": code}


@pytest.mark.asyncio
async def test_register_returns_custom_token(async_client, payment_store, token_issuer, approved_code):
    resp = await async_client.post(REGISTER, json=_body(approved_code))

    assert resp.status_code == 201
    token = resp.json()["customToken"]
    uid = token_issuer.decode_custom_token(token)["sub"]
    assert payment_store.accounts[uid]["email"] == "ana@quehaypahoy.co"


@pytest.mark.asyncio
async def test_concurrent_registrations_with_one_code(async_client, payment_store, approved_code):
    responses = await asyncio.gather(
        async_client.post(REGISTER, json=_body(approved_code, "ana@quehaypahoy.co")),
        async_client.post(REGISTER, json=_body(approved_code, "luis@quehaypahoy.co")),
    )

    codes = sorted(r.status_code for r in responses)
    assert codes == [201, 409]
    loser = next(r for r in responses if r.status_code == 409)
    assert loser.json()["error"]["kind"] in {"already-used", "aborted"}
    assert len(payment_store.accounts) == 1


@pytest.mark.asyncio
async def test_used_code_is_409_already_used(async_client, approved_code):
    await async_client.post(REGISTER, json=_body(approved_code))
    resp = await async_client.post(REGISTER, json=_body(approved_code, "luis@quehaypahoy.co"))

    assert resp.status_code == 409
    assert resp.json()["error"] == {
        "kind": "already-used",
        "message": "Este código ya ha sido utilizado.",
    }


@pytest.mark.asyncio
async def test_unknown_code_is_404(async_client):
    resp = await async_client.post(REGISTER, json=_body("ZZZZ99"))

    assert resp.status_code == 404
    assert resp.json()["error"]["kind"] == "not-found"


@pytest.mark.asyncio
async def test_taken_email_is_409(async_client, seed_code):
    first = await seed_code("AAAA11", "tx-1")
    second = await seed_code("BBBB22", "tx-2")
    await async_client.post(REGISTER, json=_body(first))

    resp = await async_client.post(REGISTER, json=_body(second))

    assert resp.status_code == 409
    assert resp.json()["error"]["kind"] == "email-already-exists"


@pytest.mark.asyncio
async def test_short_password_is_400_with_domain_message(async_client, approved_code):
    resp = await async_client.post(REGISTER, json=_body(approved_code, password="corta"))

    assert resp.status_code == 400
    assert resp.json()["error"]["kind"] == "invalid-argument"
    assert "6" in resp.json()["error"]["message"]


@pytest.mark.asyncio
async def test_malformed_body_is_400_with_fields(async_client):
    resp = await async_client.post(REGISTER, json={"email": "no-es-correo", "password": PASSWORD})

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["kind"] == "invalid-argument"
    assert "email" in error["fields"]
    assert "registrationCode" in error["fields"]


@pytest.mark.asyncio
async def test_token_failure_is_500_with_login_hint(app, async_client, payment_store, token_issuer, approved_code):
    provider = InMemoryIdentityProvider(token_issuer, fail_token_issuance=True)
    app.dependency_overrides[get_identity_provider] = lambda: provider

    resp = await async_client.post(REGISTER, json=_body(approved_code))

    assert resp.status_code == 500
    assert resp.json()["error"]["kind"] == "token-issuance-failed"
    assert len(payment_store.accounts) == 1


@pytest.mark.asyncio
async def test_validate_code_is_read_only(async_client, payment_store, approved_code):
    resp = await async_client.post(VALIDATE, json={"registrationCode": "k4px-7q"})

    assert resp.status_code == 200
    assert resp.json() == {"valid": True, "code": approved_code}
    assert payment_store.codes[approved_code]["used"] is False


@pytest.mark.asyncio
async def test_validate_empty_code_is_400(async_client):
    resp = await async_client.post(VALIDATE, json={"registrationCode": "  "})

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Ingresa tu código de registro."

# Fin del archivo tests/modules/auth/routes/test_register_routes.py
