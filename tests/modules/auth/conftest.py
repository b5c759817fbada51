# tests/modules/auth/conftest.py
# -*- coding: utf-8 -*-
"""
Fixtures del módulo Auth: códigos aprobados listos para canjear.
"""

from typing import Awaitable, Callable

import pytest
import pytest_asyncio

from app.modules.payments.enums import PaymentStatus
from app.shared.utils.security import verify_password


@pytest.fixture
def seed_code(payment_store) -> Callable[..., Awaitable[str]]:
    """Registra un pago APPROVED con el código indicado y devuelve el código."""

    async def _seed(code: str = "K4PX7Q", transaction_id: str = "tx-1") -> str:
        await payment_store.record_event(transaction_id, status=PaymentStatus.APPROVED, reference="ref-1")
        result = await payment_store.attach_registration_code(transaction_id, code)
        assert result.attached
        return code

    return _seed


@pytest_asyncio.fixture
async def approved_code(seed_code) -> str:
    return await seed_code()


@pytest.fixture
def password_matches(identity_provider) -> Callable[[str, str], bool]:
    """Comprueba la contraseña guardada (hash argon2) de una identidad in-memory."""

    def _check(uid: str, password: str) -> bool:
        user = identity_provider.users.get(uid)
        return bool(user) and verify_password(password, user["password_hash"])

    return _check

# Fin del archivo tests/modules/auth/conftest.py
