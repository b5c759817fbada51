# -*- coding: utf-8 -*-
"""
Proveedor de identidad in-memory para pruebas y STORAGE_BACKEND=memory.
No toca DB. Permite inyectar fallos y un hook tras crear la identidad.
Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-10
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Dict, List, Optional

from app.modules.auth.services.identity_provider import new_uid
from app.modules.auth.services.token_issuer_service import TokenIssuerService
from app.shared.errors import EmailAlreadyExistsError
from app.shared.utils.security import hash_password

UserCreatedHook = Callable[[str], Awaitable[None]]


class InMemoryIdentityProvider:
    """Implementa IdentityProvider sobre un diccionario uid → (email, hash)."""

    def __init__(
        self,
        token_issuer: TokenIssuerService,
        *,
        on_user_created: Optional[UserCreatedHook] = None,
        fail_token_issuance: bool = False,
    ) -> None:
        self.token_issuer = token_issuer
        self.users: Dict[str, Dict[str, str]] = {}
        self.deleted_uids: List[str] = []
        self.on_user_created = on_user_created
        self.fail_token_issuance = fail_token_issuance

    async def create_user(self, email: str, password: str) -> str:
        password_hash = await asyncio.to_thread(hash_password, password)
        if any(u["email"] == email for u in self.users.values()):
            raise EmailAlreadyExistsError()
        uid = new_uid()
        self.users[uid] = {"email": email, "password_hash": password_hash}
        if self.on_user_created is not None:
            await self.on_user_created(uid)
        return uid

    async def delete_user(self, uid: str) -> None:
        await asyncio.sleep(0)
        self.users.pop(uid, None)
        self.deleted_uids.append(uid)

    async def create_custom_token(self, uid: str) -> str:
        await asyncio.sleep(0)
        if self.fail_token_issuance:
            raise RuntimeError("token service unavailable")
        return self.token_issuer.create_custom_token(uid)


__all__ = ["InMemoryIdentityProvider"]
