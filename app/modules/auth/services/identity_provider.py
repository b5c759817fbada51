# -*- coding: utf-8 -*-
"""
app/modules/auth/services/identity_provider.py

Proveedor de identidad: crea y elimina credenciales (correo + contraseña)
y emite el token de sesión.

La creación de la identidad no puede unirse a la transacción de canje del
código, por eso el flujo de registro la compensa (delete_user) si el canje
falla.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-10
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Protocol, runtime_checkable

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.modules.auth.models.identity_models import AuthIdentity
from app.modules.auth.services.token_issuer_service import TokenIssuerService
from app.shared.errors import EmailAlreadyExistsError, StorageError
from app.shared.utils.log_masking import mask_email
from app.shared.utils.security import hash_password

logger = logging.getLogger(__name__)


@runtime_checkable
class IdentityProvider(Protocol):

    async def create_user(self, email: str, password: str) -> str:
        """Crea la identidad y devuelve su uid. Lanza EmailAlreadyExistsError."""
        ...

    async def delete_user(self, uid: str) -> None:
        ...

    async def create_custom_token(self, uid: str) -> str:
        ...


def new_uid() -> str:
    return uuid.uuid4().hex


class LocalIdentityProvider:
    """Identidades en la tabla auth_identities; contraseñas con Argon2id."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        token_issuer: TokenIssuerService,
    ) -> None:
        self._session_factory = session_factory
        self._token_issuer = token_issuer

    async def create_user(self, email: str, password: str) -> str:
        # Argon2 es CPU/memoria intensivo: fuera del event loop
        password_hash = await asyncio.to_thread(hash_password, password)
        uid = new_uid()

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    existing = await session.execute(
                        select(AuthIdentity.uid).where(AuthIdentity.email == email)
                    )
                    if existing.scalar_one_or_none() is not None:
                        raise EmailAlreadyExistsError()
                    session.add(AuthIdentity(uid=uid, email=email, password_hash=password_hash))
        except IntegrityError as e:
            # Registro concurrente con el mismo correo
            raise EmailAlreadyExistsError() from e
        except SQLAlchemyError as e:
            logger.error(f"[identity] create_user falló: {e}")
            raise StorageError() from e

        logger.info(f"[identity] identidad creada uid={uid} email={mask_email(email)}")
        return uid

    async def delete_user(self, uid: str) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(delete(AuthIdentity).where(AuthIdentity.uid == uid))
        except SQLAlchemyError as e:
            logger.error(f"[identity] delete_user uid={uid} falló: {e}")
            raise StorageError() from e
        logger.info(f"[identity] identidad eliminada uid={uid}")

    async def create_custom_token(self, uid: str) -> str:
        return self._token_issuer.create_custom_token(uid)


__all__ = ["IdentityProvider", "LocalIdentityProvider", "new_uid"]

# Fin del archivo app/modules/auth/services/identity_provider.py
