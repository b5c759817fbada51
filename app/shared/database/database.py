# -*- coding: utf-8 -*-
"""
app/shared/database/database.py

SQLAlchemy async: construcción explícita de engine y session factory.

No hay engine global: el punto de entrada (app.main) construye el engine,
lo inyecta en los almacenes y lo libera en el shutdown. Así los tests pueden
usar una base aislada (aiosqlite en tmp_path) o almacenes en memoria.

Provee:
- build_engine(url, echo)
- build_session_factory(engine)
- create_all(engine)
- check_database_health(engine)

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-06
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.shared.database.base import Base

logger = logging.getLogger(__name__)


def _mask_url(url: str) -> str:
    """Oculta la contraseña del DSN para logs."""
    if "@" not in url or "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    creds, host = rest.rsplit("@", 1)
    user = creds.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Crea el AsyncEngine.

    Para PostgreSQL (asyncpg) se activa pool_pre_ping; SQLite usa el pool
    por defecto del dialecto.
    """
    kwargs = {"echo": echo}
    if url.startswith("postgresql"):
        kwargs["pool_pre_ping"] = True

    logger.info(f"[DB] Conectando a {_mask_url(url)} (echo={echo})")
    return create_async_engine(url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory sin expire_on_commit para leer objetos tras commit."""
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
    )


async def create_all(engine: AsyncEngine) -> None:
    """
    Crea las tablas de todos los modelos registrados en Base.metadata.

    Importa los módulos de modelos para registrar sus tablas.
    """
    import app.modules.auth.models  # noqa: F401
    import app.modules.payments.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] Tablas verificadas/creadas")


async def check_database_health(engine: AsyncEngine, timeout_s: float = 2.0) -> bool:
    """SELECT 1 con timeout; nunca lanza."""
    async def _ping() -> None:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    try:
        await asyncio.wait_for(_ping(), timeout=timeout_s)
        return True
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
        logger.warning(f"[DB] Health check falló: {e}")
        return False


__all__ = [
    "build_engine",
    "build_session_factory",
    "create_all",
    "check_database_health",
]

# Fin del archivo app/shared/database/database.py
