# -*- coding: utf-8 -*-
"""
app/main.py

Punto de entrada principal del backend Qué hay Pa' hoy.

Ajustes clave:
- create_app(): factory usada por uvicorn y por los tests
- Lifespan: logging, construcción explícita del almacenamiento (SQL o en
  memoria), creación de tablas opcional y liberación del engine al apagar
- Los almacenes viven en app.state; las rutas los reciben por dependencias
- CORS desde CORS_ORIGINS

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-11
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Cargar .env ANTES de leer settings; las variables del entorno mandan
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=_ENV_PATH, override=False)

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.modules.auth.services import (
    InMemoryIdentityProvider,
    LocalIdentityProvider,
    TokenIssuerService,
)
from app.modules.payments.repositories import InMemoryPaymentStore, SqlPaymentStore
from app.modules.payments.services.code_issuer import generate_registration_code
from app.routes import router
from app.shared.config import BaseAppSettings, get_settings, setup_logging
from app.shared.database import build_engine, build_session_factory, create_all
from app.shared.utils.http_exceptions import register_exception_handlers
from app.shared.utils.json_response import UTF8JSONResponse

logger = logging.getLogger(__name__)


async def _build_storage(app: FastAPI, settings: BaseAppSettings) -> None:
    """Construye almacén de pagos y proveedor de identidad en app.state."""
    token_issuer = TokenIssuerService.from_settings(settings)

    if settings.storage_backend == "memory":
        logger.warning("Almacenamiento en memoria: los datos se pierden al reiniciar")
        app.state.engine = None
        app.state.payment_store = InMemoryPaymentStore()
        app.state.identity_provider = InMemoryIdentityProvider(token_issuer)
        return

    engine = build_engine(settings.database_url, echo=settings.db_echo_sql)
    if settings.db_auto_create:
        await create_all(engine)
    session_factory = build_session_factory(engine)

    app.state.engine = engine
    app.state.payment_store = SqlPaymentStore(session_factory)
    app.state.identity_provider = LocalIdentityProvider(session_factory, token_issuer)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings: BaseAppSettings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    # Los tests pueden inyectar almacenes antes del arranque
    if getattr(app.state, "payment_store", None) is None:
        await _build_storage(app, settings)
    if getattr(app.state, "code_generator", None) is None:
        app.state.code_generator = generate_registration_code

    logger.info(f"🟢 {settings.app_name} iniciado (env={settings.python_env}, storage={settings.storage_backend})")
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()
            logger.info("[DB] Engine liberado")
        logger.info(f"🔴 {settings.app_name} apagado.")


openapi_tags = [
    {"name": "payments", "description": "Estado de pagos"},
    {"name": "payments:webhooks", "description": "Eventos del procesador de pagos"},
    {"name": "auth-public", "description": "Registro con código"},
]


def _configure_cors(app_instance: FastAPI, settings: BaseAppSettings) -> dict:
    """
    Configura CORS middleware.

    Returns:
        dict con la configuración aplicada para logging.
    """
    origins_list = settings.get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        # "*" con allow_credentials=True es inválido en navegadores
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    return cors_config


def create_app(settings: Optional[BaseAppSettings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Qué hay Pa' hoy API",
        description="Pagos Wompi, códigos de registro y alta de cuentas",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )
    app.state.settings = settings

    register_exception_handlers(app)
    cors_config = _configure_cors(app, settings)
    logger.debug(f"CORS: {cors_config}")

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run("app.main:app", host=_settings.app_host, port=_settings.app_port)

# Fin del archivo app/main.py
