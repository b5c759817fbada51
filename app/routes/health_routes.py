# -*- coding: utf-8 -*-
"""
app/routes/health_routes.py

Endpoint básico de health check del backend.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-11
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.shared.database import check_database_health

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backend",
    description=(
        "Devuelve el estado básico del backend, incluyendo verificación "
        "simple de conectividad del almacenamiento."
    ),
)
async def health_check(request: Request) -> dict:
    """
    Health check básico del backend.

    Returns:
        dict: información mínima de estado de la aplicación.
    """
    settings = request.app.state.settings
    engine = getattr(request.app.state, "engine", None)

    # Sin engine: almacenes en memoria, siempre alcanzables
    storage_ok = await check_database_health(engine, timeout_s=2.0) if engine is not None else True

    return {
        "status": "ok" if storage_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "storage": {
            "backend": "sql" if engine is not None else "memory",
            "reachable": storage_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo app/routes/health_routes.py
