# -*- coding: utf-8 -*-
"""
app/routes/__init__.py

Ensamblador principal de ruteadores de la API.

Responsabilidades:
- Incluir el router de health (/health).
- Montar los routers de Payments (/payments/...) y Auth (/auth/...).

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-11
"""

from fastapi import APIRouter

from app.modules.auth.routes import get_auth_routers
from app.modules.payments.routes import get_payments_router
from .health_routes import router as health_router

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)

router.include_router(get_payments_router())
for _auth_router in get_auth_routers():
    router.include_router(_auth_router)

__all__ = ["router"]

# Fin del archivo app/routes/__init__.py
