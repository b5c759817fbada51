# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/__init__.py

Ensamblador de rutas del módulo Payments.

Incluye:
- /payments/webhooks/wompi
- /payments/status
- /payments/metrics

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from fastapi import APIRouter

from .metrics import router as metrics_router
from .payments import router as payments_router
from .webhooks_wompi import router as webhooks_wompi_router


def get_payments_router() -> APIRouter:
    router = APIRouter()

    # Prefijo común /payments para todas las rutas del módulo
    router.include_router(webhooks_wompi_router, prefix="/payments")
    router.include_router(payments_router, prefix="/payments")
    router.include_router(metrics_router, prefix="/payments")
    return router


__all__ = ["get_payments_router"]

# Fin del archivo app/modules/payments/routes/__init__.py
