# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/metrics.py

GET /payments/metrics: scraping Prometheus del registro propio de pagos
(webhooks recibidos/rechazados, códigos emitidos, registros por resultado).

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.responses import Response

from app.modules.payments.metrics import render_prometheus_metrics

router = APIRouter(tags=["payments-metrics"])


@router.get("/metrics", include_in_schema=False)
async def payments_metrics() -> Response:
    return Response(content=render_prometheus_metrics(), media_type=CONTENT_TYPE_LATEST)


__all__ = ["router"]

# Fin del archivo app/modules/payments/routes/metrics.py
