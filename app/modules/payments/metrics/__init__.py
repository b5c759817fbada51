# -*- coding: utf-8 -*-
"""
app/modules/payments/metrics/__init__.py

Métricas Prometheus del módulo Payments.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from .exporters.prometheus_exporter import (
    observe_registration,
    observe_webhook_outcome,
    observe_webhook_received,
    observe_webhook_rejected,
    observe_webhook_verified,
    render_prometheus_metrics,
)

__all__ = [
    "observe_registration",
    "observe_webhook_outcome",
    "observe_webhook_received",
    "observe_webhook_rejected",
    "observe_webhook_verified",
    "render_prometheus_metrics",
]
