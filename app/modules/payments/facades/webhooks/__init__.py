# -*- coding: utf-8 -*-
"""
app/modules/payments/facades/webhooks/__init__.py

Exporta las funciones clave de facades/webhooks.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from .handler import WebhookOutcome, WebhookOutcomeKind, handle_wompi_event
from .normalize import NormalizedWompiEvent, normalize_wompi_event

__all__ = [
    "handle_wompi_event",
    "normalize_wompi_event",
    "NormalizedWompiEvent",
    "WebhookOutcome",
    "WebhookOutcomeKind",
]

# Fin del archivo app/modules/payments/facades/webhooks/__init__.py
