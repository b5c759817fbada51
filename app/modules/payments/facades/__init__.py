# -*- coding: utf-8 -*-
"""
app/modules/payments/facades/__init__.py

Funciones de alto nivel (API pública) del módulo Payments.
"""

from .webhooks import WebhookOutcome, WebhookOutcomeKind, handle_wompi_event

__all__ = ["WebhookOutcome", "WebhookOutcomeKind", "handle_wompi_event"]
