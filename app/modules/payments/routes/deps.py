# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/deps.py

Dependencias FastAPI del módulo Payments.

El almacén y el generador de códigos los construye el lifespan de la app y
viven en app.state; los tests los sustituyen con app.dependency_overrides.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request

from app.shared.config import PaymentsSettings, get_payments_settings
from app.shared.errors import ConfigurationError
from app.modules.payments.repositories.payment_store import PaymentStore
from app.modules.payments.services.code_issuer import (
    CodeGenerator,
    generate_registration_code,
)


def get_payment_store(request: Request) -> PaymentStore:
    store = getattr(request.app.state, "payment_store", None)
    if store is None:
        raise ConfigurationError("Almacén de pagos no inicializado.")
    return store


def get_code_generator(request: Request) -> CodeGenerator:
    return getattr(request.app.state, "code_generator", None) or generate_registration_code


def get_payments_config() -> PaymentsSettings:
    return get_payments_settings()


def get_wompi_events_secret() -> Optional[str]:
    """Se lee del entorno en cada request: rotar el secreto no requiere reiniciar."""
    return PaymentsSettings().get_events_secret()


__all__ = [
    "get_payment_store",
    "get_code_generator",
    "get_payments_config",
    "get_wompi_events_secret",
]
