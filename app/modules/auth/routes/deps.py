# -*- coding: utf-8 -*-
"""
app/modules/auth/routes/deps.py

Dependencias FastAPI del módulo Auth.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-10
"""

from fastapi import Depends, Request

from app.shared.errors import ConfigurationError
from app.modules.auth.services.identity_provider import IdentityProvider
from app.modules.auth.services.registration_flow_service import RegistrationFlowService
from app.modules.payments.repositories.payment_store import PaymentStore
from app.modules.payments.routes.deps import get_payment_store


def get_identity_provider(request: Request) -> IdentityProvider:
    provider = getattr(request.app.state, "identity_provider", None)
    if provider is None:
        raise ConfigurationError("Proveedor de identidad no inicializado.")
    return provider


def get_registration_flow_service(
    store: PaymentStore = Depends(get_payment_store),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> RegistrationFlowService:
    return RegistrationFlowService(store, identity_provider)


__all__ = ["get_identity_provider", "get_registration_flow_service"]
