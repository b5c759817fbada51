# -*- coding: utf-8 -*-
"""
app/modules/auth/services/__init__.py

Servicios del módulo Auth.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-10
"""

from .identity_provider import IdentityProvider, LocalIdentityProvider
from .inmemory import InMemoryIdentityProvider
from .registration_flow_service import RegistrationFlowService, RegistrationResult
from .token_issuer_service import TokenIssuerService

__all__ = [
    "IdentityProvider",
    "LocalIdentityProvider",
    "InMemoryIdentityProvider",
    "RegistrationFlowService",
    "RegistrationResult",
    "TokenIssuerService",
]
