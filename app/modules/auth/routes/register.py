# -*- coding: utf-8 -*-
"""
app/modules/auth/routes/register.py

Rutas públicas de registro:
- POST /auth/register                     → 201 {"customToken": ...}
- POST /auth/registration-codes/validate  → verificación previa del código

Los errores de dominio los traduce el handler global a
{"error": {"kind", "message"}} con mensajes para mostrar al usuario.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-10
"""

# Note: NOT using 'from __future__ import annotations' to ensure FastAPI
# can properly resolve dependency annotations

import logging

from fastapi import APIRouter, Depends, status

from app.modules.auth.schemas import (
    RegisterRequest,
    RegisterResponse,
    ValidateCodeRequest,
    ValidateCodeResponse,
)
from app.modules.auth.services.registration_flow_service import RegistrationFlowService
from app.modules.payments.metrics import observe_registration
from app.shared.errors import DomainError
from .deps import get_registration_flow_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth-public"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    summary="Registro de usuario con código",
)
async def register(
    payload: RegisterRequest,
    flow: RegistrationFlowService = Depends(get_registration_flow_service),
) -> RegisterResponse:
    """
    Crea la cuenta canjeando el código de registro.

    Flujo:
      1. Validación de correo, contraseña y código.
      2. Creación de la identidad (se compensa si el canje falla).
      3. Canje atómico del código + creación de la cuenta.
      4. Emisión del custom token.
    """
    try:
        result = await flow.register(payload.email, payload.password, payload.registration_code)
    except DomainError as e:
        observe_registration(e.kind)
        raise

    observe_registration("success")
    return RegisterResponse(custom_token=result.custom_token)


@router.post(
    "/registration-codes/validate",
    response_model=ValidateCodeResponse,
    summary="Verificación previa de un código",
)
async def validate_registration_code(
    payload: ValidateCodeRequest,
    flow: RegistrationFlowService = Depends(get_registration_flow_service),
) -> ValidateCodeResponse:
    """Solo lectura: no marca el código ni crea nada."""
    snapshot = await flow.check_code(payload.registration_code)
    return ValidateCodeResponse(valid=True, code=snapshot.code)


# Fin del archivo app/modules/auth/routes/register.py
