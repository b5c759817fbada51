# -*- coding: utf-8 -*-
"""
app/modules/auth/schemas/auth_schemas.py

Schemas Pydantic para el registro con código.

Incluye:
- Registro de usuario (email, password, registrationCode)
- Validación previa de un código
- Respuestas estandarizadas

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from pydantic import field_validator

from app.shared.utils import MAX_PASSWORD_LENGTH
from app.shared.utils.base_models import EmailStr, Field, UTF8SafeModel


# ========== REQUESTS ==========

class RegisterRequest(UTF8SafeModel):
    """Petición de registro gateada por código."""
    email: EmailStr
    # La longitud mínima la valida el servicio para responder con el mensaje de dominio
    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH)
    registration_code: str = Field(..., alias="registrationCode", max_length=64)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        """Normaliza email a minúsculas"""
        return v.lower().strip() if v else v


class ValidateCodeRequest(UTF8SafeModel):
    registration_code: str = Field(..., alias="registrationCode", max_length=64)


# ========== RESPONSES ==========

class RegisterResponse(UTF8SafeModel):
    custom_token: str = Field(..., alias="customToken")


class ValidateCodeResponse(UTF8SafeModel):
    valid: bool = True
    code: str


__all__ = [
    "RegisterRequest",
    "ValidateCodeRequest",
    "RegisterResponse",
    "ValidateCodeResponse",
]

# Fin del archivo app/modules/auth/schemas/auth_schemas.py
