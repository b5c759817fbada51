# -*- coding: utf-8 -*-
"""
app/shared/errors.py

Excepciones de dominio compartidas por los módulos Payments y Auth.

Cada error expone:
- kind: identificador estable que viaja en las respuestas de la API
- http_status: código HTTP con el que las rutas lo traducen

Las rutas nunca construyen mensajes propios: usan str(error).

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-05
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import status


class DomainError(Exception):
    """Base de todos los errores de dominio del backend."""

    kind: str = "internal"
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Error interno del servidor."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


# ---------------------------------------------------------------------------
# Webhooks
# ---------------------------------------------------------------------------
class ConfigurationError(DomainError):
    """Falta configuración requerida (p. ej. el secreto de eventos)."""

    kind = "configuration-error"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Configuración del servidor incompleta."


class MalformedRequestError(DomainError):
    """El payload no trae los campos estructurales requeridos."""

    kind = "malformed-request"
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Solicitud mal formada."


class SignatureMismatchError(DomainError):
    """El checksum recibido no coincide con el calculado."""

    kind = "signature-mismatch"
    http_status = status.HTTP_403_FORBIDDEN
    default_message = "Invalid checksum."


# ---------------------------------------------------------------------------
# Registro / códigos
# ---------------------------------------------------------------------------
class InvalidArgumentError(DomainError):
    kind = "invalid-argument"
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Datos de registro inválidos."


class NotFoundError(DomainError):
    """El código o la transacción referenciada no existe."""

    kind = "not-found"
    http_status = status.HTTP_404_NOT_FOUND
    default_message = "El código no es válido."


class AlreadyUsedError(DomainError):
    """El código de registro ya fue canjeado."""

    kind = "already-used"
    http_status = status.HTTP_409_CONFLICT
    default_message = "Este código ya ha sido utilizado."


class PreconditionFailedError(DomainError):
    """El código existe pero no corresponde a un pago aprobado."""

    kind = "failed-precondition"
    http_status = status.HTTP_412_PRECONDITION_FAILED
    default_message = "Este código no ha sido asignado a un pago válido."


class EmailAlreadyExistsError(DomainError):
    kind = "email-already-exists"
    http_status = status.HTTP_409_CONFLICT
    default_message = "Ya existe una cuenta con este correo."


class AbortedError(DomainError):
    """
    Carrera de concurrencia perdida o fallo no reconocido durante el registro.

    Solo es reintentable con un código nuevo: el código original ya puede
    estar consumido.
    """

    kind = "aborted"
    http_status = status.HTTP_409_CONFLICT
    default_message = "El registro fue abortado. Por favor, reintenta."


# ---------------------------------------------------------------------------
# Persistencia / credenciales
# ---------------------------------------------------------------------------
class StorageError(DomainError):
    """Fallo transitorio de persistencia; el llamador puede reintentar."""

    kind = "storage-error"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Error de almacenamiento. Intenta de nuevo."


class CodeCollisionError(StorageError):
    """El código generado ya existe; se debe regenerar."""

    kind = "code-collision"

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Colisión de código de registro: {code}")


class TokenIssuanceError(DomainError):
    """
    La cuenta quedó creada pero no se pudo emitir el token de sesión.

    El cliente puede iniciar sesión con su correo y contraseña.
    """

    kind = "token-issuance-failed"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = (
        "Tu cuenta fue creada, pero no pudimos iniciar tu sesión. "
        "Inicia sesión con tu correo y contraseña."
    )

    def __init__(self, uid: str, message: Optional[str] = None) -> None:
        self.uid = uid
        super().__init__(message)


# Errores que el flujo de registro propaga tal cual al cliente
REGISTRATION_VALIDATION_ERRORS = (
    InvalidArgumentError,
    NotFoundError,
    AlreadyUsedError,
    PreconditionFailedError,
    EmailAlreadyExistsError,
)


__all__ = [
    "DomainError",
    "ConfigurationError",
    "MalformedRequestError",
    "SignatureMismatchError",
    "InvalidArgumentError",
    "NotFoundError",
    "AlreadyUsedError",
    "PreconditionFailedError",
    "EmailAlreadyExistsError",
    "AbortedError",
    "StorageError",
    "CodeCollisionError",
    "TokenIssuanceError",
    "REGISTRATION_VALIDATION_ERRORS",
]

# Fin del archivo app/shared/errors.py
