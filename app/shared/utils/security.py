# -*- coding: utf-8 -*-
"""
app/shared/utils/security.py

Primitivas de seguridad del backend.

- Contraseñas: Argon2id vía passlib. Usadas por el proveedor de identidad
  local al crear credenciales.
- Tokens: JWT firmados con python-jose. El "custom token" que recibe el
  cliente tras registrarse se construye aquí.

Los helpers JWT reciben secreto y algoritmo explícitos: no leen settings
en import-time.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-06
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging
import uuid

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import UnknownHashError

logger = logging.getLogger(__name__)

# Longitudes aceptadas para contraseñas de registro; el máximo acota el
# costo de hashear payloads enormes
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 1024

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__type="ID",
    argon2__memory_cost=65536,  # 64 MB
    argon2__time_cost=3,
    argon2__parallelism=2,
)


class PasswordTooLongError(ValueError):
    """La contraseña supera MAX_PASSWORD_LENGTH."""


def hash_password(password: str) -> str:
    """
    Hash Argon2id de la contraseña.

    Raises:
        PasswordTooLongError: si supera MAX_PASSWORD_LENGTH
    """
    if len(password) > MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(f"Máximo {MAX_PASSWORD_LENGTH} caracteres")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True si coincide; un hash corrupto o ajeno cuenta como no coincidente."""
    if len(plain_password) > MAX_PASSWORD_LENGTH:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError):
        logger.warning("Hash de contraseña no reconocido")
        return False


# ---------------------------------------------------------------------------
# JWT
# ---------------------------------------------------------------------------
def create_access_token(
    data: Dict[str, Any],
    *,
    secret: str,
    algorithm: str = "HS256",
    expires_delta: timedelta = timedelta(minutes=60),
    token_type: str = "access",
) -> str:
    """
    Firma un JWT con los claims de `data` más exp, iat, jti y token_type.

    Args:
        data: claims de negocio, p. ej. {"sub": uid}
        secret: clave HMAC
        algorithm: HS256 / HS384 / HS512
        expires_delta: vigencia desde ahora
        token_type: "access", "custom", ...
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        **data,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
        "jti": uuid.uuid4().hex,
        "token_type": token_type,
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_token(
    token: str,
    *,
    secret: str,
    algorithm: str = "HS256",
) -> Optional[Dict[str, Any]]:
    """Claims del token, o None si expiró, la firma no cuadra o está mal formado."""
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError:
        logger.info("JWT expirado")
    except JWTError as e:
        logger.warning(f"JWT rechazado: {e}")
    return None


__all__ = [
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "PasswordTooLongError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
]

# Fin del archivo app/shared/utils/security.py
