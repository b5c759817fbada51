# -*- coding: utf-8 -*-
"""
app/modules/auth/services/token_issuer_service.py

Servicio responsable de emitir el "custom token" que el cliente web
intercambia por una sesión tras registrarse.

Se apoya en los helpers JWT de app/shared/utils/security.py (python-jose).

Expone:
- create_custom_token(uid, extra_claims?)
- decode_custom_token(token)

Autor: Equipo Qué hay Pa' hoy
Actualizado: 2026-10-10
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, Optional

from app.shared.config.settings_base import BaseAppSettings
from app.shared.utils.security import create_access_token, decode_token

CUSTOM_TOKEN_TYPE = "custom"


class TokenIssuerService:
    """
    Emisión de tokens JWT de aplicación.

    Centraliza secreto, algoritmo, TTL y claims mínimos.
    """

    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl_minutes: int = 60,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_minutes = ttl_minutes

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> "TokenIssuerService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl_minutes=settings.custom_token_ttl_minutes,
        )

    def create_custom_token(
        self,
        uid: str,
        extra_claims: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Crea un token de sesión para el uid recién registrado.

        Args:
            uid: Identificador de la identidad.
            extra_claims: Claims adicionales a incluir en el token.

        Returns:
            JWT en texto plano.
        """
        data: Dict[str, Any] = {"sub": uid}
        if extra_claims:
            data.update(extra_claims)

        return create_access_token(
            data,
            secret=self._secret,
            algorithm=self._algorithm,
            expires_delta=timedelta(minutes=self._ttl_minutes),
            token_type=CUSTOM_TOKEN_TYPE,
        )

    def decode_custom_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Payload si el token es válido y de tipo custom; None en otro caso."""
        payload = decode_token(token, secret=self._secret, algorithm=self._algorithm)
        if payload is None or payload.get("token_type") != CUSTOM_TOKEN_TYPE:
            return None
        return payload


__all__ = ["TokenIssuerService", "CUSTOM_TOKEN_TYPE"]
# Fin del archivo app/modules/auth/services/token_issuer_service.py
