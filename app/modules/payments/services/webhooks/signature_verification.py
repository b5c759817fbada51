# -*- coding: utf-8 -*-
"""
app/modules/payments/services/webhooks/signature_verification.py

Verificación del checksum de eventos Wompi.

Algoritmo:
1. Por cada ruta en signature.properties, resolver el valor dentro de data
   (ruta inexistente o null → "").
2. Concatenar los valores en orden, sin separador.
3. Agregar el timestamp crudo del evento y el secreto de eventos.
4. SHA-256 sobre los bytes UTF-8, en hex minúsculas.
5. Comparar en tiempo constante con signature.checksum (sin distinguir
   mayúsculas).

IMPORTANTE:
- Nunca se registran el secreto ni la cadena a firmar.
- Un secreto ausente es un error de configuración del servidor (500), no
  del cliente.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from app.shared.errors import ConfigurationError, MalformedRequestError
from app.shared.utils.log_masking import mask_secret
from .payload_paths import coerce_to_signature_string, resolve_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChecksumVerification:
    valid: bool
    computed: str
    received: str


def build_string_to_sign(
    properties: Sequence[str],
    data: Any,
    timestamp: Any,
    secret: str,
) -> str:
    """Concatena propiedades resueltas + timestamp + secreto."""
    values = [coerce_to_signature_string(resolve_path(data, path)) for path in properties]
    return "".join(values) + coerce_to_signature_string(timestamp) + secret


def compute_checksum(
    properties: Sequence[str],
    data: Any,
    timestamp: Any,
    secret: str,
) -> str:
    """SHA-256 en hex minúsculas de la cadena a firmar."""
    to_sign = build_string_to_sign(properties, data, timestamp, secret)
    return hashlib.sha256(to_sign.encode("utf-8")).hexdigest()


def _extract_signature(payload: Mapping[str, Any]) -> tuple[str, list[str]]:
    signature = payload.get("signature")
    if not isinstance(signature, Mapping):
        raise MalformedRequestError("Missing signature.")

    checksum = signature.get("checksum")
    if not isinstance(checksum, str) or not checksum.strip():
        raise MalformedRequestError("Missing checksum.")

    properties = signature.get("properties")
    if not isinstance(properties, list):
        raise MalformedRequestError("Signature properties must be an array.")
    if not all(isinstance(p, str) for p in properties):
        raise MalformedRequestError("Signature properties must be strings.")

    return checksum.strip(), properties


def verify_event_checksum(
    payload: Mapping[str, Any],
    secret: Optional[str],
) -> ChecksumVerification:
    """
    Verifica el checksum de un evento Wompi.

    Args:
        payload: Cuerpo JSON ya parseado.
        secret: Secreto de eventos configurado.

    Returns:
        ChecksumVerification con el resultado y ambos digests.

    Raises:
        ConfigurationError: si el secreto no está configurado.
        MalformedRequestError: si faltan checksum o properties.
    """
    if not secret:
        logger.error("[wompi] WOMPI_EVENTS_SECRET no configurado; se rechaza el evento")
        raise ConfigurationError("Webhook secret not configured.")

    received, properties = _extract_signature(payload)
    computed = compute_checksum(
        properties,
        payload.get("data"),
        payload.get("timestamp"),
        secret,
    )

    valid = hmac.compare_digest(
        computed.encode("ascii"),
        received.lower().encode("utf-8"),
    )

    if not valid:
        logger.warning(
            f"[wompi] checksum inválido received={received} computed={computed} "
            f"secret={mask_secret(secret)} properties={properties}"
        )

    return ChecksumVerification(valid=valid, computed=computed, received=received)


__all__ = [
    "ChecksumVerification",
    "build_string_to_sign",
    "compute_checksum",
    "verify_event_checksum",
]

# Fin del archivo app/modules/payments/services/webhooks/signature_verification.py
