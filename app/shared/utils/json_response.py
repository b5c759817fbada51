# -*- coding: utf-8 -*-
"""
app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

Los mensajes de error para el usuario van en español ("El código no es
válido."); el charset explícito evita mojibake en clientes que no asumen
UTF-8.

Provee:
1. UTF8JSONResponse: default_response_class de la app
2. json_response_utf8: helper funcional
3. error_body / domain_error_response: cuerpo estándar {"error": {kind, message}}

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from app.shared.errors import DomainError


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(
        content=content,
        status_code=status_code,
        headers=headers,
    )


def error_body(kind: str, message: str) -> Dict[str, Any]:
    return {"error": {"kind": kind, "message": message}}


def domain_error_response(error: DomainError) -> UTF8JSONResponse:
    """Traduce un DomainError a su status HTTP con cuerpo estructurado."""
    return json_response_utf8(error_body(error.kind, error.message), status_code=error.http_status)


__all__ = [
    "UTF8JSONResponse",
    "json_response_utf8",
    "error_body",
    "domain_error_response",
]
