# -*- coding: utf-8 -*-
"""
app/shared/utils/http_exceptions.py

Exception handlers de la aplicación.

- DomainError → status del error, cuerpo {"error": {"kind", "message"}}
- RequestValidationError → 400 invalid-argument (no 422): el cliente web
  muestra el mensaje tal cual

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from app.shared.errors import DomainError, InvalidArgumentError
from .json_response import domain_error_response, error_body, json_response_utf8

logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: DomainError):
    if exc.http_status >= 500:
        logger.error(f"[http] {request.method} {request.url.path} → {exc.kind}: {exc.message}")
    else:
        logger.info(f"[http] {request.method} {request.url.path} → {exc.kind}")
    return domain_error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(p) for p in err.get("loc", ())[1:]) for err in exc.errors()]
    logger.info(f"[http] {request.method} {request.url.path} validación fallida: {fields}")
    body = error_body(InvalidArgumentError.kind, InvalidArgumentError.default_message)
    body["error"]["fields"] = [f for f in fields if f]
    return json_response_utf8(body, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


__all__ = [
    "domain_error_handler",
    "request_validation_handler",
    "register_exception_handlers",
]

# Fin del archivo app/shared/utils/http_exceptions.py
