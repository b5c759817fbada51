# -*- coding: utf-8 -*-
"""
app/shared/utils/log_masking.py

Helpers para enmascarar datos sensibles antes de enviarlos a logs.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-05
"""

from typing import Optional


def mask_secret(secret: Optional[str]) -> str:
    """
    Enmascara un secreto: solo se registra su longitud, nunca caracteres.

    >>> mask_secret("prod_events_abc123")
    '***(18)'
    """
    if not secret:
        return "<empty>"
    return f"***({len(secret)})"


def mask_email(email: Optional[str]) -> str:
    """abc***@dominio para logs sin PII completa."""
    if not email:
        return "empty"
    local, _, domain = email.partition("@")
    prefix = local[:3] + "***"
    return f"{prefix}@{domain}" if domain else prefix


__all__ = ["mask_secret", "mask_email"]
