# -*- coding: utf-8 -*-
"""
app/shared/config/settings_payments.py

Configuración de pagos (Wompi) y emisión de códigos de registro.

Descripción:
    Centraliza el secreto de eventos del procesador y los límites de la
    emisión de códigos. El secreto se lee en cada webhook: su ausencia es
    un error de configuración del servidor, no del cliente.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-05
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaymentsSettings(BaseSettings):
    """Configuración del sistema de pagos."""

    # =========================================================================
    # WOMPI
    # =========================================================================

    wompi_events_secret: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("WOMPI_EVENTS_SECRET", "WOMPI_EVENT_SECRET"),
        description="Secreto de eventos usado en el checksum de los webhooks",
    )

    # =========================================================================
    # CÓDIGOS DE REGISTRO
    # =========================================================================

    registration_code_max_attempts: int = Field(
        default=5,
        ge=1,
        description="Intentos de generación ante colisión de código",
    )

    # =========================================================================
    # LOGGING
    # =========================================================================

    webhook_log_payloads: bool = Field(
        default=False,
        description="Registra el payload completo del webhook en DEBUG",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    def get_events_secret(self) -> Optional[str]:
        """Devuelve el secreto en claro, o None si no está configurado o está vacío."""
        if self.wompi_events_secret is None:
            return None
        value = self.wompi_events_secret.get_secret_value().strip()
        return value or None


# Singleton global
_payments_settings: Optional[PaymentsSettings] = None


def get_payments_settings() -> PaymentsSettings:
    """
    Obtiene la instancia global de configuración de pagos.

    Returns:
        PaymentsSettings: Configuración de pagos
    """
    global _payments_settings
    if _payments_settings is None:
        _payments_settings = PaymentsSettings()
    return _payments_settings


def reset_payments_settings() -> None:
    """Descarta el singleton (el siguiente acceso relee el entorno)."""
    global _payments_settings
    _payments_settings = None


__all__ = [
    "PaymentsSettings",
    "get_payments_settings",
    "reset_payments_settings",
]
# Fin del archivo app/shared/config/settings_payments.py
