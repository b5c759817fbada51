# -*- coding: utf-8 -*-
"""
app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Determinista: almacenes en memoria, logging moderado y secretos dummy.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-05
"""

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    python_env: str = "test"

    log_level: str = "WARNING"
    log_format: str = "plain"

    storage_backend: str = "memory"
    database_url: str = "sqlite+aiosqlite:///:memory:"

    jwt_secret_key: SecretStr = SecretStr("test-secret-for-registration-suite-0001")

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo app/shared/config/settings_testing.py
