# -*- coding: utf-8 -*-
"""
app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-06
"""

from __future__ import annotations

from .base import Base, NAMING_CONVENTION
from .database import (
    build_engine,
    build_session_factory,
    create_all,
    check_database_health,
)

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "build_engine",
    "build_session_factory",
    "create_all",
    "check_database_health",
]

# Fin del archivo app/shared/database/__init__.py
