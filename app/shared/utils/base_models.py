# -*- coding: utf-8 -*-
"""
app/shared/utils/base_models.py

Modelo base para los schemas de entrada/salida de la API.

Incluye:
- Modo de atributos activado para compatibilidad con ORM (`from_attributes = True`)
- populate_by_name para aceptar tanto el alias camelCase del cliente web
  como el nombre Python del campo
- Reexportación de utilidades comunes: `EmailStr` y `Field`

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UTF8SafeModel(BaseModel):
    """
    Modelo base con configuración común para requests y responses.

    No recorta espacios de forma global: las contraseñas se conservan tal
    cual y cada campo de texto que lo necesite normaliza explícitamente.
    """
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


__all__ = ["UTF8SafeModel", "EmailStr", "Field"]
# Fin del archivo base_models.py
