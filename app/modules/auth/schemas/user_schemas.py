# -*- coding: utf-8 -*-
"""
app/modules/auth/schemas/user_schemas.py

Snapshot de cuentas de usuario creadas por el canje de un código.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserAccountSnapshot(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    uid: str
    email: str
    registration_code: str
    created_at: datetime


__all__ = ["UserAccountSnapshot"]

# Fin del archivo app/modules/auth/schemas/user_schemas.py
