# -*- coding: utf-8 -*-
"""
app/modules/auth/models/identity_models.py

Credenciales de acceso (correo + hash Argon2) gestionadas por el proveedor
de identidad local.

Vive fuera de la transacción de canje: se crea antes y se elimina como
compensación si el canje falla.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class AuthIdentity(Base):
    __tablename__ = "auth_identities"

    uid: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


__all__ = ["AuthIdentity"]
