# -*- coding: utf-8 -*-
"""
app/modules/auth/models/user_models.py

Modelo de cuentas de usuario (UserAccount).

Una cuenta se crea únicamente dentro de la transacción de canje de un
código de registro: el código y la cuenta se confirman juntos o no se
confirma ninguno.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserAccount(Base):
    __tablename__ = "user_accounts"

    uid: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)

    # Cada código habilita exactamente una cuenta
    registration_code: Mapped[str] = mapped_column(
        String(16),
        ForeignKey("registration_codes.code"),
        unique=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserAccount uid={self.uid} code={self.registration_code}>"


__all__ = ["UserAccount"]

# Fin del archivo app/modules/auth/models/user_models.py
