# -*- coding: utf-8 -*-
"""
app/modules/payments/models/payment_record_models.py

Modelos ORM para las tablas payment_records y registration_codes.

- payment_records: un registro por transacción del procesador (PK transaction_id).
- registration_codes: un código de registro por transacción aprobada.

Los estados se guardan como texto para que el mismo esquema funcione en
PostgreSQL (asyncpg) y en SQLite (aiosqlite).

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    DateTime,
    ForeignKey,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base
from app.modules.payments.enums import PaymentStatus, RegistrationCodeStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentRecord(Base):
    """Estado de una transacción Wompi según los webhooks verificados."""

    __tablename__ = "payment_records"

    transaction_id: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        doc="ID asignado por el procesador; única clave de idempotencia.",
    )

    reference: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        index=True,
        doc="Referencia generada en el checkout; solo para búsqueda.",
    )

    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=PaymentStatus.UNKNOWN.value,
        index=True,
    )

    # Se asigna una única vez, solo con status APPROVED
    registration_code: Mapped[Optional[str]] = mapped_column(
        String(16),
        nullable=True,
        unique=True,
    )

    amount_in_cents: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        nullable=True,
    )

    event_type: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
    )

    raw_event: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=True,
        doc="Payload verificado completo, para auditoría.",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<PaymentRecord tx={self.transaction_id} status={self.status} "
            f"code={'yes' if self.registration_code else 'no'}>"
        )


class RegistrationCode(Base):
    """Código de un solo uso que habilita el registro de una cuenta."""

    __tablename__ = "registration_codes"

    code: Mapped[str] = mapped_column(String(16), primary_key=True)

    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=RegistrationCodeStatus.APPROVED.value,
    )

    transaction_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("payment_records.transaction_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    used: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    used_by: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)

    used_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<RegistrationCode {self.code} tx={self.transaction_id} used={self.used}>"


__all__ = ["PaymentRecord", "RegistrationCode"]

# Fin del archivo app/modules/payments/models/payment_record_models.py
