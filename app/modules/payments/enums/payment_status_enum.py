# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/payment_status_enum.py

Enum de estados de transacción reportados por Wompi.

Los valores se persisten como texto (String) tanto en PostgreSQL como en
SQLite; no se usa un ENUM nativo.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from enum import StrEnum
from typing import Any


class PaymentStatus(StrEnum):
    """Último estado conocido de la transacción en el procesador."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    VOIDED = "VOIDED"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def normalize(cls, raw: Any) -> "PaymentStatus":
        """
        Normaliza el estado crudo del payload.

        Recorta espacios y pasa a mayúsculas; cualquier valor ausente o no
        reconocido se mapea a UNKNOWN.

        >>> PaymentStatus.normalize(" declined ")
        <PaymentStatus.DECLINED: 'DECLINED'>
        """
        if not isinstance(raw, str):
            return cls.UNKNOWN
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return cls.UNKNOWN


__all__ = ["PaymentStatus"]

# Fin del archivo app/modules/payments/enums/payment_status_enum.py
