# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/payment_status_transitions.py

Mapa de transiciones válidas para PaymentStatus.

Reglas de transición:
- UNKNOWN  → PENDING | APPROVED | DECLINED | VOIDED | ERROR
- PENDING  → APPROVED | DECLINED | VOIDED | ERROR
- APPROVED, DECLINED, VOIDED, ERROR → (terminales)

Reenviar el mismo estado siempre es válido (entregas repetidas del webhook).

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from typing import Dict, Set

from .payment_status_enum import PaymentStatus


TERMINAL_STATUSES: Set[PaymentStatus] = {
    PaymentStatus.APPROVED,
    PaymentStatus.DECLINED,
    PaymentStatus.VOIDED,
    PaymentStatus.ERROR,
}

# Mapa de transiciones válidas: estado_origen → {estados_destino_permitidos}
VALID_STATUS_TRANSITIONS: Dict[PaymentStatus, Set[PaymentStatus]] = {
    PaymentStatus.UNKNOWN: {
        PaymentStatus.PENDING,
        *TERMINAL_STATUSES,
    },
    PaymentStatus.PENDING: set(TERMINAL_STATUSES),
    PaymentStatus.APPROVED: set(),
    PaymentStatus.DECLINED: set(),
    PaymentStatus.VOIDED: set(),
    PaymentStatus.ERROR: set(),
}


def is_valid_status_transition(
    from_status: PaymentStatus,
    to_status: PaymentStatus,
) -> bool:
    """
    Valida si una transición de estado es permitida.

    Args:
        from_status: Estado actual del registro.
        to_status: Estado reportado por el webhook.

    Returns:
        True si la transición es válida (o es una repetición), False en caso contrario.
    """
    if from_status == to_status:
        return True
    return to_status in VALID_STATUS_TRANSITIONS.get(from_status, set())


def is_terminal(status: PaymentStatus) -> bool:
    return status in TERMINAL_STATUSES


__all__ = [
    "TERMINAL_STATUSES",
    "VALID_STATUS_TRANSITIONS",
    "is_valid_status_transition",
    "is_terminal",
]

# Fin del archivo app/modules/payments/enums/payment_status_transitions.py
