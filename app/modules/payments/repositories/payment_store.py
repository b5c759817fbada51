# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/payment_store.py

Contrato del almacén de registros de pago y códigos de registro.

Cada operación es atómica en la capa de almacenamiento. Las escrituras
concurrentes sobre la misma transacción o el mismo código se resuelven con
escrituras condicionales (compare-and-set), no con locks de proceso: el
backend corre como varias instancias sin estado.

Implementaciones:
- SqlPaymentStore (SQLAlchemy async)
- InMemoryPaymentStore (tests y STORAGE_BACKEND=memory)

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from app.modules.auth.schemas.user_schemas import UserAccountSnapshot
from app.modules.payments.enums import PaymentStatus
from app.modules.payments.schemas.record_schemas import (
    AttachResult,
    PaymentRecordSnapshot,
    RegistrationCodeSnapshot,
)


@runtime_checkable
class PaymentStore(Protocol):

    async def record_event(
        self,
        transaction_id: str,
        *,
        status: PaymentStatus,
        reference: Optional[str] = None,
        amount_in_cents: Optional[int] = None,
        event_type: Optional[str] = None,
        raw_event: Optional[Dict[str, Any]] = None,
    ) -> PaymentRecordSnapshot:
        """
        Crea el registro si no existe; si existe, fusiona el estado solo si la
        transición es válida. Nunca modifica registration_code. La referencia
        solo se completa cuando el registro aún no tiene una.

        El snapshot devuelto refleja el estado vigente: si su status difiere
        del reportado, la transición fue ignorada.
        """
        ...

    async def attach_registration_code(
        self,
        transaction_id: str,
        code: str,
    ) -> AttachResult:
        """
        Asigna el código solo si el registro está APPROVED y no tiene código,
        y materializa el RegistrationCode en la misma transacción.

        Raises:
            CodeCollisionError: el valor del código ya existe.
            NotFoundError: la transacción no existe.
        """
        ...

    async def get_payment(self, transaction_id: str) -> Optional[PaymentRecordSnapshot]:
        ...

    async def get_latest_payment_by_reference(
        self,
        reference: str,
    ) -> Optional[PaymentRecordSnapshot]:
        ...

    async def get_registration_code(self, code: str) -> Optional[RegistrationCodeSnapshot]:
        ...

    async def redeem_registration_code(
        self,
        code: str,
        *,
        uid: str,
        email: str,
    ) -> UserAccountSnapshot:
        """
        Canjea el código y crea la cuenta como una sola unidad.

        Raises:
            NotFoundError, PreconditionFailedError, AlreadyUsedError
        """
        ...


__all__ = ["PaymentStore"]

# Fin del archivo app/modules/payments/repositories/payment_store.py
