# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/sql_payment_store.py

PaymentStore sobre SQLAlchemy async.

Responsabilidades:
- Upsert idempotente por transaction_id con guardia de transiciones
- Asignación compare-and-set del código de registro
- Canje del código + creación de la cuenta en una sola transacción

Cada operación abre su propia sesión y transacción. En PostgreSQL las
lecturas con with_for_update serializan por fila; los UPDATE condicionales
(WHERE ... AND registration_code IS NULL / AND used = false) con chequeo de
rowcount son la frontera de corrección en cualquier motor.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.modules.auth.models.user_models import UserAccount
from app.modules.auth.schemas.user_schemas import UserAccountSnapshot
from app.modules.payments.enums import (
    PaymentStatus,
    RegistrationCodeStatus,
    is_valid_status_transition,
)
from app.modules.payments.models import PaymentRecord, RegistrationCode
from app.modules.payments.schemas.record_schemas import (
    AttachResult,
    PaymentRecordSnapshot,
    RegistrationCodeSnapshot,
)
from app.shared.errors import (
    AlreadyUsedError,
    CodeCollisionError,
    NotFoundError,
    PreconditionFailedError,
    StorageError,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlPaymentStore:
    """Almacén de pagos y códigos respaldado por SQL."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, op: str) -> AsyncIterator[AsyncSession]:
        """Sesión + transacción; los errores del driver se traducen a StorageError."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"[payments:store] {op} falló: {e}")
            raise StorageError() from e

    # -----------------------------------------------------------
    # Registros de pago
    # -----------------------------------------------------------
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
        # Un INSERT concurrente de la misma transacción gana la carrera: se
        # reintenta una vez y el segundo intento toma la rama de merge.
        for attempt in (1, 2):
            try:
                return await self._record_event_once(
                    transaction_id,
                    status=status,
                    reference=reference,
                    amount_in_cents=amount_in_cents,
                    event_type=event_type,
                    raw_event=raw_event,
                )
            except IntegrityError as e:
                if attempt == 2:
                    logger.error(f"[payments:store] record_event tx={transaction_id} conflicto persistente")
                    raise StorageError() from e
                logger.info(f"[payments:store] insert concurrente tx={transaction_id}; reintentando como merge")
        raise StorageError()  # pragma: no cover

    async def _record_event_once(
        self,
        transaction_id: str,
        *,
        status: PaymentStatus,
        reference: Optional[str],
        amount_in_cents: Optional[int],
        event_type: Optional[str],
        raw_event: Optional[Dict[str, Any]],
    ) -> PaymentRecordSnapshot:
        async with self._transaction("record_event") as session:
            now = _utcnow()
            row = await session.get(PaymentRecord, transaction_id, with_for_update=True)

            if row is None:
                row = PaymentRecord(
                    transaction_id=transaction_id,
                    reference=reference,
                    status=status.value,
                    amount_in_cents=amount_in_cents,
                    event_type=event_type,
                    raw_event=raw_event,
                    created_at=now,
                    updated_at=now,
                )
                session.add(row)
                logger.info(f"[payments:store] registro creado tx={transaction_id} status={status.value}")
            else:
                current = PaymentStatus.normalize(row.status)
                if not is_valid_status_transition(current, status):
                    logger.warning(
                        f"[payments:store] transición ignorada tx={transaction_id} "
                        f"{current.value} → {status.value}"
                    )
                    return PaymentRecordSnapshot.model_validate(row)

                row.status = status.value
                if amount_in_cents is not None:
                    row.amount_in_cents = amount_in_cents
                if event_type:
                    row.event_type = event_type
                if raw_event is not None:
                    row.raw_event = raw_event
                if not row.reference and reference:
                    row.reference = reference
                row.updated_at = now

            await session.flush()
            return PaymentRecordSnapshot.model_validate(row)

    async def attach_registration_code(self, transaction_id: str, code: str) -> AttachResult:
        try:
            async with self._transaction("attach_registration_code") as session:
                if await session.get(RegistrationCode, code) is not None:
                    raise CodeCollisionError(code)

                now = _utcnow()
                result = await session.execute(
                    update(PaymentRecord)
                    .where(
                        PaymentRecord.transaction_id == transaction_id,
                        PaymentRecord.registration_code.is_(None),
                        PaymentRecord.status == PaymentStatus.APPROVED.value,
                    )
                    .values(registration_code=code, updated_at=now)
                    .execution_options(synchronize_session=False)
                )

                if result.rowcount == 0:
                    row = await session.get(PaymentRecord, transaction_id)
                    if row is None:
                        raise NotFoundError(f"Transacción {transaction_id} no encontrada.")
                    return AttachResult(
                        record=PaymentRecordSnapshot.model_validate(row),
                        attached=False,
                    )

                session.add(RegistrationCode(
                    code=code,
                    status=RegistrationCodeStatus.APPROVED.value,
                    transaction_id=transaction_id,
                    used=False,
                    created_at=now,
                ))
                await session.flush()

                row = await session.get(PaymentRecord, transaction_id, populate_existing=True)
                snapshot = PaymentRecordSnapshot.model_validate(row)
        except IntegrityError as e:
            # Otro proceso insertó el mismo código entre la verificación y el commit
            raise CodeCollisionError(code) from e

        return AttachResult(record=snapshot, attached=True)

    async def get_payment(self, transaction_id: str) -> Optional[PaymentRecordSnapshot]:
        async with self._transaction("get_payment") as session:
            row = await session.get(PaymentRecord, transaction_id)
            return PaymentRecordSnapshot.model_validate(row) if row else None

    async def get_latest_payment_by_reference(
        self,
        reference: str,
    ) -> Optional[PaymentRecordSnapshot]:
        """La referencia no es única: gana el registro actualizado más recientemente."""
        stmt = (
            select(PaymentRecord)
            .where(PaymentRecord.reference == reference)
            .order_by(PaymentRecord.updated_at.desc())
            .limit(1)
        )
        async with self._transaction("get_latest_payment_by_reference") as session:
            row = (await session.execute(stmt)).scalars().first()
            return PaymentRecordSnapshot.model_validate(row) if row else None

    # -----------------------------------------------------------
    # Códigos de registro
    # -----------------------------------------------------------
    async def get_registration_code(self, code: str) -> Optional[RegistrationCodeSnapshot]:
        async with self._transaction("get_registration_code") as session:
            row = await session.get(RegistrationCode, code)
            return RegistrationCodeSnapshot.model_validate(row) if row else None

    async def redeem_registration_code(
        self,
        code: str,
        *,
        uid: str,
        email: str,
    ) -> UserAccountSnapshot:
        try:
            async with self._transaction("redeem_registration_code") as session:
                row = await session.get(RegistrationCode, code, with_for_update=True)
                if row is None:
                    raise NotFoundError()
                if row.used:
                    raise AlreadyUsedError()
                if row.status != RegistrationCodeStatus.APPROVED.value:
                    raise PreconditionFailedError()

                now = _utcnow()
                result = await session.execute(
                    update(RegistrationCode)
                    .where(
                        RegistrationCode.code == code,
                        RegistrationCode.used.is_(False),
                    )
                    .values(used=True, used_by=uid, used_at=now)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount != 1:
                    # Otro canje confirmó entre la lectura y el UPDATE
                    raise AlreadyUsedError()

                account = UserAccount(
                    uid=uid,
                    email=email,
                    registration_code=code,
                    created_at=now,
                )
                session.add(account)
                await session.flush()
                snapshot = UserAccountSnapshot.model_validate(account)
        except IntegrityError as e:
            logger.error(f"[payments:store] canje code={code} violó una restricción: {e.orig}")
            raise StorageError() from e

        logger.info(f"[payments:store] código canjeado code={code} uid={uid}")
        return snapshot


__all__ = ["SqlPaymentStore"]

# Fin del archivo app/modules/payments/repositories/sql_payment_store.py
