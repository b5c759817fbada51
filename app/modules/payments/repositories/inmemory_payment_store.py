# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/inmemory_payment_store.py

PaymentStore en memoria para pruebas y STORAGE_BACKEND=memory.

Mismas reglas que SqlPaymentStore. Cada operación cede el event loop una
sola vez al inicio y después lee y escribe sin puntos de suspensión, por lo
que es atómica frente a otras corrutinas del mismo loop.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from __future__ import annotations

import asyncio
import copy
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.modules.auth.schemas.user_schemas import UserAccountSnapshot
from app.modules.payments.enums import (
    PaymentStatus,
    RegistrationCodeStatus,
    is_valid_status_transition,
)
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


class InMemoryPaymentStore:
    """Implementa el contrato de PaymentStore sobre diccionarios."""

    def __init__(self) -> None:
        self.records: Dict[str, Dict[str, Any]] = {}
        self.codes: Dict[str, Dict[str, Any]] = {}
        self.accounts: Dict[str, Dict[str, Any]] = {}
        # Contador de escrituras (útil para verificar que un rechazo no escribió)
        self.write_count = 0

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

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
        await asyncio.sleep(0)

        now = self._now()
        row = self.records.get(transaction_id)
        if row is None:
            row = {
                "transaction_id": transaction_id,
                "reference": reference,
                "status": status,
                "registration_code": None,
                "amount_in_cents": amount_in_cents,
                "event_type": event_type,
                "raw_event": copy.deepcopy(raw_event),
                "created_at": now,
                "updated_at": now,
            }
            self.records[transaction_id] = row
            self.write_count += 1
            return PaymentRecordSnapshot.model_validate(row)

        current = row["status"]
        if not is_valid_status_transition(current, status):
            logger.warning(
                f"[payments:memory] transición ignorada tx={transaction_id} "
                f"{current.value} → {status.value}"
            )
            return PaymentRecordSnapshot.model_validate(row)

        row["status"] = status
        if amount_in_cents is not None:
            row["amount_in_cents"] = amount_in_cents
        if event_type:
            row["event_type"] = event_type
        if raw_event is not None:
            row["raw_event"] = copy.deepcopy(raw_event)
        if not row["reference"] and reference:
            row["reference"] = reference
        row["updated_at"] = now
        self.write_count += 1
        return PaymentRecordSnapshot.model_validate(row)

    async def attach_registration_code(self, transaction_id: str, code: str) -> AttachResult:
        await asyncio.sleep(0)

        if code in self.codes:
            raise CodeCollisionError(code)

        row = self.records.get(transaction_id)
        if row is None:
            raise NotFoundError(f"Transacción {transaction_id} no encontrada.")

        if row["registration_code"] is not None or row["status"] != PaymentStatus.APPROVED:
            return AttachResult(record=PaymentRecordSnapshot.model_validate(row), attached=False)

        now = self._now()
        row["registration_code"] = code
        row["updated_at"] = now
        self.codes[code] = {
            "code": code,
            "status": RegistrationCodeStatus.APPROVED,
            "transaction_id": transaction_id,
            "used": False,
            "used_by": None,
            "used_at": None,
            "created_at": now,
        }
        self.write_count += 1
        return AttachResult(record=PaymentRecordSnapshot.model_validate(row), attached=True)

    async def get_payment(self, transaction_id: str) -> Optional[PaymentRecordSnapshot]:
        await asyncio.sleep(0)
        row = self.records.get(transaction_id)
        return PaymentRecordSnapshot.model_validate(row) if row else None

    async def get_latest_payment_by_reference(
        self,
        reference: str,
    ) -> Optional[PaymentRecordSnapshot]:
        await asyncio.sleep(0)
        matches = [r for r in self.records.values() if r["reference"] == reference]
        if not matches:
            return None
        latest = max(matches, key=lambda r: r["updated_at"])
        return PaymentRecordSnapshot.model_validate(latest)

    # -----------------------------------------------------------
    # Códigos de registro
    # -----------------------------------------------------------
    async def get_registration_code(self, code: str) -> Optional[RegistrationCodeSnapshot]:
        await asyncio.sleep(0)
        row = self.codes.get(code)
        return RegistrationCodeSnapshot.model_validate(row) if row else None

    async def redeem_registration_code(
        self,
        code: str,
        *,
        uid: str,
        email: str,
    ) -> UserAccountSnapshot:
        await asyncio.sleep(0)

        row = self.codes.get(code)
        if row is None:
            raise NotFoundError()
        if row["used"]:
            raise AlreadyUsedError()
        if row["status"] != RegistrationCodeStatus.APPROVED:
            raise PreconditionFailedError()
        if uid in self.accounts or any(a["email"] == email for a in self.accounts.values()):
            raise StorageError(f"La cuenta {uid} ya existe.")

        now = self._now()
        row.update(used=True, used_by=uid, used_at=now)
        account = {
            "uid": uid,
            "email": email,
            "registration_code": code,
            "created_at": now,
        }
        self.accounts[uid] = account
        self.write_count += 1
        logger.info(f"[payments:memory] código canjeado code={code} uid={uid}")
        return UserAccountSnapshot.model_validate(account)


__all__ = ["InMemoryPaymentStore"]

# Fin del archivo app/modules/payments/repositories/inmemory_payment_store.py
