# -*- coding: utf-8 -*-
"""
app/modules/auth/services/registration_flow_service.py

Flujo de registro gateado por código de un solo uso.

Pasos:
1. Valida correo y contraseña.
2. Normaliza el código y hace una verificación previa (orientativa: puede
   quedar obsoleta, no es la frontera de corrección).
3. Saga:
   - create_identity  (compensación: delete_user)
   - redeem_code      (transacción del almacén: marca el código y crea la cuenta)
4. Emite el custom token.

Errores:
- Errores de validación reconocidos (código inválido, usado, no aprobado,
  correo existente) llegan al cliente tal cual.
- Cualquier otro fallo durante la saga se reporta como AbortedError.
- Si falla el token, la cuenta y el canje ya están confirmados: NO se
  compensa y se lanza TokenIssuanceError con el uid.

Autor: Equipo Qué hay Pa' hoy
Actualizado: 2026-10-10
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from email_validator import EmailNotValidError, validate_email

from app.modules.auth.services.identity_provider import IdentityProvider
from app.modules.payments.enums import RegistrationCodeStatus
from app.modules.payments.repositories.payment_store import PaymentStore
from app.modules.payments.schemas.record_schemas import RegistrationCodeSnapshot
from app.modules.payments.services.code_issuer import normalize_registration_code
from app.shared.errors import (
    REGISTRATION_VALIDATION_ERRORS,
    AbortedError,
    AlreadyUsedError,
    InvalidArgumentError,
    NotFoundError,
    PreconditionFailedError,
    TokenIssuanceError,
)
from app.shared.utils.log_masking import mask_email
from app.shared.utils.saga import Saga
from app.shared.utils.security import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationResult:
    """Resultado del registro: uid creado y token para iniciar sesión."""
    uid: str
    custom_token: str


class RegistrationFlowService:
    """Orquestador del registro con canje de código."""

    def __init__(self, store: PaymentStore, identity_provider: IdentityProvider) -> None:
        self.store = store
        self.identity_provider = identity_provider

    # ------------------------------------------------------------------ #
    # Validaciones
    # ------------------------------------------------------------------ #
    @staticmethod
    def normalize_email(raw: Any) -> str:
        email = (raw or "").strip().lower() if isinstance(raw, str) or raw is None else ""
        if not email:
            raise InvalidArgumentError("El correo es obligatorio.")
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidArgumentError("El correo no es válido.") from e
        return email

    @staticmethod
    def validate_password(password: Any) -> str:
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidArgumentError(
                f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres."
            )
        if len(password) > MAX_PASSWORD_LENGTH:
            raise InvalidArgumentError(
                f"La contraseña no puede exceder {MAX_PASSWORD_LENGTH} caracteres."
            )
        return password

    async def check_code(self, raw_code: Any) -> RegistrationCodeSnapshot:
        """
        Verificación previa del código (solo lectura).

        Raises:
            InvalidArgumentError: código vacío tras normalizar
            NotFoundError / AlreadyUsedError / PreconditionFailedError
        """
        code = normalize_registration_code(raw_code if isinstance(raw_code, str) else None)
        if not code:
            raise InvalidArgumentError("Ingresa tu código de registro.")

        snapshot = await self.store.get_registration_code(code)
        if snapshot is None:
            raise NotFoundError()
        if snapshot.used:
            raise AlreadyUsedError()
        if snapshot.status != RegistrationCodeStatus.APPROVED:
            raise PreconditionFailedError()
        return snapshot

    # ------------------------------------------------------------------ #
    # Registro
    # ------------------------------------------------------------------ #
    async def register(
        self,
        email: Any,
        password: Any,
        registration_code: Any,
    ) -> RegistrationResult:
        email = self.normalize_email(email)
        password = self.validate_password(password)
        code = (await self.check_code(registration_code)).code

        logger.info(f"[register] inicio email={mask_email(email)} code={code}")

        async def create_identity(ctx: Dict[str, Any]) -> str:
            return await self.identity_provider.create_user(email, password)

        async def delete_identity(ctx: Dict[str, Any]) -> None:
            await self.identity_provider.delete_user(ctx["create_identity"])

        async def redeem_code(ctx: Dict[str, Any]):
            return await self.store.redeem_registration_code(
                code,
                uid=ctx["create_identity"],
                email=email,
            )

        saga = (
            Saga("register")
            .add_step("create_identity", create_identity, compensation=delete_identity)
            .add_step("redeem_code", redeem_code)
        )

        try:
            ctx = await saga.run()
        except REGISTRATION_VALIDATION_ERRORS as e:
            logger.info(f"[register] rechazado code={code} kind={e.kind}")
            raise
        except Exception as e:
            logger.error(f"[register] abortado code={code}: {type(e).__name__}: {e}")
            raise AbortedError() from e

        uid = ctx["create_identity"]

        # Cuenta y canje ya confirmados: un fallo aquí no se compensa
        try:
            token = await self.identity_provider.create_custom_token(uid)
        except Exception as e:
            logger.error(f"[register] cuenta uid={uid} creada pero falló el token: {e}")
            raise TokenIssuanceError(uid) from e

        logger.info(f"[register] completado uid={uid} code={code}")
        return RegistrationResult(uid=uid, custom_token=token)


__all__ = ["RegistrationFlowService", "RegistrationResult"]

# Fin del archivo app/modules/auth/services/registration_flow_service.py
