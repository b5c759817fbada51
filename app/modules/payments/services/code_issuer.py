# -*- coding: utf-8 -*-
"""
app/modules/payments/services/code_issuer.py

Emisión de códigos de registro.

Formato: 6 caracteres, 4 letras mayúsculas + 2 dígitos en orden aleatorio
(p. ej. "K4PX7Q"). Se usa un generador no criptográfico: el código no es un
secreto, su unicidad la garantiza el almacén.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging
import random
import string
import unicodedata
from typing import Callable, Optional

from app.modules.payments.repositories.payment_store import PaymentStore
from app.modules.payments.schemas.record_schemas import AttachResult
from app.shared.errors import CodeCollisionError, StorageError

logger = logging.getLogger(__name__)

CODE_LETTERS = 4
CODE_DIGITS = 2
CODE_LENGTH = CODE_LETTERS + CODE_DIGITS

CodeGenerator = Callable[[], str]

_default_rng = random.Random()


def generate_registration_code(rng: Optional[random.Random] = None) -> str:
    """Genera un código de 4 letras y 2 dígitos, mezclados."""
    rng = rng or _default_rng
    chars = [rng.choice(string.ascii_uppercase) for _ in range(CODE_LETTERS)]
    chars += [rng.choice(string.digits) for _ in range(CODE_DIGITS)]
    rng.shuffle(chars)
    return "".join(chars)


def normalize_registration_code(raw: Optional[str]) -> str:
    """
    Normaliza un código tecleado por el usuario.

    NFKC, descarta todo lo que no sea [A-Za-z0-9] y pasa a mayúsculas.

    >>> normalize_registration_code(" ab-12 cd ")
    'AB12CD'
    """
    if not raw:
        return ""
    text = unicodedata.normalize("NFKC", raw)
    return "".join(ch for ch in text if ch.isascii() and ch.isalnum()).upper()


async def issue_registration_code(
    store: PaymentStore,
    transaction_id: str,
    *,
    generator: CodeGenerator = generate_registration_code,
    max_attempts: int = 5,
) -> AttachResult:
    """
    Genera un código y lo asigna a la transacción.

    Ante colisión se regenera hasta max_attempts veces; si se agotan, se
    lanza StorageError para que el procesador reintente la entrega.
    """
    for attempt in range(1, max_attempts + 1):
        code = generator()
        try:
            return await store.attach_registration_code(transaction_id, code)
        except CodeCollisionError:
            logger.warning(
                f"[codes] colisión tx={transaction_id} intento {attempt}/{max_attempts}"
            )

    logger.error(f"[codes] sin código libre tras {max_attempts} intentos tx={transaction_id}")
    raise StorageError("No se pudo generar un código de registro único.")


__all__ = [
    "CODE_LENGTH",
    "CodeGenerator",
    "generate_registration_code",
    "normalize_registration_code",
    "issue_registration_code",
]

# Fin del archivo app/modules/payments/services/code_issuer.py
