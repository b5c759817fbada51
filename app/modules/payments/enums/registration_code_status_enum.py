# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/registration_code_status_enum.py

Estado de un código de registro. Los códigos solo se materializan para
pagos aprobados, por lo que hoy existe un único valor.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from enum import StrEnum


class RegistrationCodeStatus(StrEnum):
    APPROVED = "APPROVED"
    # Anulado manualmente por soporte (contracargo, fraude); no canjeable
    REVOKED = "REVOKED"


__all__ = ["RegistrationCodeStatus"]
