# -*- coding: utf-8 -*-
"""
app/modules/payments/models/__init__.py

Modelos ORM del módulo Payments.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from .payment_record_models import PaymentRecord, RegistrationCode

__all__ = ["PaymentRecord", "RegistrationCode"]
