# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/__init__.py

Punto de entrada de repositorios del módulo Payments.

Incluye:
- PaymentStore (protocolo)
- SqlPaymentStore
- InMemoryPaymentStore

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from .inmemory_payment_store import InMemoryPaymentStore
from .payment_store import PaymentStore
from .sql_payment_store import SqlPaymentStore

__all__ = [
    "PaymentStore",
    "SqlPaymentStore",
    "InMemoryPaymentStore",
]

# Fin del archivo app/modules/payments/repositories/__init__.py
