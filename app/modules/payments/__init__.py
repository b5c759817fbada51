# -*- coding: utf-8 -*-
"""
app/modules/payments/__init__.py

Módulo de pagos de Qué hay Pa' hoy.

Este módulo gestiona:
- Registros de transacciones Wompi (idempotentes por transaction_id)
- Verificación del checksum de los webhooks
- Emisión de códigos de registro para pagos aprobados
- Consulta de estado para la página de confirmación

Estructura:
- enums: PaymentStatus, transiciones válidas
- models: PaymentRecord, RegistrationCode
- schemas: snapshots y respuestas
- repositories: PaymentStore (SQL y en memoria)
- services: checksum, emisión de códigos
- facades: orquestación del webhook
- routes: get_payments_router()

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

# Fin del archivo app/modules/payments/__init__.py
