# -*- coding: utf-8 -*-
"""
app/modules/payments/metrics/exporters/prometheus_exporter.py

Exporter Prometheus para el módulo de pagos.
Expone métricas del webhook Wompi, de la emisión de códigos y del registro.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-09
"""

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)
import logging

logger = logging.getLogger(__name__)

PROVIDER = "wompi"

# --------------------------------------------------------------------------
# Registro propio (no el global de prometheus_client)
# --------------------------------------------------------------------------
registry = CollectorRegistry()

# --------------------------------------------------------------------------
# Definición de métricas
# --------------------------------------------------------------------------

# Webhooks: verificación y outcome se cuentan por separado
WEBHOOKS_RECEIVED_TOTAL = Counter(
    "payments_webhook_received_total",
    "Total webhooks recibidos por proveedor",
    ["provider"],
    registry=registry,
)
WEBHOOKS_VERIFIED_TOTAL = Counter(
    "payments_webhook_verified_total",
    "Total webhooks por resultado de verificación (success/failure)",
    ["provider", "result"],
    registry=registry,
)
WEBHOOKS_OUTCOME_TOTAL = Counter(
    "payments_webhook_outcome_total",
    "Total webhooks por outcome (code_issued/code_existing/status_recorded/transition_ignored)",
    ["provider", "outcome"],
    registry=registry,
)
WEBHOOKS_REJECTED_TOTAL = Counter(
    "payments_webhook_rejected_total",
    "Total webhooks rechazados por proveedor y razón",
    ["provider", "reason"],
    registry=registry,
)
WEBHOOKS_PROCESSING_SECONDS = Histogram(
    "payments_webhook_processing_seconds",
    "Tiempo de procesamiento de webhooks (segundos)",
    ["provider"],
    # Segundos; acotados al timeout de entrega de Wompi
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
    registry=registry,
)

# Códigos de registro
REGISTRATION_CODES_ISSUED_TOTAL = Counter(
    "payments_registration_codes_issued_total",
    "Códigos de registro emitidos para pagos aprobados",
    registry=registry,
)
REGISTRATIONS_TOTAL = Counter(
    "payments_registrations_total",
    "Intentos de registro por resultado (success o kind del error)",
    ["result"],
    registry=registry,
)


# --------------------------------------------------------------------------
# Funciones auxiliares
# --------------------------------------------------------------------------
def render_prometheus_metrics() -> bytes:
    """
    Genera la salida actual de las métricas en formato Prometheus.
    """
    return generate_latest(registry)


def observe_webhook_received(provider: str = PROVIDER):
    """Registra recepción de un webhook."""
    WEBHOOKS_RECEIVED_TOTAL.labels(provider=provider).inc()


def observe_webhook_verified(verification_result: str, duration: float, provider: str = PROVIDER):
    """
    Registra resultado de verificación del webhook.

    Args:
        verification_result: success/failure (solo verificación de checksum)
        duration: Tiempo de procesamiento en segundos
    """
    WEBHOOKS_VERIFIED_TOTAL.labels(provider=provider, result=verification_result).inc()
    WEBHOOKS_PROCESSING_SECONDS.labels(provider=provider).observe(duration)
    logger.debug(f"[Prometheus] Webhook {provider} verified={verification_result} duration={duration:.4f}s")


def observe_webhook_outcome(outcome: str, provider: str = PROVIDER):
    WEBHOOKS_OUTCOME_TOTAL.labels(provider=provider, outcome=outcome).inc()
    if outcome == "code_issued":
        REGISTRATION_CODES_ISSUED_TOTAL.inc()
    logger.debug(f"[Prometheus] Webhook {provider} outcome={outcome}")


def observe_webhook_rejected(reason: str, provider: str = PROVIDER):
    """
    Registra webhook rechazado.

    Args:
        reason: kind del error (malformed-request/signature-mismatch/storage-error/...)
    """
    WEBHOOKS_REJECTED_TOTAL.labels(provider=provider, reason=reason).inc()
    logger.debug(f"[Prometheus] Webhook {provider} rejected reason={reason}")


def observe_registration(result: str):
    REGISTRATIONS_TOTAL.labels(result=result).inc()


# Fin del archivo app/modules/payments/metrics/exporters/prometheus_exporter.py
