# tests/modules/payments/routes/test_payments_metrics_routes.py
# -*- coding: utf-8 -*-
import pytest

from app.modules.payments.metrics.exporters.prometheus_exporter import registry


def _sample(name, **labels) -> float:
    return registry.get_sample_value(name, labels) or 0.0


def test_metrics_endpoint_exposes_payment_series(client):
    resp = client.get("/payments/metrics")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "payments_webhook_processing_seconds" in resp.text
    assert "payments_registration_codes_issued_total" in resp.text


@pytest.mark.asyncio
async def test_webhook_outcomes_are_counted(async_client, wompi_event):
    issued_before = _sample("payments_registration_codes_issued_total")
    rejected_before = _sample(
        "payments_webhook_rejected_total", provider="wompi", reason="signature-mismatch"
    )

    await async_client.post("/payments/webhooks/wompi", json=wompi_event("tx-m1"))
    tampered = wompi_event("tx-m2")
    tampered["signature"]["checksum"] = "f" * 64
    await async_client.post("/payments/webhooks/wompi", json=tampered)

    assert _sample("payments_registration_codes_issued_total") == issued_before + 1
    assert _sample(
        "payments_webhook_rejected_total", provider="wompi", reason="signature-mismatch"
    ) == rejected_before + 1

# Fin del archivo tests/modules/payments/routes/test_payments_metrics_routes.py
