"""
tests.api.test_health

Purpose:
    Smoke tests for health endpoints and request-id propagation.
"""

from __future__ import annotations


def test_health_root_ok(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert r.headers.get("x-request-id")


def test_health_v1_ok(client) -> None:
    r = client.get("/v1/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert r.headers.get("x-request-id")


def test_request_id_is_echoed(client) -> None:
    r = client.get("/v1/health", headers={"X-Request-Id": "req-123"})
    assert r.headers["x-request-id"] == "req-123"


def test_correlation_id_used_when_no_request_id(client) -> None:
    r = client.get("/v1/health", headers={"X-Correlation-Id": "corr-9"})
    assert r.headers["x-request-id"] == "corr-9"
