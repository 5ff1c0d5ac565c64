"""
Tests for the health endpoint and request middleware.

System role: Verification of GET /health
"""

from docqa.configs import Settings
from docqa.observability.middleware import CORRELATION_HEADER


def test_health_should_report_environment(make_client) -> None:
    client = make_client(settings=Settings(environment="staging"))

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "staging"
    assert "timestamp" in body


def test_response_should_carry_generated_correlation_id(make_client) -> None:
    response = make_client().get("/health")

    assert response.headers[CORRELATION_HEADER]


def test_response_should_echo_incoming_correlation_id(make_client) -> None:
    response = make_client().get("/health", headers={CORRELATION_HEADER: "req-123"})

    assert response.headers[CORRELATION_HEADER] == "req-123"
