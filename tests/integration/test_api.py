"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from inbank_gateway.api.main import create_app
from inbank_gateway.api.dependencies import get_decision_engine
from inbank_gateway.config import Settings

from conftest import DEBTOR_CODE, SEGMENT_1_CODE, SEGMENT_3_CODE


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "inbank-gateway", "version": "0.1.0"}


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/loan/decision",
        json={"personalCode": SEGMENT_3_CODE, "loanAmount": 2000, "loanPeriod": 12},
    )
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "inbank_decision_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_decision_endpoint_approval(client: TestClient):
    """Test POST /loan/decision with an offer above the requested amount"""
    response = client.post(
        "/loan/decision",
        json={"personalCode": SEGMENT_3_CODE, "loanAmount": 2000, "loanPeriod": 12},
    )

    assert response.status_code == 200
    assert response.json() == {"loanAmount": 10000, "loanPeriod": 12, "errorMessage": None}


def test_decision_endpoint_extended_period(client: TestClient):
    """Test POST /loan/decision where the period has to grow"""
    response = client.post(
        "/loan/decision",
        json={"personalCode": SEGMENT_1_CODE, "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["loanAmount"] == 2000
    assert data["loanPeriod"] == 20


def test_decision_endpoint_accepts_snake_case(client: TestClient):
    response = client.post(
        "/loan/decision",
        json={"personal_code": SEGMENT_3_CODE, "loan_amount": 2000, "loan_period": 12},
    )
    assert response.status_code == 200
    assert response.json()["loanAmount"] == 10000


@pytest.mark.parametrize(
    "body,message",
    [
        ({"personalCode": "12345678901", "loanAmount": 4000, "loanPeriod": 12}, "Invalid personal ID code!"),
        ({"personalCode": SEGMENT_1_CODE, "loanAmount": 1, "loanPeriod": 12}, "Invalid loan amount!"),
        ({"personalCode": SEGMENT_1_CODE, "loanAmount": 4000, "loanPeriod": 61}, "Invalid loan period!"),
    ],
)
def test_decision_endpoint_invalid_input(client: TestClient, body: dict, message: str):
    """Validation failures answer 400 with the reason"""
    response = client.post("/loan/decision", json=body)

    assert response.status_code == 400
    assert response.json() == {"loanAmount": None, "loanPeriod": None, "errorMessage": message}


def test_decision_endpoint_decline(client: TestClient):
    """Debtors get 404 with no offer"""
    response = client.post(
        "/loan/decision",
        json={"personalCode": DEBTOR_CODE, "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 404
    data = response.json()
    assert data["errorMessage"] == "No valid loan found!"
    assert data["loanAmount"] is None
    assert data["loanPeriod"] is None


def test_decision_endpoint_malformed_body(client: TestClient):
    response = client.post("/loan/decision", json={"personalCode": SEGMENT_1_CODE})
    assert response.status_code == 422
    assert response.json() == {"loanAmount": None, "loanPeriod": None, "errorMessage": "Malformed loan request!"}


def test_decision_endpoint_unexpected_error():
    """Unexpected failures answer 500 with a generic message"""

    class BrokenEngine:
        def decide(self, personal_code, loan_amount, loan_period):
            raise RuntimeError("boom")

    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: BrokenEngine()
    client = TestClient(app)

    response = client.post(
        "/loan/decision",
        json={"personalCode": SEGMENT_1_CODE, "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 500
    assert response.json()["errorMessage"] == "An unexpected error occurred"


def test_request_id_header(client: TestClient):
    """Responses carry a request ID, reusing the caller's when given"""
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_decision_endpoint_personal_code_with_spaces(client: TestClient):
    response = client.post(
        "/loan/decision",
        json={"personalCode": " 38411266610 ", "loanAmount": 4000, "loanPeriod": 12},
    )
    assert response.status_code == 200
    assert response.json() == {"loanAmount": 3600, "loanPeriod": 12, "errorMessage": None}


def test_create_app_uses_given_settings():
    app = create_app(Settings(service_name="decision-test"))
    response = TestClient(app).get("/health")
    assert response.json()["service"] == "decision-test"
