"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from inbank_gateway.api.main import create_app
from inbank_gateway.api.dependencies import get_decision_engine
from inbank_gateway.config import Settings
from inbank_gateway.domain.decision_engine import DecisionEngine


# Fixed "today" so age checks do not drift over time
TODAY = date(2025, 1, 1)

# Valid Estonian personal codes, one per credit segment
DEBTOR_CODE = "37605030299"  # born 1976-05-03, last four 0299
SEGMENT_1_CODE = "50307172740"  # born 2003-07-17, last four 2740
SEGMENT_2_CODE = "38411266610"  # born 1984-11-26, last four 6610
SEGMENT_3_CODE = "35006069515"  # born 1950-06-06, last four 9515


@pytest.fixture
def settings() -> Settings:
    """Default loan bounds and credit modifiers"""
    return Settings()


@pytest.fixture
def engine(settings: Settings) -> DecisionEngine:
    """Decision engine pinned to a fixed date"""
    return DecisionEngine(settings, today=lambda: TODAY)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with a date-pinned decision engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
