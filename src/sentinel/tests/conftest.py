"""
Pytest configuration and shared fixtures for Sentinel tests.
"""

from decimal import Decimal
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from sentinel.audit import AuditLog
from sentinel.fincrime.risk_scoring import Device, RiskScorer, ScoringInput
from sentinel.fincrime.transactions import TransactionService, TransactionStore


# Velocity rule never fires for this sample
QUIET_SAMPLE = 0.5


@pytest.fixture
def risk_scorer() -> RiskScorer:
    """Scorer whose velocity rule never fires."""
    return RiskScorer(randomness=lambda: QUIET_SAMPLE)


@pytest.fixture
def low_risk_input() -> ScoringInput:
    return ScoringInput(
        amount=Decimal("100.00"),
        location="Stockholm, Sweden",
        device=Device.MOBILE,
    )


@pytest.fixture
def high_risk_input() -> ScoringInput:
    return ScoringInput(
        amount=Decimal("1200"),
        location="Pyongyang, North Korea",
        device=Device.DESKTOP,
    )


@pytest.fixture
def audit_log() -> AuditLog:
    return AuditLog()


@pytest.fixture
def transaction_store() -> TransactionStore:
    return TransactionStore()


@pytest.fixture
def transaction_service(risk_scorer, transaction_store, audit_log) -> TransactionService:
    """Service wired to in-memory stores and a quiet scorer."""
    return TransactionService(
        scorer=risk_scorer,
        store=transaction_store,
        audit_log=audit_log,
    )


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with fresh application state and a quiet scorer."""
    from sentinel.main import app, limiter

    limiter.reset()
    with TestClient(app, raise_server_exceptions=False) as client:
        app.state.transaction_service.scorer = RiskScorer(randomness=lambda: QUIET_SAMPLE)
        yield client


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"X-User-Id": "user-1"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-User-Id": "admin-1", "X-User-Role": "admin"}
