"""
Dashboard API routes.

Provides aggregated statistics and recent high-risk activity for the
admin dashboard view.
"""

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from sentinel.api.deps import AdminUser, TransactionRepo
from sentinel.api.routes.transactions import TransactionResponse
from sentinel.fincrime.risk_scoring import RiskLevel

router = APIRouter()


class DashboardStatsResponse(BaseModel):
    """Dashboard statistics response."""

    total_transactions: int = 0
    total_users: int = 0
    by_risk_level: dict[str, int] = Field(default_factory=dict)
    high_risk: int = 0
    fraud_rate: float = 0.0


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(store: TransactionRepo, user: AdminUser):
    """Transaction totals and the share banded High."""
    return DashboardStatsResponse(**store.get_statistics())


@router.get("/high-risk", response_model=list[TransactionResponse])
async def get_recent_high_risk(
    store: TransactionRepo,
    user: AdminUser,
    limit: int = Query(5, ge=1, le=50),
):
    """Most recent high-risk transactions across all users."""
    transactions = store.list_all(risk_level=RiskLevel.HIGH, limit=limit)
    return [TransactionResponse.from_transaction(t) for t in transactions]
