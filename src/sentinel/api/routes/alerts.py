"""
Fraud alert API routes.

An alert is a high-risk transaction awaiting the account holder's review.
"""

from uuid import UUID

from fastapi import APIRouter, Query
from pydantic import BaseModel

from sentinel.api.deps import Transactions, User
from sentinel.api.routes.transactions import TransactionResponse
from sentinel.fincrime.explanation import explain_transaction
from sentinel.fincrime.risk_scoring import RiskLevel

router = APIRouter()


class AlertDetailResponse(BaseModel):
    """Alert with its plain-language explanation."""

    transaction: TransactionResponse
    transaction_details: str
    risk_score: int
    flagging_reasons: list[str]
    explanation: str


@router.get("", response_model=list[TransactionResponse])
async def list_alerts(
    service: Transactions,
    user: User,
    limit: int = Query(3, ge=1, le=50),
):
    """Latest high-risk transactions for the caller."""
    transactions = service.store.list_for_user(
        user.id,
        risk_level=RiskLevel.HIGH,
        limit=limit,
    )
    return [TransactionResponse.from_transaction(t) for t in transactions]


@router.get("/{transaction_id}", response_model=AlertDetailResponse)
async def get_alert(
    transaction_id: UUID,
    service: Transactions,
    user: User,
):
    """Explain why one of the caller's transactions was flagged."""
    transaction = service.get_transaction(transaction_id, user.id)
    explanation = explain_transaction(transaction)

    return AlertDetailResponse(
        transaction=TransactionResponse.from_transaction(transaction),
        transaction_details=explanation.transaction_details,
        risk_score=explanation.risk_score,
        flagging_reasons=list(explanation.flagging_reasons),
        explanation=explanation.summary,
    )
