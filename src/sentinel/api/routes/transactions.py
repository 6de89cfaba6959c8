"""
Transaction API routes.

Submitting a transaction scores it once; the score is stored with the
record and returned unchanged on every read.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status
from pydantic import BaseModel

from sentinel.api.deps import Transactions, User
from sentinel.fincrime.risk_scoring import Device, RiskLevel
from sentinel.fincrime.transactions import Transaction, TransactionRequest

router = APIRouter()


class TransactionResponse(BaseModel):
    """Response model for a stored transaction."""

    id: UUID
    user_id: str
    amount: Decimal
    location: str
    device: Device
    created_at: datetime
    risk_score: int
    risk_level: RiskLevel
    flagging_reasons: list[str]

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionResponse":
        return cls.model_validate(transaction.to_dict())


class TransactionCreatedResponse(BaseModel):
    """Response model for a newly submitted transaction."""

    transaction: TransactionResponse
    review_url: str
    requires_review: bool


@router.post(
    "",
    response_model=TransactionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    payload: TransactionRequest,
    service: Transactions,
    user: User,
):
    """
    Submit a transaction for risk scoring.

    High-risk transactions are audited and point the client at the alert
    review page; everything else goes back to the history view.
    """
    outcome = service.create_transaction(payload, user.id)
    return TransactionCreatedResponse(
        transaction=TransactionResponse.from_transaction(outcome.transaction),
        review_url=outcome.review_url,
        requires_review=outcome.requires_review,
    )


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    service: Transactions,
    user: User,
    risk_level: Optional[RiskLevel] = None,
    limit: int = Query(20, ge=1, le=100),
):
    """List the caller's transactions, newest first."""
    transactions = service.store.list_for_user(
        user.id,
        risk_level=risk_level,
        limit=limit,
    )
    return [TransactionResponse.from_transaction(t) for t in transactions]


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: UUID,
    service: Transactions,
    user: User,
):
    """Get one of the caller's transactions."""
    return TransactionResponse.from_transaction(
        service.get_transaction(transaction_id, user.id)
    )
