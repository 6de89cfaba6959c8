"""
Transaction submission workflow.

Validates a submitted transaction, scores it once, stores the record and
audits high-risk results. The attached score is never recomputed.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from sentinel.audit import AuditEvent, AuditLog
from sentinel.errors import NotAuthenticatedError, TransactionNotFoundError
from sentinel.fincrime.risk_scoring import (
    Device,
    RiskLevel,
    RiskScorer,
    ScoringInput,
    ScoringResult,
)

logger = logging.getLogger(__name__)

REVIEW_ROUTE = "/dashboard/alerts/{transaction_id}"
HISTORY_ROUTE = "/dashboard/transactions"


class TransactionRequest(BaseModel):
    """Submitted transaction form."""

    amount: Decimal = Field(gt=0, allow_inf_nan=False)
    location: str = Field(min_length=1)
    device: Device

    @field_validator("location")
    @classmethod
    def strip_location(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Location is required")
        return v


@dataclass(frozen=True)
class Transaction:
    """Stored transaction with its risk assessment."""

    user_id: str
    amount: Decimal
    location: str
    device: Device
    scoring: ScoringResult
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def risk_score(self) -> int:
        return self.scoring.risk_score

    @property
    def risk_level(self) -> RiskLevel:
        return self.scoring.risk_level

    @property
    def flagging_reasons(self) -> tuple[str, ...]:
        return self.scoring.flagging_reasons

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "user_id": self.user_id,
            "amount": str(self.amount),
            "location": self.location,
            "device": self.device.value,
            "created_at": self.created_at.isoformat(),
            **self.scoring.to_dict(),
        }


@dataclass(frozen=True)
class TransactionOutcome:
    """Result of submitting a transaction."""

    transaction: Transaction
    review_url: str

    @property
    def requires_review(self) -> bool:
        return self.transaction.risk_level == RiskLevel.HIGH


class TransactionStore:
    """In-memory transaction storage."""

    def __init__(self):
        self._transactions: dict[UUID, Transaction] = {}

    def add(self, transaction: Transaction) -> None:
        self._transactions[transaction.id] = transaction

    def get(self, transaction_id: UUID) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    def list_all(
        self,
        risk_level: Optional[RiskLevel] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions newest first."""
        txs = sorted(
            reversed(list(self._transactions.values())),
            key=lambda t: t.created_at,
            reverse=True,
        )
        if risk_level:
            txs = [t for t in txs if t.risk_level == risk_level]
        if limit is not None:
            txs = txs[:limit]
        return txs

    def list_for_user(
        self,
        user_id: str,
        risk_level: Optional[RiskLevel] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List one user's transactions newest first."""
        txs = [t for t in self.list_all(risk_level=risk_level) if t.user_id == user_id]
        if limit is not None:
            txs = txs[:limit]
        return txs

    def get_statistics(self) -> dict[str, Any]:
        """Totals for the admin dashboard."""
        total = len(self._transactions)
        by_level = {level.value: 0 for level in RiskLevel}
        for tx in self._transactions.values():
            by_level[tx.risk_level.value] += 1

        high_risk = by_level[RiskLevel.HIGH.value]
        return {
            "total_transactions": total,
            "total_users": len({t.user_id for t in self._transactions.values()}),
            "by_risk_level": by_level,
            "high_risk": high_risk,
            "fraud_rate": (high_risk / total) * 100 if total > 0 else 0.0,
        }


class TransactionService:
    """Creates transactions and routes high-risk ones to review."""

    def __init__(
        self,
        scorer: RiskScorer,
        store: TransactionStore,
        audit_log: AuditLog,
    ):
        self.scorer = scorer
        self.store = store
        self.audit_log = audit_log

    def create_transaction(
        self,
        request: TransactionRequest | dict[str, Any],
        user_id: Optional[str],
    ) -> TransactionOutcome:
        """
        Validate, score and store a submitted transaction.

        Args:
            request: Submitted form, as a model or raw dict
            user_id: Authenticated submitter

        Returns:
            TransactionOutcome with the stored record and the route the
            client should navigate to

        Raises:
            NotAuthenticatedError: No user_id given
            pydantic.ValidationError: Malformed form data
        """
        if not user_id:
            raise NotAuthenticatedError("User not authenticated.")

        if not isinstance(request, TransactionRequest):
            request = TransactionRequest.model_validate(request)

        scoring = self.scorer.score(
            ScoringInput(
                amount=request.amount,
                location=request.location,
                device=request.device,
            )
        )

        transaction = Transaction(
            user_id=user_id,
            amount=request.amount,
            location=request.location,
            device=request.device,
            scoring=scoring,
        )
        self.store.add(transaction)
        logger.info(
            f"Created transaction {transaction.id} for {user_id}: "
            f"score={scoring.risk_score} level={scoring.risk_level.value}"
        )

        if scoring.risk_level == RiskLevel.HIGH:
            logger.warning(f"Transaction {transaction.id} flagged as high risk")
            self.audit_log.record(
                AuditEvent.TRANSACTION_FLAGGED,
                user_id,
                {
                    "transaction_id": str(transaction.id),
                    "amount": str(transaction.amount),
                    "location": transaction.location,
                    "risk_score": scoring.risk_score,
                    "reasons": list(scoring.flagging_reasons),
                },
            )
            review_url = REVIEW_ROUTE.format(transaction_id=transaction.id)
        else:
            review_url = HISTORY_ROUTE

        return TransactionOutcome(transaction=transaction, review_url=review_url)

    def get_transaction(self, transaction_id: UUID, user_id: str) -> Transaction:
        """Fetch one of the user's transactions."""
        transaction = self.store.get(transaction_id)
        if transaction is None or transaction.user_id != user_id:
            raise TransactionNotFoundError(transaction_id)
        return transaction
