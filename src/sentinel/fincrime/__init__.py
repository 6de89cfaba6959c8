"""
Fraud monitoring module for SecurePay Sentinel.

Provides:
- Rule-based transaction risk scoring
- Transaction submission and storage
- Plain-language explanations for flagged transactions
"""

from sentinel.fincrime.risk_scoring import (
    DEFAULT_POLICY,
    Device,
    RiskLevel,
    RiskPolicy,
    RiskScorer,
    ScoringInput,
    ScoringResult,
    score,
)
from sentinel.fincrime.transactions import (
    Transaction,
    TransactionOutcome,
    TransactionRequest,
    TransactionService,
    TransactionStore,
)
from sentinel.fincrime.explanation import (
    Explanation,
    explain_transaction,
)

__all__ = [
    # Risk Scoring
    "DEFAULT_POLICY",
    "Device",
    "RiskLevel",
    "RiskPolicy",
    "RiskScorer",
    "ScoringInput",
    "ScoringResult",
    "score",
    # Transactions
    "Transaction",
    "TransactionOutcome",
    "TransactionRequest",
    "TransactionService",
    "TransactionStore",
    # Explanation
    "Explanation",
    "explain_transaction",
]
