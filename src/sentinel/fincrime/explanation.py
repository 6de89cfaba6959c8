"""
Plain-language explanation of flagged transactions.

Turns the stored flagging reasons of a high-risk transaction into a short
summary for the account holder, shown on the alert review page.
"""

from dataclasses import dataclass
from typing import Any

from sentinel.errors import ExplanationUnavailableError
from sentinel.fincrime.risk_scoring import RiskLevel
from sentinel.fincrime.transactions import Transaction

# Reason prefix -> guidance for the account holder
REASON_GUIDANCE = {
    "Transaction amount": (
        "The amount is well above what is typical for a single payment. "
        "Large payments are a common target for account takeover."
    ),
    "Transaction location": (
        "The payment was made from or to a region associated with elevated "
        "fraud and sanctions risk."
    ),
    "Transaction frequency": (
        "Several payments arrived in quick succession, which can indicate "
        "automated or unauthorized use of the account."
    ),
}

GENERIC_GUIDANCE = "This activity differs from the expected pattern for the account."


@dataclass(frozen=True)
class Explanation:
    """Explanation shown for a high-risk transaction."""

    transaction_details: str
    risk_score: int
    flagging_reasons: tuple[str, ...]
    summary: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "transaction_details": self.transaction_details,
            "risk_score": self.risk_score,
            "flagging_reasons": list(self.flagging_reasons),
            "summary": self.summary,
        }


def describe_transaction(transaction: Transaction) -> str:
    """One-line description, e.g. 'Amount: $1200.00, Location: Oslo, Device: Mobile'."""
    return (
        f"Amount: ${transaction.amount:.2f}, "
        f"Location: {transaction.location}, "
        f"Device: {transaction.device.value}"
    )


def _guidance_for(reason: str) -> str:
    for prefix, guidance in REASON_GUIDANCE.items():
        if reason.startswith(prefix):
            return guidance
    return GENERIC_GUIDANCE


def explain_transaction(transaction: Transaction) -> Explanation:
    """
    Explain why a transaction was flagged.

    Raises:
        ExplanationUnavailableError: transaction is not high risk
    """
    if transaction.risk_level != RiskLevel.HIGH:
        raise ExplanationUnavailableError(
            f"Transaction {transaction.id} is {transaction.risk_level.value} risk; "
            "only high-risk transactions are explained"
        )

    lines = [
        f"This transaction received a risk score of {transaction.risk_score} "
        "out of 100 and has been held for review."
    ]
    for reason in transaction.flagging_reasons:
        lines.append(f"- {reason} {_guidance_for(reason)}")
    lines.append(
        "If you made this payment, no further action is needed once it is "
        "reviewed. If you did not, contact support and change your password."
    )

    return Explanation(
        transaction_details=describe_transaction(transaction),
        risk_score=transaction.risk_score,
        flagging_reasons=transaction.flagging_reasons,
        summary="\n".join(lines),
    )
