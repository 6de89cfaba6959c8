"""
Rule-based risk scoring for submitted transactions.

Each transaction is checked against a small policy table:
- Amount above the high-amount threshold
- Location matching the high-risk blocklist
- Simulated rapid-repeat (velocity) check driven by an injected random source

Triggered rules add fixed points; the sum is clamped to 100 and banded
into Low / Medium / High.
"""

import logging
import random
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Optional

from sentinel.errors import InvalidInputError, RandomnessSourceError

logger = logging.getLogger(__name__)

Randomness = Callable[[], float]


class RiskLevel(str, Enum):
    """Coarse risk banding used for display and workflow routing."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Device(str, Enum):
    """Device the transaction was submitted from."""

    MOBILE = "Mobile"
    DESKTOP = "Desktop"


@dataclass(frozen=True)
class RiskPolicy:
    """Canonical thresholds, points and blocklist for transaction scoring."""

    amount_threshold: Decimal = Decimal("1000")
    amount_points: int = 40

    high_risk_locations: tuple[str, ...] = ("North Korea", "Syria", "Iran")
    location_points: int = 50

    velocity_probability: float = 0.1
    velocity_points: int = 20

    # Band floors: score < medium -> Low, score < high -> Medium, else High
    medium_threshold: int = 40
    high_threshold: int = 80
    max_score: int = 100

    @classmethod
    def from_settings(cls, settings) -> "RiskPolicy":
        """Build a policy from application settings."""
        return cls(
            amount_threshold=Decimal(str(settings.risk_amount_threshold)),
            high_risk_locations=tuple(settings.risk_high_risk_locations),
            velocity_probability=settings.risk_velocity_probability,
            medium_threshold=settings.risk_medium_threshold,
            high_threshold=settings.risk_high_threshold,
        )

    def level_for(self, score: int) -> RiskLevel:
        """Map a risk score to its level."""
        if score >= self.high_threshold:
            return RiskLevel.HIGH
        if score >= self.medium_threshold:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


DEFAULT_POLICY = RiskPolicy()


@dataclass(frozen=True)
class ScoringInput:
    """Transaction candidate submitted for scoring."""

    amount: Decimal
    location: str
    device: Device


@dataclass(frozen=True)
class ScoringResult:
    """Risk assessment attached to a transaction at creation time."""

    risk_score: int
    risk_level: RiskLevel
    flagging_reasons: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "risk_score": self.risk_score,
            "risk_level": self.risk_level.value,
            "flagging_reasons": list(self.flagging_reasons),
        }


def validate_amount(amount: Any) -> Decimal:
    """Return amount as a Decimal, or raise if it is not a positive finite number."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidInputError("amount", f"expected a number, got {type(amount).__name__}")

    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise InvalidInputError("amount", f"not a number: {amount!r}") from e

    if not value.is_finite():
        raise InvalidInputError("amount", "must be finite")
    if value <= 0:
        raise InvalidInputError("amount", "must be greater than 0")
    return value


def validate_device(device: Any) -> Device:
    """Coerce a device name to the Device enum."""
    if isinstance(device, Device):
        return device
    try:
        return Device(device)
    except ValueError as e:
        allowed = ", ".join(d.value for d in Device)
        raise InvalidInputError("device", f"{device!r} is not one of {allowed}") from e


def format_amount(amount: Decimal) -> str:
    """Render an amount the way it was entered: 1200, 1200.5."""
    # Plain fixed-point text, exact at any magnitude
    text = format(amount, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class RiskScorer:
    """
    Real-time risk scoring for individual transactions.

    The velocity rule draws from an injected randomness source so that
    scoring is deterministic under test. A per-call source overrides the
    scorer's default.
    """

    def __init__(
        self,
        policy: Optional[RiskPolicy] = None,
        randomness: Optional[Randomness] = None,
    ):
        self.policy = policy or DEFAULT_POLICY
        self.randomness = randomness or random.random

    def score(
        self,
        scoring_input: ScoringInput | dict[str, Any],
        randomness: Optional[Randomness] = None,
    ) -> ScoringResult:
        """
        Score a transaction candidate.

        Accepts either a ScoringInput or a dict with amount, location
        and device keys.

        Raises:
            InvalidInputError: amount, location or device is malformed
            RandomnessSourceError: randomness returned a sample outside [0, 1)
        """
        if isinstance(scoring_input, dict):
            amount = scoring_input.get("amount")
            location = scoring_input.get("location")
            device = scoring_input.get("device")
        else:
            amount = scoring_input.amount
            location = scoring_input.location
            device = scoring_input.device

        amount = validate_amount(amount)
        validate_device(device)
        if not isinstance(location, str) or not location.strip():
            raise InvalidInputError("location", "must be a non-empty string")

        policy = self.policy
        score = 0
        reasons: list[str] = []

        if amount > policy.amount_threshold:
            score += policy.amount_points
            reasons.append(
                f"Transaction amount (${format_amount(amount)}) is unusually high."
            )

        if self._is_high_risk_location(location):
            score += policy.location_points
            reasons.append(
                f"Transaction location ({location}) is considered high-risk."
            )

        sample = (randomness or self.randomness)()
        if not 0.0 <= sample < 1.0:
            raise RandomnessSourceError(sample)
        if sample < policy.velocity_probability:
            score += policy.velocity_points
            reasons.append("Transaction frequency is unusually rapid (simulated).")

        score = min(score, policy.max_score)
        level = policy.level_for(score)

        if reasons:
            logger.debug(f"Scored transaction {score} ({level.value}): {reasons}")

        return ScoringResult(
            risk_score=score,
            risk_level=level,
            flagging_reasons=tuple(reasons),
        )

    def _is_high_risk_location(self, location: str) -> bool:
        """Check location against the blocklist, case-insensitively."""
        lowered = location.lower()
        return any(
            blocked.lower() in lowered for blocked in self.policy.high_risk_locations
        )


def score(
    scoring_input: ScoringInput | dict[str, Any],
    randomness: Randomness,
) -> ScoringResult:
    """Score with the canonical policy and an explicit randomness source."""
    return RiskScorer(randomness=randomness).score(scoring_input)
