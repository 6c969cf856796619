"""Outcome rules for the deterministic mock provider.

Outcomes are keyed off markers in the renter identifier or email so that
test accounts produce reproducible results:

- "+fail" or "_fail"                 -> FAIL / HIGH
- "+conditional" or "_conditional"   -> CONDITIONAL / MEDIUM
- anything else                      -> PASS / LOW

Matching is a case-insensitive substring test and the first rule wins.
"""

from dataclasses import dataclass, field
from typing import Any

from trustgate.providers.types import RiskLevel, ScreeningOutcome, ScreeningType

FAIL_MARKERS = ("+fail", "_fail")
CONDITIONAL_MARKERS = ("+conditional", "_conditional")


@dataclass(frozen=True)
class MockOutcome:
    """Result, risk level and signals the mock provider will report."""

    result: ScreeningOutcome
    risk_level: RiskLevel
    signals: dict[str, Any] = field(default_factory=dict)


_MVR_OUTCOMES: dict[ScreeningOutcome, MockOutcome] = {
    ScreeningOutcome.FAIL: MockOutcome(
        result=ScreeningOutcome.FAIL,
        risk_level=RiskLevel.HIGH,
        signals={
            "license_status": "suspended",
            "major_violations_count": 3,
            "fraud_risk": "high",
        },
    ),
    ScreeningOutcome.CONDITIONAL: MockOutcome(
        result=ScreeningOutcome.CONDITIONAL,
        risk_level=RiskLevel.MEDIUM,
        signals={
            "license_status": "valid",
            "major_violations_count": 1,
            "fraud_risk": "medium",
        },
    ),
    ScreeningOutcome.PASS: MockOutcome(
        result=ScreeningOutcome.PASS,
        risk_level=RiskLevel.LOW,
        signals={
            "license_status": "valid",
            "major_violations_count": 0,
            "fraud_risk": "low",
        },
    ),
}

_SOFT_CREDIT_OUTCOMES: dict[ScreeningOutcome, MockOutcome] = {
    ScreeningOutcome.FAIL: MockOutcome(
        result=ScreeningOutcome.FAIL,
        risk_level=RiskLevel.HIGH,
        signals={
            "credit_risk_score": 350,
            "payment_behavior": "poor",
            "fraud_risk": "high",
        },
    ),
    ScreeningOutcome.CONDITIONAL: MockOutcome(
        result=ScreeningOutcome.CONDITIONAL,
        risk_level=RiskLevel.MEDIUM,
        signals={
            "credit_risk_score": 620,
            "payment_behavior": "fair",
            "fraud_risk": "medium",
        },
    ),
    ScreeningOutcome.PASS: MockOutcome(
        result=ScreeningOutcome.PASS,
        risk_level=RiskLevel.LOW,
        signals={
            "credit_risk_score": 750,
            "payment_behavior": "good",
            "fraud_risk": "low",
        },
    ),
}


def classify_identifier(identifier: str) -> ScreeningOutcome:
    """Map a renter identifier or email to the outcome its markers select.

    Args:
        identifier: Renter ID or email address

    Returns:
        The outcome selected by the first matching rule
    """
    normalized = identifier.lower()

    if any(marker in normalized for marker in FAIL_MARKERS):
        return ScreeningOutcome.FAIL

    if any(marker in normalized for marker in CONDITIONAL_MARKERS):
        return ScreeningOutcome.CONDITIONAL

    return ScreeningOutcome.PASS


def determine_outcome(screening_type: ScreeningType, identifier: str) -> MockOutcome:
    """Determine the mock outcome for a screening type and identifier.

    Returns a fresh copy of the signals so callers can mutate them freely.
    """
    table = _MVR_OUTCOMES if screening_type == ScreeningType.MVR else _SOFT_CREDIT_OUTCOMES
    outcome = table[classify_identifier(identifier)]
    return MockOutcome(
        result=outcome.result,
        risk_level=outcome.risk_level,
        signals=dict(outcome.signals),
    )
