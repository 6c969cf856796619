"""Screening policy documents shown to renters before a check is run.

Each policy is identified by (key, version). A screening workflow requires
the renter to have accepted the exact version listed here.
"""

from pydantic import BaseModel, ConfigDict


class ScreeningPolicy(BaseModel):
    """A versioned consent or disclosure document."""

    model_config = ConfigDict(frozen=True)

    key: str
    version: str
    title: str
    content: str


MVR_CONSENT_POLICY = ScreeningPolicy(
    key="renter_mvr_consent_v1",
    version="1.0",
    title="Motor Vehicle Record (MVR) Consent",
    content="""\
By accepting this consent, you authorize us to obtain your Motor Vehicle Record (MVR)
from the state Department of Motor Vehicles or an authorized screening provider.

What we check:
- Current license status (valid, suspended, expired)
- Major traffic violations
- Driving history indicators

How we use this information:
- To assess your eligibility to rent vehicles
- To protect vehicle owners and other users
- To comply with insurance requirements

Your rights:
- You can request a copy of your screening results
- You have the right to dispute inaccurate information

Outcomes:
- PASS: Your booking can proceed normally
- CONDITIONAL: Your booking may proceed with additional restrictions
- FAIL: Your booking request cannot be approved at this time""",
)

SOFT_CREDIT_CONSENT_POLICY = ScreeningPolicy(
    key="renter_soft_credit_consent_v1",
    version="1.0",
    title="Soft Credit Check Consent",
    content="""\
By accepting this consent, you authorize a soft credit inquiry through an authorized
screening provider. A soft inquiry does not affect your credit score.

What we check:
- Payment behavior indicators
- Credit risk assessment (not your full credit report)
- Fraud risk indicators

Your rights:
- You can request a copy of your screening results
- You have the right to dispute inaccurate information
- If adverse action is taken based on consumer report information, you will receive notice

Outcomes:
- PASS: Your booking can proceed normally
- CONDITIONAL: Additional deposit or vehicle restrictions may apply
- FAIL: Your booking request cannot be approved""",
)

SCREENING_DISCLAIMER_POLICY = ScreeningPolicy(
    key="screening_disclaimer_v1",
    version="1.0",
    title="Screening Disclaimer",
    content="""\
PASS: All checks passed. Your booking can proceed normally.

CONDITIONAL: Some concerns were identified. Your booking may proceed with an additional
security deposit, restrictions on vehicle tiers, or a shorter maximum rental duration.

FAIL: Significant concerns were identified. If this decision was based on information
from a consumer reporting agency, you will receive an adverse action notice explaining
how to dispute it or obtain a free copy of your report.

If you believe a screening result is inaccurate, contact support with documentation.""",
)

SCREENING_POLICIES: dict[str, ScreeningPolicy] = {
    policy.key: policy
    for policy in (MVR_CONSENT_POLICY, SOFT_CREDIT_CONSENT_POLICY, SCREENING_DISCLAIMER_POLICY)
}


def get_policy(key: str, version: str | None = None) -> ScreeningPolicy | None:
    """Look up a policy by key, optionally pinned to a version.

    Returns:
        The policy, or None if the key is unknown or the version differs
    """
    policy = SCREENING_POLICIES.get(key)
    if policy is None or (version is not None and policy.version != version):
        return None
    return policy
