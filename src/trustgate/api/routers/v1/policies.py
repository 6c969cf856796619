"""Policy API endpoints.

- GET /v1/policies/{policy_key} - Get a policy document
- POST /v1/renters/{renter_id}/policies/accept - Record a policy acceptance
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from trustgate.api.dependencies import get_consent_ledger, get_request_context
from trustgate.api.schemas.errors import APIError
from trustgate.api.schemas.screening import (
    PolicyAcceptRequest,
    PolicyAcceptResponse,
    PolicyResponse,
)
from trustgate.compliance.consent import ConsentLedger, hash_ip_address
from trustgate.compliance.policies import get_policy
from trustgate.core.context import RequestContext

router = APIRouter(tags=["policies"])


@router.get(
    "/policies/{policy_key}",
    response_model=PolicyResponse,
    summary="Get a policy document",
    responses={404: {"description": "Unknown policy or version"}},
)
async def read_policy(
    policy_key: str,
    version: Annotated[str | None, Query(max_length=20)] = None,
) -> PolicyResponse:
    """Return the policy text a renter is asked to accept."""
    policy = get_policy(policy_key, version)
    if policy is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Policy not found: {policy_key}",
        )
    return PolicyResponse(**policy.model_dump())


@router.post(
    "/renters/{renter_id}/policies/accept",
    response_model=PolicyAcceptResponse,
    summary="Accept a policy",
    description="""
    Record a renter's acceptance of a policy version.

    When consent_type is "mvr" or "soft_credit", a screening consent scoped
    to booking_id (or general when booking_id is omitted) is recorded too.
    The client IP is stored only as a truncated SHA-256 hash.
    """,
    responses={422: {"model": APIError, "description": "Validation error"}},
)
async def accept_policy(
    renter_id: str,
    body: PolicyAcceptRequest,
    ledger: Annotated[ConsentLedger, Depends(get_consent_ledger)],
    ctx: Annotated[RequestContext, Depends(get_request_context)],
) -> PolicyAcceptResponse:
    """Record a policy acceptance and, optionally, a screening consent."""
    ip_hash = hash_ip_address(ctx.ip_address)

    await ledger.record_policy_acceptance(
        renter_id,
        body.policy_key,
        body.policy_version,
        ip_hash=ip_hash,
        user_agent=ctx.user_agent,
    )

    if body.consent_type is not None:
        await ledger.record_screening_consent(
            renter_id,
            body.booking_id,
            body.consent_type,
            body.policy_key,
            body.policy_version,
            ip_hash=ip_hash,
            user_agent=ctx.user_agent,
        )

    return PolicyAcceptResponse()
