"""Screening API endpoints.

- POST /v1/renters/{renter_id}/screenings/mvr - Run an MVR screening
- POST /v1/renters/{renter_id}/screenings/soft-credit - Run a soft credit screening
- GET /v1/renters/{renter_id}/screenings/summary - Latest state per screening type
- GET /v1/screenings/{screening_id} - Get a screening record
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from trustgate.api.dependencies import get_db, get_orchestrator, get_request_context
from trustgate.api.schemas.errors import APIError
from trustgate.api.schemas.screening import (
    MvrScreeningRequest,
    ScreeningDetailResponse,
    ScreeningOutcomeResponse,
    ScreeningSummaryResponse,
    SoftCreditScreeningRequest,
    screening_detail_from_record,
)
from trustgate.core.context import RequestContext
from trustgate.core.exceptions import ScreeningNotFoundError
from trustgate.core.logging import get_logger
from trustgate.db.repositories.screening import ScreeningRepository
from trustgate.screening import ScreeningOrchestrator, WorkflowResult, get_screening_summary

logger = get_logger(__name__)

router = APIRouter(tags=["screening"])

_WORKFLOW_ERRORS = {
    403: {"model": APIError, "description": "Consent required"},
    404: {"model": APIError, "description": "Renter profile not found"},
    502: {"model": APIError, "description": "Screening provider failed"},
    503: {"model": APIError, "description": "Screening unavailable"},
}


def _outcome_response(outcome: WorkflowResult) -> ScreeningOutcomeResponse:
    return ScreeningOutcomeResponse(
        screening_id=outcome.screening_id,
        status=outcome.status,
        result=outcome.result,
        risk_level=outcome.risk_level,
    )


@router.post(
    "/renters/{renter_id}/screenings/mvr",
    response_model=ScreeningOutcomeResponse,
    summary="Run an MVR screening",
    responses={
        **_WORKFLOW_ERRORS,
        422: {"model": APIError, "description": "License data missing"},
    },
)
async def request_mvr_screening(
    renter_id: str,
    body: MvrScreeningRequest,
    orchestrator: Annotated[ScreeningOrchestrator, Depends(get_orchestrator)],
    ctx: Annotated[RequestContext, Depends(get_request_context)],
) -> ScreeningOutcomeResponse:
    """Run a Motor Vehicle Record check for a renter who accepted the MVR consent."""
    logger.info("mvr_screening_requested", renter_id=renter_id, booking_id=body.booking_id)

    outcome = await orchestrator.run_mvr_screening(
        renter_id,
        body.booking_id,
        ip_address=ctx.ip_address,
        user_agent=ctx.user_agent,
    )
    return _outcome_response(outcome)


@router.post(
    "/renters/{renter_id}/screenings/soft-credit",
    response_model=ScreeningOutcomeResponse,
    summary="Run a soft credit screening",
    responses=_WORKFLOW_ERRORS,
)
async def request_soft_credit_screening(
    renter_id: str,
    body: SoftCreditScreeningRequest,
    orchestrator: Annotated[ScreeningOrchestrator, Depends(get_orchestrator)],
    ctx: Annotated[RequestContext, Depends(get_request_context)],
) -> ScreeningOutcomeResponse:
    """Run a soft credit check for a renter who accepted the soft credit consent."""
    logger.info(
        "soft_credit_screening_requested", renter_id=renter_id, booking_id=body.booking_id
    )

    outcome = await orchestrator.run_soft_credit_screening(
        renter_id,
        body.booking_id,
        reason=body.reason,
        ip_address=ctx.ip_address,
        user_agent=ctx.user_agent,
    )
    return _outcome_response(outcome)


@router.get(
    "/renters/{renter_id}/screenings/summary",
    response_model=ScreeningSummaryResponse,
    summary="Get a renter's screening summary",
)
async def read_screening_summary(
    renter_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    booking_id: Annotated[str | None, Query(max_length=255)] = None,
) -> ScreeningSummaryResponse:
    """Return the latest MVR and soft credit state for a renter."""
    # An empty ?booking_id= means no booking filter
    booking_id = booking_id or None
    summary = await get_screening_summary(db, renter_id, booking_id)
    return ScreeningSummaryResponse(
        renter_id=renter_id,
        booking_id=booking_id,
        summary=summary.model_dump(mode="json", exclude_none=True),
    )


@router.get(
    "/screenings/{screening_id}",
    response_model=ScreeningDetailResponse,
    summary="Get a screening record",
    responses={404: {"model": APIError, "description": "Screening not found"}},
)
async def read_screening(
    screening_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ScreeningDetailResponse:
    """Return a screening record including its signals."""
    record = await ScreeningRepository(db).get(screening_id)
    if record is None:
        raise ScreeningNotFoundError(screening_id)
    return screening_detail_from_record(record)
