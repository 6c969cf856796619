"""API schemas for request/response validation."""

from .errors import APIError, ErrorCode
from .health import HealthResponse, HealthStatus
from .screening import (
    MvrScreeningRequest,
    PolicyAcceptRequest,
    PolicyAcceptResponse,
    PolicyResponse,
    ScreeningDetailResponse,
    ScreeningOutcomeResponse,
    ScreeningSummaryResponse,
    SoftCreditScreeningRequest,
    screening_detail_from_record,
)

__all__ = [
    # Error schemas
    "APIError",
    "ErrorCode",
    # Health schemas
    "HealthResponse",
    "HealthStatus",
    # Policy schemas
    "PolicyResponse",
    "PolicyAcceptRequest",
    "PolicyAcceptResponse",
    # Screening schemas
    "MvrScreeningRequest",
    "SoftCreditScreeningRequest",
    "ScreeningOutcomeResponse",
    "ScreeningSummaryResponse",
    "ScreeningDetailResponse",
    "screening_detail_from_record",
]
