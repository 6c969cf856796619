"""Screening workflows.

The orchestrator ties the consent ledger, the profile store, the screening
provider, the record store and the audit sink together. Each workflow runs
its steps strictly in sequence:

    consent check -> profile load -> record (requested) -> provider request
    -> record (pending) -> provider result -> record (final) -> audit
    -> adverse action when the outcome calls for one

Errors raised before the record exists leave no trace in the record store
and never reach the provider. Errors raised afterwards mark the record
failed, are audited, and propagate unchanged.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from datetime import date
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trustgate.compliance.consent import ConsentLedger
from trustgate.compliance.policies import (
    MVR_CONSENT_POLICY,
    SOFT_CREDIT_CONSENT_POLICY,
    ScreeningPolicy,
)
from trustgate.core.audit import AuditEventInput, AuditLogger, AuditSink
from trustgate.core.exceptions import (
    MissingLicenseDataError,
    PersistenceError,
    ProfileNotFoundError,
)
from trustgate.core.logging import LogContext, get_logger, log_external_call
from trustgate.db.models.audit import AuditAction
from trustgate.db.repositories.screening import AdverseActionRepository, ScreeningRepository
from trustgate.providers.factory import ScreeningProviderConfig, get_screening_provider
from trustgate.providers.protocol import ScreeningProvider
from trustgate.providers.types import (
    MvrRequestInput,
    ProviderError,
    ProviderReference,
    ProviderRequestError,
    ProviderResultError,
    RiskLevel,
    ScreeningOutcome,
    ScreeningResult,
    ScreeningStatus,
    ScreeningType,
    SoftCreditRequestInput,
)

from .profiles import DatabaseProfileStore
from .types import ProfileStore, RenterProfileData, WorkflowResult

logger = get_logger(__name__)

T = TypeVar("T")

# Profiles do not store a date of birth yet; the mock provider ignores it
PLACEHOLDER_DATE_OF_BIRTH = date(1990, 1, 1)

_AUDIT_ACTIONS: dict[ScreeningType, tuple[AuditAction, AuditAction]] = {
    ScreeningType.MVR: (AuditAction.SCREENING_MVR_COMPLETED, AuditAction.SCREENING_MVR_FAILED),
    ScreeningType.SOFT_CREDIT: (
        AuditAction.SCREENING_SOFT_CREDIT_COMPLETED,
        AuditAction.SCREENING_SOFT_CREDIT_FAILED,
    ),
}


def split_full_name(full_name: str | None) -> tuple[str, str]:
    """Split a full name into first name and the remainder.

    >>> split_full_name("Mary Ann Smith")
    ('Mary', 'Ann Smith')
    >>> split_full_name(None)
    ('', '')
    """
    parts = (full_name or "").split()
    first_name = parts[0] if parts else ""
    return first_name, " ".join(parts[1:])


def mvr_adverse_reason_codes(result: ScreeningResult) -> list[str]:
    """Reason codes for an adverse action after an MVR check.

    A failed MVR only triggers an adverse action when the provider also
    flagged high fraud risk.
    """
    if result.result == ScreeningOutcome.FAIL and result.signals.get("fraud_risk") == "high":
        return ["fraud_risk_high"]
    return []


def soft_credit_adverse_reason_codes(result: ScreeningResult) -> list[str]:
    """Reason codes for an adverse action after a soft credit check."""
    if result.result == ScreeningOutcome.FAIL:
        return ["credit_risk_high"]
    return []


class ScreeningOrchestrator:
    """Runs MVR and soft credit screenings for renters.

    One provider instance is held for the orchestrator's lifetime; the mock
    provider only returns results for requests it accepted itself.

    Usage:
        orchestrator = ScreeningOrchestrator(db, ScreeningProviderConfig())
        outcome = await orchestrator.run_mvr_screening("renter-123", booking_id="bk-1")
    """

    def __init__(
        self,
        db: AsyncSession,
        config: ScreeningProviderConfig | None = None,
        *,
        provider: ScreeningProvider | None = None,
        profile_store: ProfileStore | None = None,
        audit_sink: AuditSink | None = None,
        consent_ledger: ConsentLedger | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            db: Async session used by the record store and default collaborators
            config: Provider configuration (defaults select the mock provider)
            provider: Provider instance to use instead of building one from config
            profile_store: Profile source (defaults to the renter_profiles table)
            audit_sink: Audit destination (defaults to the audit_events table)
            consent_ledger: Consent ledger (defaults to one over db)
        """
        self.config = config or ScreeningProviderConfig()
        self.provider = provider or get_screening_provider(self.config)
        self.profile_store = profile_store or DatabaseProfileStore(db)
        self.audit_sink = audit_sink or AuditLogger(db)
        self.consent_ledger = consent_ledger or ConsentLedger(db)
        self.screenings = ScreeningRepository(db)
        self.adverse_actions = AdverseActionRepository(db)

    @property
    def provider_name(self) -> str:
        """Name recorded on screening records; always the active provider's id."""
        return self.provider.provider_id

    async def run_mvr_screening(
        self,
        renter_id: str,
        booking_id: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> WorkflowResult:
        """Run a Motor Vehicle Record check for a renter.

        Args:
            renter_id: Renter to screen
            booking_id: Booking the check is for, if any
            ip_address: Client IP recorded in the audit trail
            user_agent: Client user agent recorded in the audit trail

        Returns:
            Screening id with the final status, result and risk level

        Raises:
            ConsentRequiredError: Renter has not accepted the MVR consent policy
            ProfileNotFoundError: No profile exists for the renter
            MissingLicenseDataError: Profile lacks license number or state
            PersistenceError: The screening record could not be created
            ProviderError: The provider failed after the record was created
        """
        await self._require_consent(renter_id, MVR_CONSENT_POLICY)
        profile = await self._load_profile(renter_id)

        missing = [
            field
            for field in ("drivers_license_number", "drivers_license_state")
            if not getattr(profile, field)
        ]
        if missing:
            raise MissingLicenseDataError(renter_id, missing)

        first_name, last_name = split_full_name(profile.full_name)
        request = MvrRequestInput(
            renter_id=renter_id,
            booking_id=booking_id,
            first_name=first_name,
            last_name=last_name,
            date_of_birth=PLACEHOLDER_DATE_OF_BIRTH,
            drivers_license_number=profile.drivers_license_number,
            drivers_license_state=profile.drivers_license_state,
        )

        return await self._run_workflow(
            screening_type=ScreeningType.MVR,
            renter_id=renter_id,
            booking_id=booking_id,
            submit=lambda: self.provider.request_mvr(request),
            adverse_reason_codes=mvr_adverse_reason_codes,
            ip_address=ip_address,
            user_agent=user_agent,
        )

    async def run_soft_credit_screening(
        self,
        renter_id: str,
        booking_id: str | None = None,
        *,
        reason: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> WorkflowResult:
        """Run a soft credit check for a renter.

        The reason is stored in the record's signals from the start and is
        kept in the final signals even if the provider reports a "reason" of
        its own.

        Raises:
            ConsentRequiredError: Renter has not accepted the soft credit consent policy
            ProfileNotFoundError: No profile exists for the renter
            PersistenceError: The screening record could not be created
            ProviderError: The provider failed after the record was created
        """
        await self._require_consent(renter_id, SOFT_CREDIT_CONSENT_POLICY)
        profile = await self._load_profile(renter_id)

        first_name, last_name = split_full_name(profile.full_name)
        request = SoftCreditRequestInput(
            renter_id=renter_id,
            booking_id=booking_id,
            first_name=first_name,
            last_name=last_name,
            date_of_birth=PLACEHOLDER_DATE_OF_BIRTH,
            email=profile.email or None,
        )

        return await self._run_workflow(
            screening_type=ScreeningType.SOFT_CREDIT,
            renter_id=renter_id,
            booking_id=booking_id,
            submit=lambda: self.provider.request_soft_credit(request),
            adverse_reason_codes=soft_credit_adverse_reason_codes,
            ip_address=ip_address,
            user_agent=user_agent,
            context={"reason": reason},
        )

    async def _require_consent(self, renter_id: str, policy: ScreeningPolicy) -> None:
        await self.consent_ledger.require_policy_acceptance(renter_id, policy.key, policy.version)

    async def _load_profile(self, renter_id: str) -> RenterProfileData:
        profile = await self.profile_store.get_profile(renter_id)
        if profile is None:
            raise ProfileNotFoundError(renter_id)
        return profile

    async def _run_workflow(
        self,
        *,
        screening_type: ScreeningType,
        renter_id: str,
        booking_id: str | None,
        submit: Callable[[], Awaitable[ProviderReference]],
        adverse_reason_codes: Callable[[ScreeningResult], list[str]],
        ip_address: str | None,
        user_agent: str | None,
        context: dict[str, Any] | None = None,
    ) -> WorkflowResult:
        """Create the record, drive it through the provider, audit the outcome.

        Args:
            context: Workflow inputs stored in the record's signals and in
                every audit event; these keys win over provider signals
        """
        context = context or {}
        completed_action, failed_action = _AUDIT_ACTIONS[screening_type]

        try:
            screening = await self.screenings.create_requested(
                renter_id, booking_id, screening_type, self.provider_name, signals=context
            )
        except SQLAlchemyError as e:
            logger.error(
                "screening_record_create_failed",
                renter_id=renter_id,
                screening_type=screening_type.value,
                error=str(e),
            )
            raise PersistenceError(
                "Failed to create screening record", operation="create_screening"
            ) from e

        screening_id = screening.screening_id

        with LogContext(screening_id=str(screening_id), renter_id=renter_id):
            logger.info(
                "screening_record_created",
                screening_type=screening_type.value,
                provider=self.provider_name,
            )

            try:
                reference = await self._call_provider(
                    f"request_{screening_type.value}", ProviderRequestError, submit
                )
                screening = await self.screenings.mark_pending(screening, reference.provider_ref)

                result = await self._call_provider(
                    "get_result",
                    ProviderResultError,
                    lambda: self.provider.get_result(reference.provider_ref, screening_type),
                )
                screening = await self.screenings.record_result(
                    screening, result, {**result.signals, **context}
                )

                await self.audit_sink.log_audit_event(
                    AuditEventInput(
                        user_id=renter_id,
                        action=completed_action,
                        resource_type="screening",
                        resource_id=str(screening_id),
                        details={
                            "booking_id": booking_id,
                            "result": _value_or_none(result.result),
                            "risk_level": _value_or_none(result.risk_level),
                            "provider": self.provider_name,
                            **context,
                        },
                        ip_address=ip_address,
                        user_agent=user_agent,
                        success=True,
                    )
                )

                reason_codes = adverse_reason_codes(result)
                if reason_codes:
                    await self.adverse_actions.create_draft(
                        renter_id, booking_id, screening_id, reason_codes, self.provider_name
                    )
                    logger.warning("adverse_action_created", reason_codes=reason_codes)

            except Exception as e:
                await self._mark_failed(screening_id)
                await self._audit_failure(
                    AuditEventInput(
                        user_id=renter_id,
                        action=failed_action,
                        resource_type="screening",
                        resource_id=str(screening_id),
                        details={"booking_id": booking_id, "error": str(e), **context},
                        ip_address=ip_address,
                        user_agent=user_agent,
                        success=False,
                        error_message=str(e),
                    )
                )
                logger.error(
                    "screening_failed",
                    screening_type=screening_type.value,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise

            logger.info(
                "screening_completed",
                screening_type=screening_type.value,
                status=result.status.value,
                result=_value_or_none(result.result),
                risk_level=_value_or_none(result.risk_level),
            )

        return WorkflowResult(
            screening_id=screening_id,
            status=result.status,
            result=result.result,
            risk_level=result.risk_level,
        )

    async def _call_provider(
        self,
        operation: str,
        error_cls: type[ProviderError],
        call: Callable[[], Awaitable[T]],
    ) -> T:
        """Await a provider call, bounded by the configured timeout when set."""
        timeout = self.config.provider_timeout_seconds
        start = time.perf_counter()
        success = False
        try:
            async with asyncio.timeout(timeout):
                response = await call()
            success = True
            return response
        except TimeoutError as e:
            if timeout is None:
                raise
            raise error_cls(
                f"{operation} timed out after {timeout}s", self.provider_name
            ) from e
        finally:
            log_external_call(
                logger,
                service=self.provider_name,
                operation=operation,
                duration_ms=(time.perf_counter() - start) * 1000,
                success=success,
            )

    async def _mark_failed(self, screening_id: UUID) -> None:
        """Move the record to FAILED; a failure here is logged, never raised."""
        try:
            screening = await self.screenings.get(screening_id)
            if screening is None:
                logger.error("screening_record_missing")
                return
            if ScreeningStatus(screening.status).is_terminal:
                logger.warning("screening_already_terminal", status=screening.status)
                return
            await self.screenings.mark_failed(screening)
        except Exception:
            logger.exception("screening_mark_failed_error")

    async def _audit_failure(self, event: AuditEventInput) -> None:
        """Record a failed workflow; the workflow error stays the one raised."""
        try:
            await self.audit_sink.log_audit_event(event)
        except Exception:
            logger.exception("screening_failure_audit_error", action=event.action.value)


def _value_or_none(value: ScreeningOutcome | RiskLevel | None) -> str | None:
    return value.value if value is not None else None


def create_screening_orchestrator(
    db: AsyncSession,
    config: ScreeningProviderConfig | None = None,
    provider: ScreeningProvider | None = None,
) -> ScreeningOrchestrator:
    """Build an orchestrator with the database-backed collaborators."""
    return ScreeningOrchestrator(db, config, provider=provider)
