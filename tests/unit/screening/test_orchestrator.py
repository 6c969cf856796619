"""Unit tests for the screening orchestrator."""

import asyncio

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from trustgate.compliance import ConsentLedger
from trustgate.core.audit import AuditEventInput, AuditLogger
from trustgate.core.exceptions import (
    ConsentRequiredError,
    MissingLicenseDataError,
    PersistenceError,
    ProfileNotFoundError,
)
from trustgate.db.models.audit import AuditAction
from trustgate.db.models.screening import AdverseAction, RenterScreening
from trustgate.providers.factory import ScreeningProviderConfig
from trustgate.providers.types import (
    ProviderReference,
    ProviderRequestError,
    ProviderResultError,
    RiskLevel,
    ScreeningOutcome,
    ScreeningResult,
    ScreeningStatus,
    ScreeningType,
)
from trustgate.screening import (
    PLACEHOLDER_DATE_OF_BIRTH,
    ScreeningOrchestrator,
    create_screening_orchestrator,
    get_screening_summary,
    mvr_adverse_reason_codes,
    soft_credit_adverse_reason_codes,
    split_full_name,
)

MVR_POLICY = ("renter_mvr_consent_v1", "1.0")
CREDIT_POLICY = ("renter_soft_credit_consent_v1", "1.0")


class StubProvider:
    """Provider double that records calls and returns a fixed result."""

    provider_id = "stub"

    def __init__(
        self,
        result: ScreeningResult | None = None,
        *,
        request_error: Exception | None = None,
        result_error: Exception | None = None,
        delay: float = 0,
    ):
        self.result = result or ScreeningResult(
            status=ScreeningStatus.COMPLETE,
            result=ScreeningOutcome.PASS,
            risk_level=RiskLevel.LOW,
            signals={"fraud_risk": "low"},
        )
        self.request_error = request_error
        self.result_error = result_error
        self.delay = delay
        self.calls: list[str] = []
        self.requests: list = []

    async def _request(self, name: str, request) -> ProviderReference:
        self.calls.append(name)
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.request_error is not None:
            raise self.request_error
        return ProviderReference(provider_ref=f"stub_{len(self.calls)}")

    async def request_mvr(self, request) -> ProviderReference:
        return await self._request("request_mvr", request)

    async def request_soft_credit(self, request) -> ProviderReference:
        return await self._request("request_soft_credit", request)

    async def get_result(self, provider_ref: str, screening_type: ScreeningType):
        self.calls.append("get_result")
        if self.result_error is not None:
            raise self.result_error
        return self.result.model_copy(update={"provider_ref": provider_ref})


class RecordingAuditSink:
    """Audit sink that keeps events in memory."""

    def __init__(self):
        self.events: list[AuditEventInput] = []

    async def log_audit_event(self, event: AuditEventInput) -> None:
        self.events.append(event)


async def _accept(db_session, renter_id: str, policy: tuple[str, str]) -> None:
    await ConsentLedger(db_session).record_policy_acceptance(renter_id, *policy)


async def _count(db_session, model) -> int:
    result = await db_session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def _screening(db_session, screening_id) -> RenterScreening:
    return await db_session.get(RenterScreening, screening_id, populate_existing=True)


class TestHelpers:
    """Tests for the module-level helpers."""

    @pytest.mark.parametrize(
        "full_name,expected",
        [
            ("Jane Renter", ("Jane", "Renter")),
            ("Mary Ann  Smith", ("Mary", "Ann Smith")),
            ("Cher", ("Cher", "")),
            ("   ", ("", "")),
            (None, ("", "")),
        ],
    )
    def test_split_full_name(self, full_name, expected):
        """Test names split into first token and remainder."""
        assert split_full_name(full_name) == expected

    def test_mvr_reason_codes_require_high_fraud(self):
        """Test an MVR fail only triggers with high fraud risk."""
        fail_high = ScreeningResult(
            status=ScreeningStatus.COMPLETE,
            result=ScreeningOutcome.FAIL,
            signals={"fraud_risk": "high"},
        )
        fail_medium = fail_high.model_copy(update={"signals": {"fraud_risk": "medium"}})
        pass_high = fail_high.model_copy(update={"result": ScreeningOutcome.PASS})

        assert mvr_adverse_reason_codes(fail_high) == ["fraud_risk_high"]
        assert mvr_adverse_reason_codes(fail_medium) == []
        assert mvr_adverse_reason_codes(pass_high) == []

    def test_soft_credit_reason_codes(self):
        """Test any soft credit fail triggers, regardless of signals."""
        fail = ScreeningResult(status=ScreeningStatus.COMPLETE, result=ScreeningOutcome.FAIL)
        conditional = fail.model_copy(update={"result": ScreeningOutcome.CONDITIONAL})

        assert soft_credit_adverse_reason_codes(fail) == ["credit_risk_high"]
        assert soft_credit_adverse_reason_codes(conditional) == []


@pytest.mark.asyncio
class TestMvrScreening:
    """Tests for run_mvr_screening with the mock provider."""

    @pytest.mark.parametrize(
        "renter_id,outcome,risk",
        [
            ("user@example.com", ScreeningOutcome.PASS, RiskLevel.LOW),
            ("user+conditional@example.com", ScreeningOutcome.CONDITIONAL, RiskLevel.MEDIUM),
            ("user_conditional@example.com", ScreeningOutcome.CONDITIONAL, RiskLevel.MEDIUM),
            ("user+fail@example.com", ScreeningOutcome.FAIL, RiskLevel.HIGH),
            ("user_fail@example.com", ScreeningOutcome.FAIL, RiskLevel.HIGH),
        ],
    )
    async def test_markers(self, db_session, add_profile, mock_provider, renter_id, outcome, risk):
        """Test each renter id marker produces its outcome."""
        await add_profile(renter_id)
        await _accept(db_session, renter_id, MVR_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=mock_provider)

        result = await orchestrator.run_mvr_screening(renter_id)

        assert result.status == ScreeningStatus.COMPLETE
        assert result.result == outcome
        assert result.risk_level == risk

    async def test_fail_creates_adverse_action(self, db_session, add_profile, mock_provider):
        """Test a failed MVR with high fraud risk is fully recorded."""
        renter_id = "user_fail@example.com"
        await add_profile(renter_id)
        await _accept(db_session, renter_id, MVR_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=mock_provider)

        result = await orchestrator.run_mvr_screening(
            renter_id, "booking-1", ip_address="203.0.113.7", user_agent="agent/1"
        )

        screening = await _screening(db_session, result.screening_id)
        assert screening.status == "complete"
        assert screening.result == "fail"
        assert screening.risk_level == "high"
        assert screening.provider == "mock"
        assert screening.provider_ref.startswith("mock_mvr_")
        assert screening.signals == {
            "license_status": "suspended",
            "major_violations_count": 3,
            "fraud_risk": "high",
        }

        actions = await orchestrator.adverse_actions.list_for_renter(renter_id)
        assert len(actions) == 1
        assert actions[0].reason_codes == ["fraud_risk_high"]
        assert actions[0].notice_status == "draft"
        assert actions[0].screening_id == result.screening_id
        assert actions[0].booking_id == "booking-1"

        events = await AuditLogger(db_session).query_events(user_id=renter_id)
        assert len(events) == 1
        assert events[0].action == AuditAction.SCREENING_MVR_COMPLETED.value
        assert events[0].success is True
        assert events[0].resource_id == str(result.screening_id)
        assert events[0].details["result"] == "fail"
        assert events[0].details["booking_id"] == "booking-1"
        assert events[0].ip_address == "203.0.113.7"

    @pytest.mark.parametrize("renter_id", ["user@example.com", "user+conditional@example.com"])
    async def test_no_adverse_action_without_fail(
        self, db_session, add_profile, mock_provider, renter_id
    ):
        """Test pass and conditional outcomes create no adverse action."""
        await add_profile(renter_id)
        await _accept(db_session, renter_id, MVR_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=mock_provider)

        await orchestrator.run_mvr_screening(renter_id)

        assert await _count(db_session, AdverseAction) == 0

    async def test_fail_without_high_fraud_has_no_adverse_action(self, db_session, add_profile):
        """Test an MVR fail without high fraud risk is not adverse, unlike soft credit."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        provider = StubProvider(
            ScreeningResult(
                status=ScreeningStatus.COMPLETE,
                result=ScreeningOutcome.FAIL,
                risk_level=RiskLevel.HIGH,
                signals={"fraud_risk": "medium"},
            )
        )
        orchestrator = ScreeningOrchestrator(db_session, provider=provider)

        result = await orchestrator.run_mvr_screening("renter-1")

        assert result.result == ScreeningOutcome.FAIL
        assert await _count(db_session, AdverseAction) == 0

    async def test_consent_required(self, db_session, add_profile):
        """Test a missing acceptance stops the workflow before anything is written."""
        await add_profile("renter-1")
        provider = StubProvider()
        sink = RecordingAuditSink()
        orchestrator = ScreeningOrchestrator(db_session, provider=provider, audit_sink=sink)

        with pytest.raises(ConsentRequiredError) as exc_info:
            await orchestrator.run_mvr_screening("renter-1")

        assert exc_info.value.policy_key == "renter_mvr_consent_v1"
        assert exc_info.value.policy_version == "1.0"
        assert provider.calls == []
        assert sink.events == []
        assert await _count(db_session, RenterScreening) == 0

    async def test_other_policy_does_not_satisfy(self, db_session, add_profile):
        """Test soft credit consent does not allow an MVR check."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=StubProvider())

        with pytest.raises(ConsentRequiredError):
            await orchestrator.run_mvr_screening("renter-1")

    async def test_profile_not_found(self, db_session):
        """Test an unknown renter fails before any record is created."""
        await _accept(db_session, "ghost", MVR_POLICY)
        provider = StubProvider()
        orchestrator = ScreeningOrchestrator(db_session, provider=provider)

        with pytest.raises(ProfileNotFoundError):
            await orchestrator.run_mvr_screening("ghost")

        assert provider.calls == []
        assert await _count(db_session, RenterScreening) == 0

    @pytest.mark.parametrize(
        "license_number,license_state,missing",
        [
            (None, "CA", ["drivers_license_number"]),
            ("D1234567", "", ["drivers_license_state"]),
            (None, None, ["drivers_license_number", "drivers_license_state"]),
        ],
    )
    async def test_missing_license_data(
        self, db_session, add_profile, license_number, license_state, missing
    ):
        """Test an incomplete license stops the workflow before any record is created."""
        await add_profile(
            "renter-1",
            drivers_license_number=license_number,
            drivers_license_state=license_state,
        )
        await _accept(db_session, "renter-1", MVR_POLICY)
        provider = StubProvider()
        orchestrator = ScreeningOrchestrator(db_session, provider=provider)

        with pytest.raises(MissingLicenseDataError) as exc_info:
            await orchestrator.run_mvr_screening("renter-1")

        assert exc_info.value.missing_fields == missing
        assert provider.calls == []
        assert await _count(db_session, RenterScreening) == 0

    async def test_request_built_from_profile(self, db_session, add_profile):
        """Test the provider request carries the profile's name and license."""
        await add_profile("renter-1", full_name="Mary Ann Smith")
        await _accept(db_session, "renter-1", MVR_POLICY)
        provider = StubProvider()
        orchestrator = ScreeningOrchestrator(db_session, provider=provider)

        await orchestrator.run_mvr_screening("renter-1", "booking-1")

        request = provider.requests[0]
        assert provider.calls == ["request_mvr", "get_result"]
        assert request.first_name == "Mary"
        assert request.last_name == "Ann Smith"
        assert request.drivers_license_number == "D1234567"
        assert request.drivers_license_state == "CA"
        assert request.booking_id == "booking-1"
        assert request.date_of_birth == PLACEHOLDER_DATE_OF_BIRTH

    async def test_provider_name_from_instance(self, db_session, add_profile):
        """Test records name the provider that actually ran them."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        orchestrator = ScreeningOrchestrator(
            db_session, ScreeningProviderConfig(), provider=StubProvider()
        )

        result = await orchestrator.run_mvr_screening("renter-1")

        screening = await _screening(db_session, result.screening_id)
        assert screening.provider == "stub"
        assert screening.provider_ref == "stub_1"

    async def test_pending_result_stays_pending(self, db_session, add_profile):
        """Test a pending provider result leaves the record pending."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        provider = StubProvider(ScreeningResult(status=ScreeningStatus.PENDING))
        orchestrator = ScreeningOrchestrator(db_session, provider=provider)

        result = await orchestrator.run_mvr_screening("renter-1")

        assert result.status == ScreeningStatus.PENDING
        assert result.result is None
        screening = await _screening(db_session, result.screening_id)
        assert screening.status == "pending"
        assert screening.provider_ref == "stub_1"
        assert screening.result is None


@pytest.mark.asyncio
class TestSoftCreditScreening:
    """Tests for run_soft_credit_screening."""

    @pytest.mark.parametrize(
        "email,outcome,risk",
        [
            ("user@example.com", ScreeningOutcome.PASS, RiskLevel.LOW),
            ("user+conditional@example.com", ScreeningOutcome.CONDITIONAL, RiskLevel.MEDIUM),
            ("user_fail@example.com", ScreeningOutcome.FAIL, RiskLevel.HIGH),
        ],
    )
    async def test_markers_follow_email(
        self, db_session, add_profile, mock_provider, email, outcome, risk
    ):
        """Test the profile email selects the soft credit outcome."""
        await add_profile("renter-1", email=email)
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=mock_provider)

        result = await orchestrator.run_soft_credit_screening("renter-1", reason="booking")

        assert result.result == outcome
        assert result.risk_level == risk

    async def test_markers_follow_renter_id_without_email(
        self, db_session, add_profile, mock_provider
    ):
        """Test the renter id is used when the profile has no email."""
        await add_profile("renter+fail", email=None)
        await _accept(db_session, "renter+fail", CREDIT_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=mock_provider)

        result = await orchestrator.run_soft_credit_screening("renter+fail", reason="booking")

        assert result.result == ScreeningOutcome.FAIL

    async def test_pass_end_to_end(self, db_session, add_profile, mock_provider):
        """Test a passing soft credit check with no adverse action."""
        await add_profile("renter-1", email="user@example.com")
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=mock_provider)

        result = await orchestrator.run_soft_credit_screening(
            "renter-1", "booking-9", reason="high_value_booking"
        )

        assert result.status == ScreeningStatus.COMPLETE
        assert result.result == ScreeningOutcome.PASS
        assert result.risk_level == RiskLevel.LOW
        assert await _count(db_session, AdverseAction) == 0

        summary = await get_screening_summary(db_session, "renter-1", "booking-9")
        assert summary.mvr is None
        assert summary.soft_credit.status == ScreeningStatus.COMPLETE
        assert summary.soft_credit.result == ScreeningOutcome.PASS
        assert summary.soft_credit.risk_level == RiskLevel.LOW

    async def test_reason_stored_and_preserved(self, db_session, add_profile):
        """Test the caller's reason survives a provider signal of the same name."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        provider = StubProvider(
            ScreeningResult(
                status=ScreeningStatus.COMPLETE,
                result=ScreeningOutcome.PASS,
                risk_level=RiskLevel.LOW,
                signals={"credit_risk_score": 700, "reason": "provider"},
            )
        )
        sink = RecordingAuditSink()
        orchestrator = ScreeningOrchestrator(db_session, provider=provider, audit_sink=sink)

        result = await orchestrator.run_soft_credit_screening("renter-1", reason="manual_review")

        screening = await _screening(db_session, result.screening_id)
        assert screening.signals == {"credit_risk_score": 700, "reason": "manual_review"}
        assert sink.events[0].action == AuditAction.SCREENING_SOFT_CREDIT_COMPLETED
        assert sink.events[0].details["reason"] == "manual_review"

    async def test_fail_creates_adverse_action(self, db_session, add_profile, mock_provider):
        """Test a failed soft credit check creates a credit adverse action."""
        await add_profile("renter-1", email="user+fail@example.com")
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=mock_provider)

        result = await orchestrator.run_soft_credit_screening("renter-1", reason="booking")

        actions = await orchestrator.adverse_actions.get_by_screening(result.screening_id)
        assert len(actions) == 1
        assert actions[0].reason_codes == ["credit_risk_high"]

    async def test_consent_required(self, db_session, add_profile):
        """Test soft credit requires its own policy."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        provider = StubProvider()
        orchestrator = ScreeningOrchestrator(db_session, provider=provider)

        with pytest.raises(ConsentRequiredError) as exc_info:
            await orchestrator.run_soft_credit_screening("renter-1", reason="booking")

        assert exc_info.value.policy_key == "renter_soft_credit_consent_v1"
        assert provider.calls == []

    async def test_no_license_needed(self, db_session, add_profile):
        """Test soft credit runs without license data."""
        await add_profile("renter-1", drivers_license_number=None, drivers_license_state=None)
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        orchestrator = ScreeningOrchestrator(db_session, provider=StubProvider())

        result = await orchestrator.run_soft_credit_screening("renter-1", reason="booking")

        assert result.status == ScreeningStatus.COMPLETE


@pytest.mark.asyncio
class TestWorkflowFailures:
    """Tests for failures after the screening record exists."""

    async def test_request_failure_marks_failed(self, db_session, add_profile):
        """Test a provider request error fails the record and is audited."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        error = ProviderRequestError("upstream unavailable", "stub")
        orchestrator = ScreeningOrchestrator(
            db_session, provider=StubProvider(request_error=error)
        )

        with pytest.raises(ProviderRequestError) as exc_info:
            await orchestrator.run_mvr_screening("renter-1", "booking-1")

        assert exc_info.value is error

        screenings = await orchestrator.screenings.list_for_renter("renter-1")
        assert len(screenings) == 1
        assert screenings[0].status == "failed"
        assert screenings[0].provider_ref is None
        assert screenings[0].result is None
        assert await _count(db_session, AdverseAction) == 0

        events = await AuditLogger(db_session).query_events(user_id="renter-1")
        assert len(events) == 1
        assert events[0].action == AuditAction.SCREENING_MVR_FAILED.value
        assert events[0].success is False
        assert "upstream unavailable" in events[0].error_message
        assert events[0].resource_id == str(screenings[0].screening_id)

    async def test_result_failure_marks_failed(self, db_session, add_profile):
        """Test a provider result error fails a pending record."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        sink = RecordingAuditSink()
        orchestrator = ScreeningOrchestrator(
            db_session,
            provider=StubProvider(result_error=ProviderResultError("lost", "stub")),
            audit_sink=sink,
        )

        with pytest.raises(ProviderResultError):
            await orchestrator.run_soft_credit_screening("renter-1", reason="booking")

        screenings = await orchestrator.screenings.list_for_renter("renter-1")
        assert screenings[0].status == "failed"
        assert screenings[0].provider_ref == "stub_1"
        assert [event.action for event in sink.events] == [
            AuditAction.SCREENING_SOFT_CREDIT_FAILED
        ]
        assert sink.events[0].details["reason"] == "booking"

    async def test_unexpected_error_propagates_unchanged(self, db_session, add_profile):
        """Test non-provider errors are not wrapped."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        orchestrator = ScreeningOrchestrator(
            db_session, provider=StubProvider(request_error=RuntimeError("boom"))
        )

        with pytest.raises(RuntimeError, match="boom"):
            await orchestrator.run_mvr_screening("renter-1")

        screenings = await orchestrator.screenings.list_for_renter("renter-1")
        assert screenings[0].status == "failed"

    async def test_timeout_becomes_provider_error(self, db_session, add_profile):
        """Test a provider call exceeding the configured timeout fails the record."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        orchestrator = ScreeningOrchestrator(
            db_session,
            ScreeningProviderConfig(provider_timeout_seconds=0.01),
            provider=StubProvider(delay=1.0),
        )

        with pytest.raises(ProviderRequestError, match="timed out"):
            await orchestrator.run_mvr_screening("renter-1")

        screenings = await orchestrator.screenings.list_for_renter("renter-1")
        assert screenings[0].status == "failed"

    async def test_failed_audit_does_not_mask_error(self, db_session, add_profile):
        """Test the workflow error is raised even when the failure audit fails."""

        class BrokenSink:
            async def log_audit_event(self, event):
                raise RuntimeError("audit store down")

        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        orchestrator = ScreeningOrchestrator(
            db_session,
            provider=StubProvider(request_error=ProviderRequestError("down", "stub")),
            audit_sink=BrokenSink(),
        )

        with pytest.raises(ProviderRequestError):
            await orchestrator.run_mvr_screening("renter-1")

    async def test_record_create_failure(self, db_session, add_profile, monkeypatch):
        """Test a store failure at creation raises PersistenceError without side effects."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        provider = StubProvider()
        sink = RecordingAuditSink()
        orchestrator = ScreeningOrchestrator(db_session, provider=provider, audit_sink=sink)

        async def _fail(*args, **kwargs):
            raise OperationalError("INSERT", {}, Exception("disk full"))

        monkeypatch.setattr(orchestrator.screenings, "create_requested", _fail)

        with pytest.raises(PersistenceError) as exc_info:
            await orchestrator.run_mvr_screening("renter-1")

        assert exc_info.value.operation == "create_screening"
        assert provider.calls == []
        assert sink.events == []

    async def test_retry_creates_new_record(self, db_session, add_profile):
        """Test a retry after failure leaves the failed record untouched."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", MVR_POLICY)
        failing = ScreeningOrchestrator(
            db_session, provider=StubProvider(request_error=ProviderRequestError("x", "stub"))
        )
        with pytest.raises(ProviderRequestError):
            await failing.run_mvr_screening("renter-1")

        retry = await ScreeningOrchestrator(
            db_session, provider=StubProvider()
        ).run_mvr_screening("renter-1")

        screenings = await failing.screenings.list_for_renter("renter-1")
        assert [s.status for s in screenings] == ["failed", "complete"]
        assert screenings[1].screening_id == retry.screening_id


@pytest.mark.asyncio
class TestCreateScreeningOrchestrator:
    """Tests for the orchestrator builder."""

    async def test_defaults_to_mock_provider(self, db_session):
        """Test the default configuration selects the mock provider."""
        orchestrator = create_screening_orchestrator(db_session)

        assert orchestrator.provider_name == "mock"
        assert orchestrator.config.provider_timeout_seconds is None

    async def test_injected_provider(self, db_session, add_profile):
        """Test an injected provider is used for the workflows."""
        await add_profile("renter-1")
        await _accept(db_session, "renter-1", CREDIT_POLICY)
        provider = StubProvider()

        orchestrator = create_screening_orchestrator(
            db_session, ScreeningProviderConfig(), provider=provider
        )
        await orchestrator.run_soft_credit_screening("renter-1", reason="booking")

        assert provider.calls == ["request_soft_credit", "get_result"]
        assert provider.requests[0].date_of_birth == PLACEHOLDER_DATE_OF_BIRTH
