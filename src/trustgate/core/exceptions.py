"""Core exceptions for the screening workflow and its record store."""

from uuid import UUID

from trustgate.utils.exceptions import TrustGateError


class ConsentRequiredError(TrustGateError):
    """Raised when a screening is requested without the required policy acceptance.

    The caller can recover by obtaining the renter's acceptance and retrying.

    Attributes:
        user_id: The user whose acceptance is missing
        policy_key: Key of the policy that must be accepted
        policy_version: Version of the policy that must be accepted
    """

    def __init__(self, user_id: str, policy_key: str, policy_version: str):
        super().__init__(f"Policy acceptance required: {policy_key} v{policy_version}")
        self.user_id = user_id
        self.policy_key = policy_key
        self.policy_version = policy_version

    def __str__(self) -> str:
        return f"ConsentRequiredError: {self.args[0]} (user={self.user_id})"


class ProfileNotFoundError(TrustGateError):
    """Raised when the renter profile cannot be loaded.

    Attributes:
        renter_id: The renter whose profile is missing
    """

    def __init__(self, renter_id: str):
        super().__init__(f"Renter profile not found: {renter_id}")
        self.renter_id = renter_id

    def __str__(self) -> str:
        return f"ProfileNotFoundError: {self.args[0]}"


class MissingLicenseDataError(TrustGateError):
    """Raised when an MVR screening is requested for a profile without license data.

    Attributes:
        renter_id: The renter whose profile is incomplete
        missing_fields: Profile fields that are empty
    """

    def __init__(self, renter_id: str, missing_fields: list[str]):
        super().__init__("Driver license information required for MVR screening")
        self.renter_id = renter_id
        self.missing_fields = missing_fields

    def __str__(self) -> str:
        return (
            f"MissingLicenseDataError: {self.args[0]} "
            f"(renter={self.renter_id}, missing={self.missing_fields})"
        )


class PersistenceError(TrustGateError):
    """Raised when the record store cannot persist a screening record.

    Attributes:
        operation: The store operation that failed (e.g., "create_screening")
    """

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation

    def __str__(self) -> str:
        return f"PersistenceError({self.operation}): {self.args[0]}"


class InvalidStatusTransitionError(TrustGateError):
    """Raised when a screening record would move backwards or leave a terminal state.

    Attributes:
        screening_id: The record being updated
        current_status: Status the record is in
        requested_status: Status the update asked for
    """

    def __init__(self, screening_id: UUID, current_status: str, requested_status: str):
        super().__init__(
            f"Screening {screening_id} cannot move from {current_status} to {requested_status}"
        )
        self.screening_id = screening_id
        self.current_status = current_status
        self.requested_status = requested_status

    def __str__(self) -> str:
        return f"InvalidStatusTransitionError: {self.args[0]}"


class ScreeningNotFoundError(TrustGateError):
    """Raised when a screening record does not exist.

    Attributes:
        screening_id: The identifier that was not found
    """

    def __init__(self, screening_id: UUID | str):
        super().__init__(f"Screening not found: {screening_id}")
        self.screening_id = screening_id

    def __str__(self) -> str:
        return f"ScreeningNotFoundError: {self.args[0]}"
