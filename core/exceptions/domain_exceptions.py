"""Domain errors raised by the matching services.

Every error carries a stable ``reason`` code for clients and an HTTP status
used by the exception handler. Messages are user-facing.
"""

from core.enums.blood_type import BloodType


class DomainError(Exception):
    """Base class for business rule violations."""

    status_code = 400
    reason = "domain_error"
    default_message = "The operation could not be completed"

    def __init__(self, message: str | None = None):
        """Initialize domain error.

        Args:
            message: Optional override for the default message
        """
        self.message = message or self.default_message
        super().__init__(self.message)


# 403 family


class AuthorizationError(DomainError):
    """Caller is not allowed to perform the operation."""

    status_code = 403
    reason = "forbidden"
    default_message = "You do not have permission to perform this action"


class ModeNotPermittedError(AuthorizationError):
    """Caller's mode does not permit the operation."""

    reason = "mode_not_permitted"


class NotRequestOwnerError(AuthorizationError):
    """Caller does not own the blood request."""

    reason = "not_request_owner"
    default_message = "You can only cancel your own requests"


class DonorUnavailableError(AuthorizationError):
    """Donor has switched availability off."""

    reason = "donor_unavailable"
    default_message = "You must be available to accept requests"


class NotNotificationOwnerError(AuthorizationError):
    """Caller does not own the notification."""

    reason = "not_notification_owner"
    default_message = "You can only mark your own notifications as read"


class NotDonationOwnerError(AuthorizationError):
    """Caller does not own the donation record."""

    reason = "not_donation_owner"
    default_message = "Not authorized to delete this donation"


# 400 family


class DomainValidationError(DomainError):
    """Input violates a business rule."""

    reason = "validation_error"
    default_message = "Invalid input"


class InvalidBloodTypeError(DomainValidationError):
    """Value is not one of the eight canonical blood types."""

    reason = "invalid_blood_type"
    default_message = (
        f"Invalid blood type. Must be one of: {', '.join(BloodType.values())}"
    )


class InvalidUnitsError(DomainValidationError):
    """Requested unit count is out of range."""

    reason = "invalid_units"
    default_message = "Units must be between 1 and 10"


class InvalidUrgencyError(DomainValidationError):
    """Urgency is not a known level."""

    reason = "invalid_urgency"
    default_message = "Urgency must be one of: critical, urgent, normal, standard"


class NotesTooLongError(DomainValidationError):
    """Request notes exceed the length bound."""

    reason = "notes_too_long"
    default_message = "Notes must be at most 500 characters"


class BloodTypeNotSetError(DomainValidationError):
    """Donor has not recorded a blood type."""

    reason = "blood_type_not_set"
    default_message = "Please set your blood type before accepting requests"


class IncompatibleBloodTypeError(DomainValidationError):
    """Donor blood type cannot supply the requested type."""

    reason = "incompatible_blood_type"
    default_message = "Your blood type is not compatible with this request"


class SelfAcceptError(DomainValidationError):
    """Donor tried to accept their own request."""

    reason = "self_accept"
    default_message = "You cannot accept your own request"


class FutureDonationDateError(DomainValidationError):
    """Donation date lies in the future."""

    reason = "future_donation_date"
    default_message = "Donation date cannot be in the future"


# 409 / 429


class InvalidTransitionError(DomainError):
    """Request state does not allow the transition."""

    status_code = 409
    reason = "invalid_transition"
    default_message = "This request cannot be changed in its current state"


class RequestNotOpenError(InvalidTransitionError):
    """Request has already left the open state."""

    reason = "request_not_open"
    default_message = "This request is no longer open"


class EmergencyRateLimitError(DomainError):
    """Seeker broadcast an emergency too recently."""

    status_code = 429
    reason = "emergency_rate_limited"
    default_message = "Please wait before sending another emergency broadcast"


# 404 family


class NotFoundError(DomainError):
    """Referenced record does not exist."""

    status_code = 404
    reason = "not_found"
    default_message = "The requested resource was not found"


class UserNotFoundError(NotFoundError):
    """No user record for the caller or id."""

    reason = "user_not_found"
    default_message = "User not found"


class RequestNotFoundError(NotFoundError):
    """No blood request with the given id."""

    reason = "request_not_found"
    default_message = "Request not found"


class NotificationNotFoundError(NotFoundError):
    """No notification with the given id."""

    reason = "notification_not_found"
    default_message = "Notification not found"


class DonationNotFoundError(NotFoundError):
    """No donation with the given id."""

    reason = "donation_not_found"
    default_message = "Donation not found"
