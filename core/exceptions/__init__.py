"""Exception handling utilities for the matching service."""

from core.exceptions.domain_exceptions import (
    AuthorizationError,
    BloodTypeNotSetError,
    DomainError,
    DomainValidationError,
    DonationNotFoundError,
    DonorUnavailableError,
    EmergencyRateLimitError,
    FutureDonationDateError,
    IncompatibleBloodTypeError,
    InvalidBloodTypeError,
    InvalidTransitionError,
    InvalidUnitsError,
    InvalidUrgencyError,
    ModeNotPermittedError,
    NotDonationOwnerError,
    NotesTooLongError,
    NotFoundError,
    NotificationNotFoundError,
    NotNotificationOwnerError,
    NotRequestOwnerError,
    RequestNotFoundError,
    RequestNotOpenError,
    SelfAcceptError,
    UserNotFoundError,
)
from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
)

__all__ = [
    "AuthorizationError",
    "BloodTypeNotSetError",
    "DomainError",
    "DomainValidationError",
    "DonationNotFoundError",
    "DonorUnavailableError",
    "DownstreamServiceError",
    "DownstreamServiceUnavailableError",
    "EmergencyRateLimitError",
    "FutureDonationDateError",
    "IncompatibleBloodTypeError",
    "InvalidBloodTypeError",
    "InvalidTransitionError",
    "InvalidUnitsError",
    "InvalidUrgencyError",
    "ModeNotPermittedError",
    "NotDonationOwnerError",
    "NotFoundError",
    "NotNotificationOwnerError",
    "NotRequestOwnerError",
    "NotesTooLongError",
    "NotificationNotFoundError",
    "RequestNotFoundError",
    "RequestNotOpenError",
    "SelfAcceptError",
    "UserNotFoundError",
]
