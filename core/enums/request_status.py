"""Blood request lifecycle states."""

from enum import Enum


class RequestStatus(str, Enum):
    """Blood request lifecycle states.

    Requests start OPEN. CANCELLED and COMPLETED are terminal.
    """

    OPEN = "open"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
