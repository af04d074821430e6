"""Services for the core app.

Import concrete services from their modules; this package only exposes the
stateless helpers and the health service used at startup.
"""

from core.services.compatibility import can_donate, compatible_donors
from core.services.eligibility import calculate_eligibility
from core.services.health_service import HealthService, health_service

__all__ = [
    "HealthService",
    "calculate_eligibility",
    "can_donate",
    "compatible_donors",
    "health_service",
]
