"""Response schemas for blood requests."""

from datetime import datetime
from uuid import UUID

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.request.party_info import CityOnlyParty, PartyInfo


class BloodRequestSummary(BaseSchemaModel):
    """Request fields shared by every listing."""

    request_id: UUID
    blood_type: str
    units: int
    urgency: str
    hospital: str | None = None
    city: str | None = None
    notes: str | None = None
    status: str
    created_at: datetime
    accepted_at: datetime | None = None


class MarketRequest(BloodRequestSummary):
    """Open request with the seeker reduced to id and city."""

    seeker: CityOnlyParty | None = None


class SeekerOwnRequest(BloodRequestSummary):
    """The seeker's own request with the accepted donor's non-sensitive fields."""

    accepted_donor: PartyInfo | None = None


class BloodRequestDetail(BloodRequestSummary):
    """Full request view with privacy-gated parties and the viewer's role."""

    seeker: PartyInfo | None = None
    donor: PartyInfo | None = None
    is_seeker: bool
    is_donor: bool
