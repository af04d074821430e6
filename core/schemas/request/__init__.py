"""Blood request schemas."""

from core.schemas.request.action_response import ActionResponse, RequestCreated
from core.schemas.request.blood_request_summary import (
    BloodRequestDetail,
    BloodRequestSummary,
    MarketRequest,
    SeekerOwnRequest,
)
from core.schemas.request.create_request import (
    CreateBloodRequest,
    EmergencyBroadcastRequest,
    OpenRequestFilter,
)
from core.schemas.request.party_info import CityOnlyParty, PartyInfo

__all__ = [
    "ActionResponse",
    "BloodRequestDetail",
    "BloodRequestSummary",
    "CityOnlyParty",
    "CreateBloodRequest",
    "EmergencyBroadcastRequest",
    "MarketRequest",
    "OpenRequestFilter",
    "PartyInfo",
    "RequestCreated",
    "SeekerOwnRequest",
]
