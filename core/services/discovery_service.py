"""Read-only discovery queries over requests and donors.

Every party embedded in a result goes through the privacy gate, so contact
fields never appear in listings.
"""

from django.db.models import Q

import structlog

from core.constants import (
    DONOR_SEARCH_LIMIT,
    HOME_FEED_LIMIT,
    NEARBY_DONOR_DEFAULT_DISTANCE_METERS,
    NEARBY_DONOR_LIMIT,
)
from core.enums import GeoEntityType, Urgency, UserMode
from core.exceptions import InvalidBloodTypeError, InvalidUrgencyError
from core.models import BloodRequest, User
from core.schemas.geo import NearbySearchQuery
from core.schemas.request import (
    MarketRequest,
    OpenRequestFilter,
    SeekerOwnRequest,
)
from core.schemas.user import DonorSearchQuery, DonorSummary
from core.services.compatibility import (
    compatible_donors,
    is_valid_blood_type,
    recipients_for,
)
from core.services.geospatial_index import GeospatialIndex, geospatial_index
from core.services.privacy_gate import privacy_gate
from core.services.user_service import user_service

logger = structlog.get_logger(__name__)


def _summary_fields(blood_request: BloodRequest) -> dict:
    return {
        "request_id": blood_request.request_id,
        "blood_type": blood_request.blood_type,
        "units": blood_request.units,
        "urgency": blood_request.urgency,
        "hospital": blood_request.hospital,
        "city": blood_request.city,
        "notes": blood_request.notes,
        "status": blood_request.status,
        "created_at": blood_request.created_at,
        "accepted_at": blood_request.accepted_at,
    }


def _market_request(blood_request: BloodRequest) -> MarketRequest:
    return MarketRequest(
        **_summary_fields(blood_request),
        seeker=privacy_gate.city_only_view(blood_request.seeker),
    )


def _donor_summary(user: User, distance_meters: float | None = None) -> DonorSummary:
    return DonorSummary(
        user_id=user.user_id,
        blood_type=user.blood_type,
        city=user.city,
        region=user.region,
        is_available=user.effective_availability,
        distance_meters=distance_meters,
    )


class DiscoveryService:
    """Request listings and donor searches for the authenticated caller."""

    def __init__(self, index: GeospatialIndex) -> None:
        self.index = index

    def _compatible_open_requests(self, donor: User):
        return (
            BloodRequest.objects.open()
            .filter(blood_type__in=recipients_for(donor.blood_type))
            .exclude(seeker=donor)
            .select_related("seeker")
            .by_urgency()
        )

    def requests_for_donor(self) -> list[MarketRequest]:
        """Open requests the caller could donate to.

        Requests in another city are skipped when both the caller and the
        request name a city. Callers outside donor modes or without a blood
        type get an empty list.
        """
        donor = user_service.require_current_profile()
        if not donor.is_donor or not donor.blood_type:
            return []

        queryset = self._compatible_open_requests(donor)
        if donor.city:
            queryset = queryset.filter(
                Q(city__isnull=True) | Q(city="") | Q(city=donor.city)
            )
        return [_market_request(r) for r in queryset]

    def requests_for_seeker(self) -> list[SeekerOwnRequest]:
        """The caller's own requests in every status, newest first."""
        seeker = user_service.require_current_profile()
        queryset = (
            BloodRequest.objects.filter(seeker=seeker)
            .select_related("seeker", "accepted_donor")
            .order_by("-created_at")
        )
        return [
            SeekerOwnRequest(
                **_summary_fields(r),
                accepted_donor=privacy_gate.donor_view(r, seeker),
            )
            for r in queryset
        ]

    def open_market_search(self, filters: OpenRequestFilter) -> list[MarketRequest]:
        """All open requests, optionally narrowed by blood type and urgency.

        Raises:
            InvalidBloodTypeError: If blood_type is given but not canonical.
            InvalidUrgencyError: If urgency is given but unknown.
        """
        queryset = BloodRequest.objects.open().select_related("seeker")
        if filters.blood_type:
            if not is_valid_blood_type(filters.blood_type):
                raise InvalidBloodTypeError()
            queryset = queryset.filter(blood_type=filters.blood_type)
        if filters.urgency:
            if filters.urgency not in {u.value for u in Urgency}:
                raise InvalidUrgencyError()
            queryset = queryset.filter(urgency=filters.urgency)
        return [_market_request(r) for r in queryset.by_urgency()]

    def home_feed(self) -> list[MarketRequest]:
        """The most pressing open requests the caller could donate to."""
        user = user_service.require_current_profile()
        if not user.blood_type:
            return []
        queryset = self._compatible_open_requests(user)[:HOME_FEED_LIMIT]
        return [_market_request(r) for r in queryset]

    def search_donors(self, query: DonorSearchQuery) -> list[DonorSummary]:
        """Donor directory filtered by blood type, city and region.

        Raises:
            InvalidBloodTypeError: If blood_type is given but not canonical.
        """
        caller = user_service.require_current_profile()
        queryset = (
            User.objects.filter(mode__in=UserMode.donor_modes())
            .filter(Q(is_available__isnull=True) | Q(is_available=True))
            .exclude(pk=caller.pk)
        )
        if query.blood_type:
            if not is_valid_blood_type(query.blood_type):
                raise InvalidBloodTypeError()
            queryset = queryset.filter(blood_type=query.blood_type)
        if query.city:
            queryset = queryset.filter(city__iexact=query.city)
        if query.region:
            queryset = queryset.filter(region__iexact=query.region)

        return [_donor_summary(u) for u in queryset[:DONOR_SEARCH_LIMIT]]

    def search_nearby_donors(self, query: NearbySearchQuery) -> list[DonorSummary]:
        """Available donors around a point, nearest first.

        With a blood type only donors who can give to it are returned.

        Raises:
            InvalidBloodTypeError: If blood_type is given but not canonical.
        """
        caller = user_service.require_current_profile()
        filters: dict = {
            "entity_type": GeoEntityType.USER.value,
            "is_available": True,
        }
        if query.blood_type:
            if not is_valid_blood_type(query.blood_type):
                raise InvalidBloodTypeError()
            filters["blood_type"] = compatible_donors(query.blood_type)

        hits = self.index.nearest(
            query.latitude,
            query.longitude,
            # one extra slot in case the caller is among the hits
            limit=NEARBY_DONOR_LIMIT + 1,
            max_distance_meters=query.max_distance
            or NEARBY_DONOR_DEFAULT_DISTANCE_METERS,
            filters=filters,
        )
        caller_key = str(caller.user_id)
        distances = {h.key: h.distance_meters for h in hits if h.key != caller_key}
        users = {
            str(user.user_id): user
            for user in User.objects.filter(user_id__in=list(distances))
        }

        results = [
            _donor_summary(users[key], distance)
            for key, distance in distances.items()
            if key in users
        ]
        logger.debug(
            "nearby_donor_search",
            hits=len(hits),
            returned=len(results[:NEARBY_DONOR_LIMIT]),
        )
        return results[:NEARBY_DONOR_LIMIT]


discovery_service = DiscoveryService(geospatial_index)
