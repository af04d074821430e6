"""API views for core application.

Domain errors raised by the services propagate to the DRF exception handler,
which turns them into JSON error responses. Request bodies and query
parameters are validated with pydantic here.
"""

from uuid import UUID

import structlog
from pydantic import BaseModel, ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth.oauth2 import OAuth2Authentication
from core.auth.permissions import HasAdminScope
from core.jobs.dispatch import enqueue_now
from core.jobs.geospatial_jobs import SYNC_GEOSPATIAL_INDEX_JOB
from core.jobs.notification_jobs import ELIGIBILITY_REMINDERS_JOB
from core.schemas.center import CenterListQuery
from core.schemas.donation import AddDonationRequest
from core.schemas.geo import NearbySearchQuery
from core.schemas.request import (
    CreateBloodRequest,
    EmergencyBroadcastRequest,
    OpenRequestFilter,
    RequestCreated,
)
from core.schemas.user import (
    BootstrapUserRequest,
    DonorSearchQuery,
    UpdateBloodTypeRequest,
    UpdateLocationRequest,
    UpdateModeRequest,
    UpdateNotificationPreferencesRequest,
    UpdatePhoneRequest,
    UpdateProfileRequest,
    UpdatePushTokenRequest,
)
from core.services import health_service
from core.services.center_service import center_service
from core.services.discovery_service import discovery_service
from core.services.donation_service import donation_service
from core.services.notification_service import notification_service
from core.services.request_service import request_lifecycle_service
from core.services.user_service import user_service

logger = structlog.get_logger(__name__)


class InvalidInput(Exception):
    """Wraps a pydantic failure so views can return the standard 400 body."""

    def __init__(self, error: ValidationError):
        super().__init__(str(error))
        self.error = error

    def response(self) -> Response:
        return Response(
            {
                "error": "bad_request",
                "message": "Invalid request parameters",
                "errors": self.error.errors(include_url=False, include_context=False),
            },
            status=status.HTTP_400_BAD_REQUEST,
        )


def parse(schema: type[BaseModel], data) -> BaseModel:
    """Validate request data against a schema.

    Raises:
        InvalidInput: If validation fails.
    """
    try:
        return schema(**(data or {}))
    except ValidationError as e:
        logger.warning(
            "Invalid request parameters",
            schema=schema.__name__,
            validation_errors=e.errors(include_url=False, include_context=False),
        )
        raise InvalidInput(e) from e


class AuthenticatedView(APIView):
    """Base for endpoints that act on behalf of the authenticated caller."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def handle_exception(self, exc):
        """Render input validation failures before the global handler."""
        if isinstance(exc, InvalidInput):
            return exc.response()
        return super().handle_exception(exc)


class AdminView(AuthenticatedView):
    """Base for operational endpoints that require the admin scope."""

    permission_classes = (IsAuthenticated, HasAdminScope)


# Health


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    def __init__(self, **kwargs):
        """Initialize view with authentication exemptions.

        Exempt from authentication - health checks must be accessible without auth.

        Args:
            **kwargs: Keyword arguments passed to parent class
        """
        super().__init__(**kwargs)
        self.authentication_classes = []
        self.permission_classes = [AllowAny]

    def get(self, _request):
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 with a degraded status when the database or Redis is down.
    """

    def __init__(self, **kwargs):
        """Initialize view with authentication exemptions.

        Args:
            **kwargs: Keyword arguments passed to parent class
        """
        super().__init__(**kwargs)
        self.authentication_classes = []
        self.permission_classes = [AllowAny]

    def get(self, _request):
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(mode="json"), status=status.HTTP_200_OK)


# Users


class CurrentUserView(AuthenticatedView):
    """The caller's profile.

    GET returns the profile (404 until the caller has registered).
    POST registers the caller on first contact and returns 201, or 200 with
    the existing profile.
    """

    def get(self, _request):
        return Response(user_service.get_profile().model_dump())

    def post(self, request):
        bootstrap = parse(BootstrapUserRequest, request.data)
        user, created = user_service.get_or_create_user(bootstrap)
        return Response(
            user_service.to_profile(user).model_dump(),
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class UserPhoneView(AuthenticatedView):
    def put(self, request):
        body = parse(UpdatePhoneRequest, request.data)
        return Response(user_service.update_phone(body.phone).model_dump())


class UserBloodTypeView(AuthenticatedView):
    def put(self, request):
        body = parse(UpdateBloodTypeRequest, request.data)
        return Response(user_service.update_blood_type(body.blood_type).model_dump())


class UserModeView(AuthenticatedView):
    def put(self, request):
        body = parse(UpdateModeRequest, request.data)
        return Response(user_service.update_mode(body.mode).model_dump())


class UserLocationView(AuthenticatedView):
    """Store the caller's coordinates, reverse geocoding when needed."""

    def put(self, request):
        body = parse(UpdateLocationRequest, request.data)
        return Response(user_service.update_location(body).model_dump())


class UserSkipLocationView(AuthenticatedView):
    def post(self, _request):
        return Response(user_service.skip_location().model_dump())


class UserProfileUpdateView(AuthenticatedView):
    """Partial update of city, region and preferred donation center."""

    def patch(self, request):
        body = parse(UpdateProfileRequest, request.data)
        return Response(user_service.update_profile(body).model_dump())


class UserAvailabilityView(AuthenticatedView):
    def get(self, _request):
        return Response(user_service.get_availability().model_dump())


class UserAvailabilityToggleView(AuthenticatedView):
    def post(self, _request):
        return Response(user_service.toggle_availability().model_dump())


class UserPushTokenView(AuthenticatedView):
    def put(self, request):
        body = parse(UpdatePushTokenRequest, request.data)
        return Response(user_service.update_push_token(body.push_token).model_dump())


class UserNotificationPreferencesView(AuthenticatedView):
    """Read or partially update the three notification preferences."""

    def get(self, _request):
        return Response(user_service.get_notification_preferences().model_dump())

    def patch(self, request):
        body = parse(UpdateNotificationPreferencesRequest, request.data)
        return Response(
            user_service.update_notification_preferences(body).model_dump()
        )


class UserStatsView(AuthenticatedView):
    def get(self, _request):
        return Response(user_service.get_user_stats().model_dump())


# Donor discovery


class DonorSearchView(AuthenticatedView):
    """Donor directory filtered by blood type, city and region."""

    def get(self, request):
        query = parse(DonorSearchQuery, request.query_params.dict())
        donors = discovery_service.search_donors(query)
        return Response([d.model_dump() for d in donors])


class NearbyDonorsView(AuthenticatedView):
    """Available donors near a point, optionally compatible with a blood type."""

    def get(self, request):
        query = parse(NearbySearchQuery, request.query_params.dict())
        donors = discovery_service.search_nearby_donors(query)
        return Response([d.model_dump() for d in donors])


# Donation centers


class CenterListView(AuthenticatedView):
    def get(self, request):
        query = parse(CenterListQuery, request.query_params.dict())
        centers = center_service.list_centers(query.city)
        return Response([c.model_dump() for c in centers])


class NearbyCentersView(AuthenticatedView):
    def get(self, request):
        query = parse(NearbySearchQuery, request.query_params.dict())
        centers = center_service.search_nearby_centers(
            query.latitude, query.longitude, query.max_distance
        )
        return Response([c.model_dump() for c in centers])


# Donations


class DonationListView(AuthenticatedView):
    """Donation history (GET) and recording a past donation (POST)."""

    def get(self, _request):
        return Response(donation_service.get_history().model_dump())

    def post(self, request):
        body = parse(AddDonationRequest, request.data)
        donation = donation_service.add_donation(body)
        return Response(donation.model_dump(), status=status.HTTP_201_CREATED)


class DonationDetailView(AuthenticatedView):
    def delete(self, _request, donation_id: UUID):
        donation_service.delete_donation(donation_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class LastDonationView(AuthenticatedView):
    def get(self, _request):
        donation = donation_service.get_last_donation()
        return Response(donation.model_dump() if donation else None)


class DonationStatsView(AuthenticatedView):
    def get(self, _request):
        return Response(donation_service.get_stats().model_dump())


class EligibilityView(AuthenticatedView):
    def get(self, _request):
        return Response(donation_service.get_eligibility().model_dump())


# Blood requests


class BloodRequestCreateView(AuthenticatedView):
    """Create a blood request and notify compatible donors."""

    def post(self, request):
        body = parse(CreateBloodRequest, request.data)
        blood_request = request_lifecycle_service.create_request(body)
        return Response(
            RequestCreated(request_id=blood_request.request_id).model_dump(),
            status=status.HTTP_201_CREATED,
        )


class EmergencyBroadcastView(AuthenticatedView):
    """Create a critical one-unit request, at most once per hour per seeker."""

    def post(self, request):
        body = parse(EmergencyBroadcastRequest, request.data)
        blood_request = request_lifecycle_service.broadcast_emergency(body)
        return Response(
            RequestCreated(request_id=blood_request.request_id).model_dump(),
            status=status.HTTP_201_CREATED,
        )


class OpenRequestsView(AuthenticatedView):
    """Open-market listing, most urgent first."""

    def get(self, request):
        filters = parse(OpenRequestFilter, request.query_params.dict())
        requests = discovery_service.open_market_search(filters)
        return Response([r.model_dump() for r in requests])


class RequestsForDonorView(AuthenticatedView):
    def get(self, _request):
        requests = discovery_service.requests_for_donor()
        return Response([r.model_dump() for r in requests])


class MyRequestsView(AuthenticatedView):
    def get(self, _request):
        requests = discovery_service.requests_for_seeker()
        return Response([r.model_dump() for r in requests])


class HomeFeedView(AuthenticatedView):
    def get(self, _request):
        requests = discovery_service.home_feed()
        return Response([r.model_dump() for r in requests])


class BloodRequestDetailView(AuthenticatedView):
    """One request; contact fields appear only for the accepted counterpart."""

    def get(self, _request, request_id: UUID):
        detail = request_lifecycle_service.get_request_detail(request_id)
        return Response(detail.model_dump())


class AcceptRequestView(AuthenticatedView):
    def post(self, _request, request_id: UUID):
        result = request_lifecycle_service.accept_request(request_id)
        return Response(result.model_dump(exclude_none=True))


class CancelRequestView(AuthenticatedView):
    def post(self, _request, request_id: UUID):
        result = request_lifecycle_service.cancel_request(request_id)
        return Response(result.model_dump(exclude_none=True))


class CompleteRequestView(AuthenticatedView):
    def post(self, _request, request_id: UUID):
        result = request_lifecycle_service.complete_request(request_id)
        return Response(result.model_dump(exclude_none=True))


class DeclineRequestView(AuthenticatedView):
    def post(self, _request, request_id: UUID):
        result = request_lifecycle_service.decline_request(request_id)
        return Response(result.model_dump(exclude_none=True))


# In-app notifications


class NotificationListView(AuthenticatedView):
    def get(self, _request):
        return Response(notification_service.list_notifications().model_dump())


class UnreadNotificationCountView(AuthenticatedView):
    def get(self, _request):
        return Response(notification_service.get_unread_count().model_dump())


class MarkNotificationReadView(AuthenticatedView):
    def post(self, _request, notification_id: UUID):
        notification = notification_service.mark_as_read(notification_id)
        return Response(notification.model_dump())


class MarkAllNotificationsReadView(AuthenticatedView):
    def post(self, _request):
        return Response(notification_service.mark_all_as_read().model_dump())


# Admin


class GeospatialSyncView(AdminView):
    """Queue a full rebuild of the geospatial index."""

    def post(self, request):
        logger.info(
            "Geospatial index sync requested",
            user_id=request.user.user_id,
        )
        queued = enqueue_now(SYNC_GEOSPATIAL_INDEX_JOB)
        return _queued_response(queued)


class SeedCentersView(AdminView):
    """Load the fixed donation center list and index it."""

    def post(self, request):
        logger.info("Center seeding requested", user_id=request.user.user_id)
        result = center_service.seed_centers()
        return Response(
            result.model_dump(),
            status=status.HTTP_201_CREATED if result.seeded else status.HTTP_200_OK,
        )


class TriggerEligibilityRemindersView(AdminView):
    """Run the daily eligibility reminder job now."""

    def post(self, request):
        logger.info(
            "Eligibility reminders triggered manually",
            user_id=request.user.user_id,
        )
        queued = enqueue_now(ELIGIBILITY_REMINDERS_JOB)
        return _queued_response(queued)


def _queued_response(queued: bool) -> Response:
    if not queued:
        return Response(
            {
                "error": "service_unavailable",
                "message": "Job queue is unavailable",
            },
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return Response({"queued": True}, status=status.HTTP_202_ACCEPTED)
