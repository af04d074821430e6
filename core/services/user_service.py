"""User profile service.

Maps the authenticated caller to a User record and applies profile updates.
Every write passes ``update_fields`` so the post_save signal can tell which
changes affect the geospatial index.
"""

from django.db import transaction

import structlog

from core.auth.context import require_current_user
from core.enums import RequestStatus, UserMode
from core.exceptions import InvalidBloodTypeError, UserNotFoundError
from core.models import BloodRequest, User
from core.schemas.user import (
    AvailabilityResponse,
    BootstrapUserRequest,
    NotificationPreferences,
    UpdateLocationRequest,
    UpdateNotificationPreferencesRequest,
    UpdateProfileRequest,
    UserProfile,
    UserStats,
)
from core.services.compatibility import is_valid_blood_type
from core.services.downstream.geocoding_client import geocoding_client

logger = structlog.get_logger(__name__)


class UserService:
    """Profile operations for the authenticated caller."""

    def require_current_profile(self, for_update: bool = False) -> User:
        """Resolve the caller's User record.

        Args:
            for_update: Lock the row until the surrounding transaction ends.

        Returns:
            The caller's User.

        Raises:
            AuthenticationFailed: If no caller is authenticated.
            UserNotFoundError: If the caller has no User record yet.
        """
        caller = require_current_user()
        queryset = User.objects.select_for_update() if for_update else User.objects
        user = queryset.filter(external_id=caller.user_id).first()
        if user is None:
            raise UserNotFoundError()
        return user

    def get_or_create_user(self, bootstrap: BootstrapUserRequest) -> tuple[User, bool]:
        """Return the caller's record, creating it on first contact.

        A blood type supplied at creation also sets mode to donor. Existing
        users are returned unchanged.

        Raises:
            InvalidBloodTypeError: If a new user supplies an unknown blood type.
        """
        caller = require_current_user()

        existing = User.objects.filter(external_id=caller.user_id).first()
        if existing is not None:
            return existing, False

        if bootstrap.blood_type and not is_valid_blood_type(bootstrap.blood_type):
            raise InvalidBloodTypeError()

        defaults = {
            "email": bootstrap.email or caller.email,
            "full_name": bootstrap.full_name or caller.full_name,
        }
        if bootstrap.blood_type:
            defaults["blood_type"] = bootstrap.blood_type
            defaults["mode"] = UserMode.DONOR.value

        # Concurrent first requests race on the unique external_id;
        # get_or_create hands the loser the winner's row.
        user, created = User.objects.get_or_create(
            external_id=caller.user_id, defaults=defaults
        )

        if created:
            logger.info(
                "user_created",
                user_id=str(user.user_id),
                blood_type=user.blood_type,
                mode=user.mode,
            )
        return user, created

    def get_profile(self) -> UserProfile:
        return self.to_profile(self.require_current_profile())

    def update_phone(self, phone: str) -> UserProfile:
        user = self.require_current_profile()
        user.phone = phone
        user.save(update_fields=["phone", "updated_at"])
        logger.info("user_phone_updated", user_id=str(user.user_id))
        return self.to_profile(user)

    def update_blood_type(self, blood_type: str) -> UserProfile:
        """Set the caller's blood type; users without a mode become donors.

        Raises:
            InvalidBloodTypeError: If blood_type is not canonical.
        """
        if not is_valid_blood_type(blood_type):
            raise InvalidBloodTypeError()

        user = self.require_current_profile()
        user.blood_type = blood_type
        fields = ["blood_type", "updated_at"]
        if not user.mode:
            user.mode = UserMode.DONOR.value
            fields.append("mode")
        user.save(update_fields=fields)

        logger.info(
            "user_blood_type_updated",
            user_id=str(user.user_id),
            blood_type=blood_type,
            mode=user.mode,
        )
        return self.to_profile(user)

    def update_mode(self, mode: UserMode | str) -> UserProfile:
        user = self.require_current_profile()
        user.mode = UserMode(mode).value
        user.save(update_fields=["mode", "updated_at"])
        logger.info("user_mode_updated", user_id=str(user.user_id), mode=user.mode)
        return self.to_profile(user)

    def update_location(self, location: UpdateLocationRequest) -> UserProfile:
        """Store coordinates and mark location as granted.

        City and region come from the body when given, otherwise from
        best-effort reverse geocoding. A geocoding failure never fails the
        update.
        """
        user = self.require_current_profile()

        city, region = location.city, location.region
        if city is None and region is None:
            place = geocoding_client.reverse(location.latitude, location.longitude)
            if place is not None:
                city, region = place.city, place.region

        user.latitude = location.latitude
        user.longitude = location.longitude
        user.city = city
        user.region = region
        user.location_granted = True
        user.save(
            update_fields=[
                "latitude",
                "longitude",
                "city",
                "region",
                "location_granted",
                "updated_at",
            ]
        )

        logger.info(
            "user_location_updated",
            user_id=str(user.user_id),
            city=city,
            region=region,
        )
        return self.to_profile(user)

    def skip_location(self) -> UserProfile:
        user = self.require_current_profile()
        user.location_granted = False
        user.save(update_fields=["location_granted", "updated_at"])
        return self.to_profile(user)

    def update_profile(self, update: UpdateProfileRequest) -> UserProfile:
        """Write only the fields present in the request body."""
        user = self.require_current_profile()
        fields = [
            name
            for name in ("city", "region", "preferred_donation_center")
            if name in update.model_fields_set
        ]
        if not fields:
            return self.to_profile(user)

        for name in fields:
            setattr(user, name, getattr(update, name))
        user.save(update_fields=[*fields, "updated_at"])

        logger.info("user_profile_updated", user_id=str(user.user_id), fields=fields)
        return self.to_profile(user)

    def get_availability(self) -> AvailabilityResponse:
        user = self.require_current_profile()
        return AvailabilityResponse(is_available=user.effective_availability)

    def toggle_availability(self) -> AvailabilityResponse:
        """Flip availability: unset or true becomes false, false becomes true."""
        with transaction.atomic():
            user = self.require_current_profile(for_update=True)
            user.is_available = user.is_available is False
            user.save(update_fields=["is_available", "updated_at"])

        logger.info(
            "user_availability_toggled",
            user_id=str(user.user_id),
            is_available=user.is_available,
        )
        return AvailabilityResponse(is_available=user.is_available)

    def update_push_token(self, push_token: str) -> UserProfile:
        user = self.require_current_profile()
        user.push_token = push_token
        user.save(update_fields=["push_token", "updated_at"])
        logger.info("user_push_token_updated", user_id=str(user.user_id))
        return self.to_profile(user)

    def get_notification_preferences(self) -> NotificationPreferences:
        return self._preferences(self.require_current_profile())

    def update_notification_preferences(
        self, update: UpdateNotificationPreferencesRequest
    ) -> NotificationPreferences:
        """Partial update; only explicitly provided booleans are stored."""
        user = self.require_current_profile()
        fields = [
            name
            for name in (
                "notify_request_match",
                "notify_request_accepted",
                "notify_eligibility",
            )
            if name in update.model_fields_set and getattr(update, name) is not None
        ]
        for name in fields:
            setattr(user, name, getattr(update, name))
        if fields:
            user.save(update_fields=[*fields, "updated_at"])
            logger.info(
                "user_notification_preferences_updated",
                user_id=str(user.user_id),
                fields=fields,
            )
        return self._preferences(user)

    def get_user_stats(self) -> UserStats:
        """Count requests the caller accepted as donor that are still live or done."""
        user = self.require_current_profile()
        helped = BloodRequest.objects.filter(
            accepted_donor=user,
            status__in=[RequestStatus.ACCEPTED.value, RequestStatus.COMPLETED.value],
        ).count()
        return UserStats(helped_count=helped)

    @staticmethod
    def _preferences(user: User) -> NotificationPreferences:
        return NotificationPreferences(
            notify_request_match=user.wants_request_match,
            notify_request_accepted=user.wants_request_accepted,
            notify_eligibility=user.wants_eligibility,
        )

    @staticmethod
    def to_profile(user: User) -> UserProfile:
        return UserProfile(
            user_id=user.user_id,
            external_id=user.external_id,
            email=user.email,
            full_name=user.full_name,
            phone=user.phone,
            blood_type=user.blood_type,
            mode=user.mode,
            city=user.city,
            region=user.region,
            latitude=user.latitude,
            longitude=user.longitude,
            location_granted=user.location_granted,
            preferred_donation_center=user.preferred_donation_center,
            is_available=user.effective_availability,
            has_push_token=bool(user.push_token),
            created_at=user.created_at,
        )


user_service = UserService()
