"""Contact disclosure rules for request participants.

A phone number leaves the service only when the request is accepted and the
viewer is the counterpart: the accepted donor sees the seeker's phone and the
seeker sees the accepted donor's phone. Every other view omits it.
"""

from core.enums import RequestStatus
from core.models import BloodRequest, User
from core.schemas.request import CityOnlyParty, PartyInfo


class PrivacyGate:
    """Builds party views of a request for a given viewer."""

    @staticmethod
    def _is_same_user(left: User | None, right_id) -> bool:
        return left is not None and right_id is not None and left.pk == right_id

    def contact_visible(
        self, request: BloodRequest, viewer: User | None, subject: User
    ) -> bool:
        """Whether viewer may see subject's contact fields on this request."""
        if request.status != RequestStatus.ACCEPTED.value or viewer is None:
            return False
        if subject.pk == request.seeker_id:
            return self._is_same_user(viewer, request.accepted_donor_id)
        if subject.pk == request.accepted_donor_id:
            return self._is_same_user(viewer, request.seeker_id)
        return False

    def _party(
        self, request: BloodRequest, viewer: User | None, subject: User
    ) -> PartyInfo:
        return PartyInfo(
            user_id=subject.user_id,
            blood_type=subject.blood_type,
            city=subject.city,
            phone=(
                subject.phone
                if self.contact_visible(request, viewer, subject)
                else None
            ),
        )

    def seeker_view(
        self, request: BloodRequest, viewer: User | None
    ) -> PartyInfo | None:
        """The request's seeker as the viewer may see them."""
        seeker = request.seeker
        if seeker is None:
            return None
        return self._party(request, viewer, seeker)

    def donor_view(
        self, request: BloodRequest, viewer: User | None
    ) -> PartyInfo | None:
        """The accepted donor as the viewer may see them, if there is one."""
        donor = request.accepted_donor
        if donor is None:
            return None
        return self._party(request, viewer, donor)

    def city_only_view(self, user: User | None) -> CityOnlyParty | None:
        """Id and city only, for feeds and listings."""
        if user is None:
            return None
        return CityOnlyParty(user_id=user.user_id, city=user.city)


privacy_gate = PrivacyGate()
