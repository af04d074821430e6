"""Factory classes for test data generation."""

from datetime import timedelta

from django.utils import timezone

import factory
from factory.django import DjangoModelFactory
from faker import Faker

from core.enums import RequestStatus, Urgency, UserMode

fake = Faker()


class UserFactory(DjangoModelFactory):
    """A registered user with no blood type, mode or location yet."""

    class Meta:
        model = "core.User"

    external_id = factory.Sequence(lambda n: f"auth|user-{n}")
    email = factory.LazyAttribute(lambda _: fake.email())
    full_name = factory.LazyAttribute(lambda _: fake.name())
    phone = factory.LazyAttribute(lambda _: fake.numerify("+99450#######"))


class DonorFactory(UserFactory):
    """An available donor with a push token."""

    mode = UserMode.DONOR.value
    blood_type = "O-"
    city = "Baku"
    push_token = factory.Sequence(lambda n: f"ExponentPushToken[donor-{n}]")


class SeekerFactory(UserFactory):
    mode = UserMode.SEEKER.value
    blood_type = "A+"
    city = "Baku"
    push_token = factory.Sequence(lambda n: f"ExponentPushToken[seeker-{n}]")


class BloodRequestFactory(DjangoModelFactory):
    class Meta:
        model = "core.BloodRequest"

    seeker = factory.SubFactory(SeekerFactory)
    blood_type = "O-"
    units = 1
    urgency = Urgency.NORMAL.value
    hospital = factory.LazyAttribute(lambda _: f"{fake.last_name()} Hospital")
    city = "Baku"
    status = RequestStatus.OPEN.value


class DonationFactory(DjangoModelFactory):
    class Meta:
        model = "core.Donation"

    user = factory.SubFactory(DonorFactory)
    donation_date = factory.LazyFunction(lambda: timezone.now() - timedelta(days=10))
    donation_center = "Central Blood Bank of Azerbaijan"


class NotificationFactory(DjangoModelFactory):
    class Meta:
        model = "core.Notification"

    user = factory.SubFactory(DonorFactory)
    notification_type = "request_match"
    title = "New Blood Request"
    body = "O- blood needed in Baku"
    is_read = False


class DonationCenterFactory(DjangoModelFactory):
    class Meta:
        model = "core.DonationCenter"

    name = factory.Sequence(lambda n: f"Blood Center {n}")
    address = factory.LazyAttribute(lambda _: fake.street_address())
    city = "Baku"
    latitude = 40.4093
    longitude = 49.8671
