# Initial schema for the blood matching service

import uuid

import django.db.models.deletion
from django.db import migrations, models

BLOOD_TYPE_CHOICES = [
    ("A+", "A+"),
    ("A-", "A-"),
    ("B+", "B+"),
    ("B-", "B-"),
    ("AB+", "AB+"),
    ("AB-", "AB-"),
    ("O+", "O+"),
    ("O-", "O-"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "user_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "external_id",
                    models.CharField(
                        help_text="Subject identifier issued by the identity provider",
                        max_length=255,
                        unique=True,
                    ),
                ),
                ("email", models.EmailField(blank=True, max_length=255, null=True)),
                ("full_name", models.CharField(blank=True, max_length=255, null=True)),
                ("phone", models.CharField(blank=True, max_length=32, null=True)),
                (
                    "blood_type",
                    models.CharField(
                        blank=True,
                        choices=BLOOD_TYPE_CHOICES,
                        max_length=3,
                        null=True,
                    ),
                ),
                (
                    "mode",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("donor", "donor"),
                            ("seeker", "seeker"),
                            ("both", "both"),
                        ],
                        max_length=10,
                        null=True,
                    ),
                ),
                ("city", models.CharField(blank=True, max_length=120, null=True)),
                ("region", models.CharField(blank=True, max_length=120, null=True)),
                ("latitude", models.FloatField(blank=True, null=True)),
                ("longitude", models.FloatField(blank=True, null=True)),
                ("location_granted", models.BooleanField(blank=True, null=True)),
                (
                    "preferred_donation_center",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                ("is_available", models.BooleanField(blank=True, null=True)),
                ("push_token", models.CharField(blank=True, max_length=255, null=True)),
                ("notify_request_match", models.BooleanField(blank=True, null=True)),
                ("notify_request_accepted", models.BooleanField(blank=True, null=True)),
                ("notify_eligibility", models.BooleanField(blank=True, null=True)),
                (
                    "last_eligibility_reminder_at",
                    models.DateTimeField(blank=True, null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["mode", "blood_type"],
                        name="users_mode_blood_idx",
                    ),
                    models.Index(fields=["city"], name="users_city_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="DonationCenter",
            fields=[
                (
                    "center_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("address", models.CharField(max_length=255)),
                ("city", models.CharField(db_index=True, max_length=120)),
                ("phone", models.CharField(blank=True, max_length=32, null=True)),
                ("latitude", models.FloatField()),
                ("longitude", models.FloatField()),
                ("hours", models.CharField(blank=True, max_length=255, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "donation_centers",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="GeoEntry",
            fields=[
                (
                    "key",
                    models.CharField(max_length=64, primary_key=True, serialize=False),
                ),
                (
                    "entity_type",
                    models.CharField(
                        choices=[("user", "user"), ("center", "center")],
                        max_length=10,
                    ),
                ),
                ("latitude", models.FloatField()),
                ("longitude", models.FloatField()),
                ("blood_type", models.CharField(blank=True, default="", max_length=8)),
                ("is_available", models.BooleanField(default=True)),
                ("city", models.CharField(blank=True, default="", max_length=120)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "geo_entries",
                "indexes": [
                    models.Index(
                        fields=["entity_type", "is_available"],
                        name="geo_type_available_idx",
                    ),
                    models.Index(
                        fields=["latitude", "longitude"],
                        name="geo_lat_lon_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="BloodRequest",
            fields=[
                (
                    "request_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "blood_type",
                    models.CharField(choices=BLOOD_TYPE_CHOICES, max_length=3),
                ),
                ("units", models.PositiveSmallIntegerField(default=1)),
                (
                    "urgency",
                    models.CharField(
                        choices=[
                            ("critical", "critical"),
                            ("urgent", "urgent"),
                            ("normal", "normal"),
                            ("standard", "standard"),
                        ],
                        max_length=10,
                    ),
                ),
                ("hospital", models.CharField(blank=True, max_length=255, null=True)),
                ("city", models.CharField(blank=True, max_length=120, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("open", "open"),
                            ("accepted", "accepted"),
                            ("cancelled", "cancelled"),
                            ("completed", "completed"),
                        ],
                        default="open",
                        max_length=10,
                    ),
                ),
                ("accepted_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "seeker",
                    models.ForeignKey(
                        db_column="seeker_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="blood_requests",
                        to="core.user",
                    ),
                ),
                (
                    "accepted_donor",
                    models.ForeignKey(
                        blank=True,
                        db_column="accepted_donor_id",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="accepted_requests",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "blood_requests",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["status", "blood_type"],
                        name="requests_status_blood_idx",
                    ),
                    models.Index(
                        fields=["seeker", "-created_at"],
                        name="requests_seeker_created_idx",
                    ),
                    models.Index(
                        fields=["accepted_donor", "status"],
                        name="requests_donor_status_idx",
                    ),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(units__gte=1, units__lte=10),
                        name="blood_request_units_range",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Donation",
            fields=[
                (
                    "donation_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "donation_date",
                    models.DateTimeField(help_text="When the donation took place"),
                ),
                (
                    "donation_center",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        db_column="user_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="donations",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "donations",
                "ordering": ["-donation_date"],
                "indexes": [
                    models.Index(
                        fields=["user", "-donation_date"],
                        name="donations_user_date_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                (
                    "notification_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "notification_type",
                    models.CharField(
                        choices=[
                            ("request_match", "request_match"),
                            ("request_accepted", "request_accepted"),
                            ("eligibility_reminder", "eligibility_reminder"),
                        ],
                        max_length=30,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("body", models.TextField()),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "blood_request",
                    models.ForeignKey(
                        blank=True,
                        db_column="request_id",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="notifications",
                        to="core.bloodrequest",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        db_column="user_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notifications",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "notifications",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["user", "-created_at"],
                        name="notif_user_created_idx",
                    ),
                    models.Index(
                        fields=["user", "is_read"],
                        name="notif_user_read_idx",
                    ),
                ],
            },
        ),
    ]
