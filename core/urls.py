"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    AcceptRequestView,
    BloodRequestCreateView,
    BloodRequestDetailView,
    CancelRequestView,
    CenterListView,
    CompleteRequestView,
    CurrentUserView,
    DeclineRequestView,
    DonationDetailView,
    DonationListView,
    DonationStatsView,
    DonorSearchView,
    EligibilityView,
    EmergencyBroadcastView,
    GeospatialSyncView,
    HomeFeedView,
    LastDonationView,
    LivenessCheckView,
    MarkAllNotificationsReadView,
    MarkNotificationReadView,
    MyRequestsView,
    NearbyCentersView,
    NearbyDonorsView,
    NotificationListView,
    OpenRequestsView,
    ReadinessCheckView,
    RequestsForDonorView,
    SeedCentersView,
    TriggerEligibilityRemindersView,
    UnreadNotificationCountView,
    UserAvailabilityToggleView,
    UserAvailabilityView,
    UserBloodTypeView,
    UserLocationView,
    UserModeView,
    UserNotificationPreferencesView,
    UserPhoneView,
    UserProfileUpdateView,
    UserPushTokenView,
    UserSkipLocationView,
    UserStatsView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Current user
    path("users/me", CurrentUserView.as_view(), name="user-me"),
    path("users/me/phone", UserPhoneView.as_view(), name="user-phone"),
    path("users/me/blood-type", UserBloodTypeView.as_view(), name="user-blood-type"),
    path("users/me/mode", UserModeView.as_view(), name="user-mode"),
    path("users/me/location", UserLocationView.as_view(), name="user-location"),
    path(
        "users/me/location/skip",
        UserSkipLocationView.as_view(),
        name="user-location-skip",
    ),
    path("users/me/profile", UserProfileUpdateView.as_view(), name="user-profile"),
    path(
        "users/me/availability",
        UserAvailabilityView.as_view(),
        name="user-availability",
    ),
    path(
        "users/me/availability/toggle",
        UserAvailabilityToggleView.as_view(),
        name="user-availability-toggle",
    ),
    path("users/me/push-token", UserPushTokenView.as_view(), name="user-push-token"),
    path(
        "users/me/notification-preferences",
        UserNotificationPreferencesView.as_view(),
        name="user-notification-preferences",
    ),
    path("users/me/stats", UserStatsView.as_view(), name="user-stats"),
    # Donor discovery
    path("donors/search", DonorSearchView.as_view(), name="donor-search"),
    path("donors/nearby", NearbyDonorsView.as_view(), name="donor-nearby"),
    # Donation centers
    path("centers", CenterListView.as_view(), name="center-list"),
    path("centers/nearby", NearbyCentersView.as_view(), name="center-nearby"),
    # Donations
    path("donations", DonationListView.as_view(), name="donation-list"),
    path("donations/last", LastDonationView.as_view(), name="donation-last"),
    path("donations/stats", DonationStatsView.as_view(), name="donation-stats"),
    path(
        "donations/eligibility",
        EligibilityView.as_view(),
        name="donation-eligibility",
    ),
    path(
        "donations/<uuid:donation_id>",
        DonationDetailView.as_view(),
        name="donation-detail",
    ),
    # Blood requests
    path("requests", BloodRequestCreateView.as_view(), name="request-create"),
    path(
        "requests/emergency",
        EmergencyBroadcastView.as_view(),
        name="request-emergency",
    ),
    path("requests/open", OpenRequestsView.as_view(), name="request-open"),
    path("requests/for-me", RequestsForDonorView.as_view(), name="request-for-me"),
    path("requests/mine", MyRequestsView.as_view(), name="request-mine"),
    path("requests/feed", HomeFeedView.as_view(), name="request-feed"),
    path(
        "requests/<uuid:request_id>",
        BloodRequestDetailView.as_view(),
        name="request-detail",
    ),
    path(
        "requests/<uuid:request_id>/accept",
        AcceptRequestView.as_view(),
        name="request-accept",
    ),
    path(
        "requests/<uuid:request_id>/cancel",
        CancelRequestView.as_view(),
        name="request-cancel",
    ),
    path(
        "requests/<uuid:request_id>/complete",
        CompleteRequestView.as_view(),
        name="request-complete",
    ),
    path(
        "requests/<uuid:request_id>/decline",
        DeclineRequestView.as_view(),
        name="request-decline",
    ),
    # In-app notifications
    path("notifications", NotificationListView.as_view(), name="notification-list"),
    path(
        "notifications/unread-count",
        UnreadNotificationCountView.as_view(),
        name="notification-unread-count",
    ),
    path(
        "notifications/read-all",
        MarkAllNotificationsReadView.as_view(),
        name="notification-read-all",
    ),
    path(
        "notifications/<uuid:notification_id>/read",
        MarkNotificationReadView.as_view(),
        name="notification-read",
    ),
    # Admin
    path("admin/geo/sync", GeospatialSyncView.as_view(), name="admin-geo-sync"),
    path("admin/centers/seed", SeedCentersView.as_view(), name="admin-centers-seed"),
    path(
        "admin/jobs/eligibility-reminders",
        TriggerEligibilityRemindersView.as_view(),
        name="admin-eligibility-reminders",
    ),
]
