"""Root URL configuration for the blood matching service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/", include("core.urls")),
    path("django-rq/", include("django_rq.urls")),
]
