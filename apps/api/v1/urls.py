# apps/api/v1/urls.py
from django.urls import path, include

from apps.api.common.views import health_check

urlpatterns = [
    # =========================
    # Health
    # =========================
    path("health/", health_check, name="health"),

    # =========================
    # Domain APIs
    # =========================
    path("picks/", include("apps.domains.picks.urls")),
]
