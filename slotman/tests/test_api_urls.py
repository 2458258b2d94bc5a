"""
URL configuration for Slotman API tests.

Used as ROOT_URLCONF in test settings via @pytest.mark.urls.
"""

from django.urls import include, path

urlpatterns = [
    path("api/slotman/", include("slotman.api.urls")),
]
