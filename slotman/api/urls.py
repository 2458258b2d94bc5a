"""
Slotman API URLs.

Include this in your project's urlpatterns:

    path('api/slotman/', include('slotman.api.urls')),
"""

from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import BulkScheduleView, CapacityView, PlacementViewSet, ScheduleView

router = DefaultRouter()
router.register("placements", PlacementViewSet)

urlpatterns = [
    path("capacity/", CapacityView.as_view(), name="slotman-capacity"),
    path("schedule/", ScheduleView.as_view(), name="slotman-schedule"),
    path("bulk-schedule/", BulkScheduleView.as_view(), name="slotman-bulk-schedule"),
] + router.urls
