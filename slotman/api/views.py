"""
Slotman API Views.
"""

import uuid as uuid_module

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from slotman.exceptions import SlotError
from slotman.models import Placement
from slotman.service import Slots

from .serializers import (
    BulkScheduleSerializer,
    CapacityQuerySerializer,
    PlacementSerializer,
    RescheduleSerializer,
    ScheduleSerializer,
)

ERROR_STATUS = {
    "INVALID_DATE_FORMAT": status.HTTP_400_BAD_REQUEST,
    "INVALID_DATE_RANGE": status.HTTP_400_BAD_REQUEST,
    "INVALID_WEEKDAY": status.HTTP_400_BAD_REQUEST,
    "UNKNOWN_PLACEMENT_TYPE": status.HTTP_400_BAD_REQUEST,
    "PLACEMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ALREADY_SCHEDULED": status.HTTP_409_CONFLICT,
    "CONCURRENTLY_SCHEDULED": status.HTTP_409_CONFLICT,
    "CAPACITY_EXCEEDED": status.HTTP_409_CONFLICT,
    "PERSISTENCE_FAILURE": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(exc: SlotError) -> Response:
    """Render a SlotError as {error, code, ...details}."""
    return Response(
        {"error": exc.message, **exc.as_dict()},
        status=ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST),
    )


def first_error(errors) -> str:
    """Flatten DRF validation errors to one message, like the portal expects."""
    if isinstance(errors, dict):
        for value in errors.values():
            return first_error(value)
    if isinstance(errors, list) and errors:
        return first_error(errors[0])
    return str(errors)


class CapacityView(APIView):
    """
    Date-range availability.

    GET /api/slotman/capacity/?startDate=2026-03-02&endDate=2026-03-06
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = CapacityQuerySerializer(data=request.query_params)

        if not serializer.is_valid():
            return Response(
                {"error": first_error(serializer.errors), "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        data = serializer.validated_data
        try:
            capacity = Slots.get_capacity(
                data["startDate"],
                data["endDate"],
                publications=data.get("publication") or None,
            )
        except SlotError as e:
            return error_response(e)

        return Response(capacity.as_dict())


class ScheduleView(APIView):
    """
    Schedule (or un-schedule) one placement.

    POST /api/slotman/schedule/
    {
        "campaignId": "...",
        "placementId": "...",
        "scheduledDate": "2026-03-02"   // null to un-schedule
    }
    """

    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ScheduleSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(
                {"error": first_error(serializer.errors), "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        data = serializer.validated_data
        try:
            result = Slots.assign(
                data["placementId"],
                data["scheduledDate"],
                campaign_id=data["campaignId"],
            )
        except SlotError as e:
            return error_response(e)

        return Response(result.as_dict())


class BulkScheduleView(APIView):
    """
    Schedule many placements, best effort.

    POST /api/slotman/bulk-schedule/
    {
        "assignments": [
            {"campaignId": "...", "placementId": "...", "scheduledDate": "2026-03-02"},
            ...
        ]
    }
    """

    permission_classes = [IsAdminUser]

    def post(self, request):
        serializer = BulkScheduleSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(
                {"error": first_error(serializer.errors), "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = Slots.bulk_schedule(serializer.to_assignments())
        return Response(result.as_dict())


class PlacementViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for Placement (read-only).

    list: List placements (?campaign=<uuid>, ?unscheduled=1)
    retrieve: Get a specific placement by UUID
    reschedule: Move a placement to another date (admin)
    """

    permission_classes = [IsAuthenticated]
    queryset = Placement.objects.select_related("campaign")
    serializer_class = PlacementSerializer
    lookup_field = "uuid"

    def get_queryset(self):
        qs = super().get_queryset()

        campaign = self.request.query_params.get("campaign")
        if campaign:
            try:
                qs = qs.filter(campaign__uuid=uuid_module.UUID(campaign))
            except ValueError:
                return qs.none()

        if self.request.query_params.get("unscheduled") in ("1", "true"):
            qs = qs.filter(scheduled_date__isnull=True)

        return qs

    @action(detail=True, methods=["post"], permission_classes=[IsAdminUser])
    def reschedule(self, request, uuid=None):
        """
        Move a placement to another date.

        POST /api/slotman/placements/{uuid}/reschedule/
        {
            "scheduledDate": "2026-03-04"
        }
        """
        placement = self.get_object()
        serializer = RescheduleSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = Slots.reschedule(
                placement.uuid, serializer.validated_data["scheduledDate"]
            )
        except SlotError as e:
            return error_response(e)

        return Response(result.as_dict())
