"""
Slotman API Serializers.

Wire format is camelCase with YYYY-MM-DD dates.
"""

from rest_framework import serializers

from slotman.conf import get_max_range_days
from slotman.dates import parse_schedule_date
from slotman.exceptions import SlotError
from slotman.models import Placement, Publication


class ScheduleDateField(serializers.Field):
    """Strict YYYY-MM-DD date."""

    default_error_messages = {
        "invalid": "Dates must be in YYYY-MM-DD format",
    }

    def to_internal_value(self, data):
        try:
            return parse_schedule_date(data)
        except SlotError:
            self.fail("invalid")

    def to_representation(self, value):
        return value.isoformat()


class PlacementSerializer(serializers.ModelSerializer):
    """Serializer for Placement model."""

    campaign = serializers.UUIDField(source="campaign.uuid", read_only=True)
    campaign_name = serializers.CharField(source="campaign.name", read_only=True)

    class Meta:
        model = Placement
        fields = [
            "uuid",
            "campaign",
            "campaign_name",
            "name",
            "type",
            "publication",
            "scheduled_date",
            "status",
            "conflict_preference",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "uuid",
            "name",
            "type",
            "publication",
            "scheduled_date",
            "status",
            "conflict_preference",
            "notes",
            "created_at",
            "updated_at",
        ]


class CapacityQuerySerializer(serializers.Serializer):
    """Query params for the capacity endpoint."""

    startDate = ScheduleDateField()
    endDate = ScheduleDateField()
    publication = serializers.ListField(
        child=serializers.ChoiceField(choices=Publication.choices),
        required=False,
        help_text="Restrict to these publications (repeatable)",
    )

    def validate(self, attrs):
        start, end = attrs["startDate"], attrs["endDate"]

        if start > end:
            raise serializers.ValidationError(
                "startDate must be before or equal to endDate"
            )

        max_days = get_max_range_days()
        if (end - start).days > max_days:
            raise serializers.ValidationError(
                f"Date range cannot exceed {max_days} days"
            )

        return attrs


class ScheduleSerializer(serializers.Serializer):
    """Single placement scheduling. scheduledDate=null un-schedules."""

    campaignId = serializers.UUIDField()
    placementId = serializers.UUIDField()
    scheduledDate = ScheduleDateField(required=False, allow_null=True, default=None)


class RescheduleSerializer(serializers.Serializer):
    """Admin move of an already scheduled placement."""

    scheduledDate = ScheduleDateField()


class BulkAssignmentSerializer(serializers.Serializer):
    """One row of the admin scheduling grid."""

    campaignId = serializers.UUIDField()
    placementId = serializers.UUIDField()
    scheduledDate = ScheduleDateField()


class BulkScheduleSerializer(serializers.Serializer):
    """Bulk scheduling request."""

    assignments = BulkAssignmentSerializer(many=True, allow_empty=False)

    def to_assignments(self) -> list[dict]:
        """Validated rows in the shape slots.bulk_schedule() expects."""
        return [
            {
                "campaign_id": row["campaignId"],
                "placement_id": row["placementId"],
                "scheduled_date": row["scheduledDate"],
            }
            for row in self.validated_data["assignments"]
        ]
