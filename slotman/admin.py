"""
Slotman Admin: Django admin for Campaign and Placement.

Placement dates edited here go through the same weekday and live quota
checks as the scheduling API.
"""

from django import forms
from django.contrib import admin, messages
from simple_history.admin import SimpleHistoryAdmin

from slotman.conf import get_capacity_policy
from slotman.dates import ensure_schedulable
from slotman.exceptions import SlotError
from slotman.models import Campaign, Placement
from slotman.service import Slots


class PlacementAdminForm(forms.ModelForm):
    """Validates scheduled_date like slots.reschedule() does."""

    class Meta:
        model = Placement
        fields = "__all__"

    def clean(self):
        cleaned = super().clean()
        target = cleaned.get("scheduled_date")
        if not target:
            return cleaned

        # Type/publication as submitted, so a retyped placement is checked in its new slot
        candidate = Placement(
            pk=self.instance.pk,
            uuid=self.instance.uuid,
            type=cleaned.get("type") or self.instance.type,
            publication=cleaned.get("publication") or self.instance.publication,
        )
        unchanged = (
            target == self.instance.scheduled_date
            and candidate.type == self.instance.type
            and candidate.publication == self.instance.publication
        )
        if unchanged:
            return cleaned

        try:
            ensure_schedulable(target)
            Slots.ensure_slot_available(candidate, target, get_capacity_policy())
        except SlotError as e:
            raise forms.ValidationError({"scheduled_date": e.message})

        return cleaned


# ── Campaign ──


class PlacementInline(admin.TabularInline):
    """Inline for campaign placements."""

    model = Placement
    form = PlacementAdminForm
    extra = 0
    fields = ("name", "type", "publication", "scheduled_date", "status")


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    """Admin for client campaigns."""

    list_display = ("name", "client_name", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("name", "client_name")
    inlines = [PlacementInline]
    readonly_fields = ("uuid", "created_at", "updated_at")


# ── Placement ──


@admin.register(Placement)
class PlacementAdmin(SimpleHistoryAdmin):
    """Admin for ad placements."""

    form = PlacementAdminForm
    list_display = ("__str__", "campaign", "type", "publication", "scheduled_date", "status")
    list_filter = ("publication", "type", "status", "scheduled_date")
    search_fields = ("name", "campaign__name", "campaign__client_name")
    date_hierarchy = "scheduled_date"
    raw_id_fields = ("campaign",)
    readonly_fields = ("uuid", "created_at", "updated_at")
    actions = ["unschedule_selected"]

    @admin.action(description="Clear scheduled date")
    def unschedule_selected(self, request, queryset):
        cleared = 0
        for placement in queryset.filter(scheduled_date__isnull=False):
            Slots.unschedule(placement.uuid)
            cleared += 1
        self.message_user(request, f"{cleared} placement(s) unscheduled.", messages.SUCCESS)
