"""
Load demo data for Slotman.

Creates two clients' campaigns with placements, schedules part of them
through slots.bulk_schedule() starting next Monday, and leaves the rest
unscheduled for the onboarding flow.

Usage:
    python manage.py load_slotman_demo
    python manage.py load_slotman_demo --clear
"""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

DEMO_CAMPAIGNS = [
    {
        "client_name": "Felix Health",
        "name": "Felix Health 1646",
        "placements": [
            ("Primary", "The Peak", 0),
            ("Secondary", "Peak Money", 2),
            ("Primary", "The Peak", None),
            ("Secondary", "Peak Money", None),
        ],
    },
    {
        "client_name": "Felix Health",
        "name": "Felix Health 1702",
        "placements": [
            ("Primary", "The Peak", 1),
            ("Peak Picks", "The Peak", 1),
        ],
    },
    {
        "client_name": "Greenline Supplements",
        "name": "Greenline Supplements 2201",
        "placements": [
            ("Primary", "The Peak", 3),
            ("Secondary", "Peak Money", 4),
            ("Peak Picks", "The Peak", None),
            ("Beehiv", "The Peak", None),
        ],
    },
]


class Command(BaseCommand):
    help = "Load Slotman demo campaigns and placements"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing campaigns and placements first",
        )

    def handle(self, *args, **options):
        from slotman.models import Campaign, CampaignStatus, Placement
        from slotman.service import Slots

        self.stdout.write("=" * 60)
        self.stdout.write("Loading Slotman demo data...")
        self.stdout.write("=" * 60)

        if options["clear"]:
            self.stdout.write("\nClearing existing data...")
            Placement.objects.all().delete()
            Campaign.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("   ✓ Cleared"))

        today = timezone.localdate()
        next_monday = today + timedelta(days=7 - today.weekday())

        assignments = []
        created = 0

        for spec in DEMO_CAMPAIGNS:
            campaign = Campaign.objects.create(
                name=spec["name"],
                client_name=spec["client_name"],
                status=CampaignStatus.ACTIVE,
            )
            for placement_type, publication, offset in spec["placements"]:
                placement = Placement.objects.create(
                    campaign=campaign,
                    name=f"{campaign.name} - {placement_type}",
                    type=placement_type,
                    publication=publication,
                )
                created += 1
                if offset is not None:
                    assignments.append(
                        {
                            "campaign_id": campaign.uuid,
                            "placement_id": placement.uuid,
                            "scheduled_date": next_monday + timedelta(days=offset),
                        }
                    )

        self.stdout.write(f"\n   ✓ {created} placements in {len(DEMO_CAMPAIGNS)} campaigns")

        result = Slots.bulk_schedule(assignments)
        self.stdout.write(self.style.SUCCESS(f"   ✓ {result.scheduled} placements scheduled"))
        for error in result.errors:
            self.stdout.write(self.style.WARNING(f"   ! {error.placement_id}: {error.error}"))

        self.stdout.write("=" * 60)
