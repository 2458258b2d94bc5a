"""
Print the capacity grid for a date range.

Usage:
    python manage.py slotman_capacity 2026-03-02 2026-03-13
    python manage.py slotman_capacity 2026-03-02 2026-03-13 --publication "The Peak"
    python manage.py slotman_capacity 2026-03-02 2026-03-06 --json
"""

import json

from django.core.management.base import BaseCommand, CommandError


class Command(BaseCommand):
    help = "Show per-day slot usage for capped placement types"

    def add_arguments(self, parser):
        parser.add_argument("start_date", help="YYYY-MM-DD")
        parser.add_argument("end_date", help="YYYY-MM-DD")
        parser.add_argument(
            "--publication",
            action="append",
            dest="publications",
            help="Restrict to a publication (repeatable)",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Emit the API wire format instead of a table",
        )

    def handle(self, *args, **options):
        from slotman.exceptions import SlotError
        from slotman.service import Slots

        try:
            capacity = Slots.get_capacity(
                options["start_date"],
                options["end_date"],
                publications=options["publications"],
            )
        except SlotError as e:
            raise CommandError(e.message)

        if options["json"]:
            self.stdout.write(json.dumps(capacity.as_dict(), indent=2))
            return

        for day in capacity.days:
            self.stdout.write(day.date.strftime("%a %Y-%m-%d"))
            for slot in day.slots:
                line = (
                    f"   {slot.publication:<20} {slot.type:<12} "
                    f"{slot.used}/{slot.limit}"
                )
                if slot.is_full:
                    self.stdout.write(self.style.WARNING(f"{line}  FULL"))
                else:
                    self.stdout.write(line)
