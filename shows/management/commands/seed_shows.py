from __future__ import annotations
import json
from pathlib import Path

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

DEMO_SHOWS = [
    {"name": "Neon Nights Live", "description": "An evening of synthwave and light shows.",
     "total_tickets": 150},
    {"name": "Midnight Movie Marathon", "description": "Three cult classics back to back.",
     "total_tickets": 80},
    {"name": "Campus Battle of the Bands", "description": "Six student bands, one trophy.",
     "total_tickets": 200},
]


class Command(BaseCommand):
    help = "Load shows from a JSON file (a list of objects) or a small demo set."

    def add_arguments(self, parser):
        parser.add_argument("--file", help="JSON file with a list of show objects.")
        parser.add_argument("--reset", action="store_true",
                            help="Delete shows that have no tickets before loading.")
        parser.add_argument("--dry-run", action="store_true", help="Report only; no writes.")

    def handle(self, *args, **opts):
        Show = apps.get_model("shows", "Show")
        rows = self._load(opts.get("file")) if opts.get("file") else DEMO_SHOWS

        if opts["dry_run"]:
            self.stdout.write(self.style.WARNING(f"[dry-run] Would load {len(rows)} shows"))
            return

        with transaction.atomic():
            if opts["reset"]:
                deleted, _ = Show.objects.filter(tickets__isnull=True).delete()
                self.stdout.write(f"Removed {deleted} unbooked shows")
            created = 0
            for row in rows:
                _, was_created = Show.objects.get_or_create(
                    name=row["name"],
                    defaults={
                        "description": row.get("description", ""),
                        "image_url": row.get("image_url", ""),
                        "total_tickets": row["total_tickets"],
                    },
                )
                created += int(was_created)

        self.stdout.write(self.style.SUCCESS(f"Loaded {created} new shows ({len(rows)} in source)"))

    def _load(self, path):
        p = Path(path)
        if not p.exists():
            raise CommandError(f"No such file: {path}")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON in {path}: {e}")
        if not isinstance(data, list) or not all(isinstance(r, dict) and r.get("name") for r in data):
            raise CommandError("Expected a list of objects, each with a 'name'.")
        for row in data:
            row["total_tickets"] = self._capacity(row)
        return data

    def _capacity(self, row):
        raw = row.get("total_tickets", 0)
        # bool is an int subclass; 1.5 would silently truncate
        if isinstance(raw, bool) or isinstance(raw, float) and not raw.is_integer():
            raise CommandError(f"Bad total_tickets for {row['name']!r}: {raw!r}")
        try:
            n = int(raw)
        except (TypeError, ValueError):
            raise CommandError(f"Bad total_tickets for {row['name']!r}: {raw!r}")
        if n < 0:
            raise CommandError(f"total_tickets for {row['name']!r} must not be negative")
        return n
