from django.core.management.base import BaseCommand
from django.db import transaction

from cases.models import ClientCase
from notes.models import CaseNote


class Command(BaseCommand):
    help = "Copy legacy ClientCase.notes text into CaseNote rows, keeping the case creation date"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report what would be migrated without writing anything",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]
        cases = ClientCase.objects.exclude(notes__isnull=True).exclude(notes="").order_by("id")

        migrated = 0
        skipped = 0
        with transaction.atomic():
            for client_case in cases.iterator():
                content = client_case.notes.strip()
                if not content:
                    continue
                if CaseNote.objects.filter(client_case=client_case, content=content).exists():
                    skipped += 1
                    self.stdout.write(f"Note already exists for case {client_case.pk}: {client_case.client_name}")
                    continue
                if not dry_run:
                    CaseNote.objects.create(
                        client_case=client_case,
                        content=content,
                        created_at=client_case.created_at,
                    )
                migrated += 1
                self.stdout.write(f"Migrated note for case {client_case.pk}: {client_case.client_name}")

        if dry_run:
            self.stdout.write(self.style.WARNING(f"DRY RUN: {migrated} notes would be migrated, {skipped} already present."))
        else:
            self.stdout.write(self.style.SUCCESS(f"Migration completed: {migrated} notes migrated, {skipped} already present."))
