from django.core.management.base import BaseCommand
from django.db.models import Q

from cases.models import CaseStatus, ClientCase


class Command(BaseCommand):
    help = "Set status to Active on cases created before the status field existed"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Count affected cases without updating them",
        )

    def handle(self, *args, **options):
        pending = ClientCase.objects.filter(Q(status__isnull=True) | Q(status=""))
        count = pending.count()

        if options["dry_run"]:
            self.stdout.write(self.style.WARNING(f"DRY RUN: {count} cases would be set to Active."))
            return

        # Bulk update leaves updated_at alone; the case itself did not change.
        updated = pending.update(status=CaseStatus.ACTIVE)
        self.stdout.write(self.style.SUCCESS(f"Updated {updated} cases to Active status."))
