import csv
import os

from django.core.management.base import BaseCommand, CommandError

from cases.serializers import ClientCaseSerializer

CSV_COLUMNS = ["clientName", "caseType", "status", "notes", "totalContract", "paralegal"]

SAMPLE_ROWS = [
    ["Juan Perez Gonzalez", "Green Card", "Active", "Initial consultation completed", "3500.00", ""],
    ["Laura Martinez Silva", "Work Visa", "Active", "Waiting on employer letter", "5000.00", ""],
    ["Miguel Torres Ruiz", "Citizenship", "Completed", "Oath ceremony attended", "2800.00", ""],
    ["Carmen Lopez Diaz", "FOIA", "Other", "Request filed with USCIS", "", ""],
    ["Fernando Garcia Vega", "DACA", "Active", "Renewal packet in review", "4200.50", ""],
]


class Command(BaseCommand):
    help = "Load client cases from a CSV file (clientName,caseType,status,notes,totalContract[,paralegal])"

    def add_arguments(self, parser):
        parser.add_argument("file_path", nargs="?", help="CSV file to load")
        parser.add_argument(
            "--create-sample",
            action="store_true",
            help="Write an example CSV to file_path (default: sample-cases.csv) instead of loading",
        )

    def handle(self, *args, **options):
        file_path = options["file_path"]
        if options["create_sample"]:
            self._write_sample(file_path or "sample-cases.csv")
            return

        if not file_path:
            raise CommandError("Provide a CSV file path or use --create-sample.")
        if not os.path.exists(file_path):
            raise CommandError(f"File not found: {file_path}")

        created = 0
        failed = 0
        with open(file_path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            missing = {"clientName", "caseType"} - set(reader.fieldnames or [])
            if missing:
                raise CommandError(f"Missing required columns: {', '.join(sorted(missing))}")

            for line_number, row in enumerate(reader, start=2):
                data = {column: (row.get(column) or "").strip() for column in CSV_COLUMNS}
                serializer = ClientCaseSerializer(data=data)
                if not serializer.is_valid():
                    failed += 1
                    self.stdout.write(self.style.ERROR(f"Row {line_number} skipped: {dict(serializer.errors)}"))
                    continue
                client_case = serializer.save()
                created += 1
                self.stdout.write(f"Created case {client_case.pk}: {client_case.client_name}")

        self.stdout.write(self.style.SUCCESS(f"Loaded {created} cases, {failed} rows skipped."))

    def _write_sample(self, file_path):
        with open(file_path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(CSV_COLUMNS)
            writer.writerows(SAMPLE_ROWS)
        self.stdout.write(self.style.SUCCESS(f"Sample CSV written to {file_path}"))
