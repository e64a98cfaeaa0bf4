from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("cases", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CaseNote",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "client_case",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="case_notes",
                        to="cases.clientcase",
                    ),
                ),
            ],
            options={
                "db_table": "case_notes",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["client_case", "-created_at"], name="case_note_latest_idx"),
                ],
            },
        ),
    ]
