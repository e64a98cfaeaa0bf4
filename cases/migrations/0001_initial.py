from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ClientCase",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("client_name", models.CharField(max_length=255)),
                (
                    "case_type",
                    models.CharField(
                        choices=[
                            ("Green Card", "Green Card"),
                            ("TN Visa", "TN Visa"),
                            ("Investor Visa", "Investor Visa"),
                            ("Work Visa", "Work Visa"),
                            ("National Interest Visa", "National Interest Visa"),
                            ("Citizenship", "Citizenship"),
                            ("FOIA", "FOIA"),
                            ("Consular-Embassy Process", "Consular-Embassy Process"),
                            ("DACA", "DACA"),
                            ("Fiance(e) Visa", "Fiance(e) Visa"),
                            ("Tourist Visa", "Tourist Visa"),
                        ],
                        max_length=100,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("Active", "Active"), ("Completed", "Completed"), ("Other", "Other")],
                        db_index=True,
                        default="Active",
                        max_length=50,
                    ),
                ),
                ("paralegal", models.CharField(blank=True, max_length=100, null=True)),
                ("total_contract", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "client_cases",
                "ordering": ["-created_at", "-id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("total_contract__isnull", True), ("total_contract__gt", 0), _connector="OR"),
                        name="client_case_total_contract_positive",
                    ),
                ],
            },
        ),
    ]
