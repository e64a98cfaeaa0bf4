from django.db import models
from django.db.models import OuterRef, Subquery
from django.utils import timezone


class CaseType(models.TextChoices):
    GREEN_CARD = "Green Card", "Green Card"
    TN_VISA = "TN Visa", "TN Visa"
    INVESTOR_VISA = "Investor Visa", "Investor Visa"
    WORK_VISA = "Work Visa", "Work Visa"
    NATIONAL_INTEREST_VISA = "National Interest Visa", "National Interest Visa"
    CITIZENSHIP = "Citizenship", "Citizenship"
    FOIA = "FOIA", "FOIA"
    CONSULAR_EMBASSY_PROCESS = "Consular-Embassy Process", "Consular-Embassy Process"
    DACA = "DACA", "DACA"
    FIANCE_VISA = "Fiance(e) Visa", "Fiance(e) Visa"
    TOURIST_VISA = "Tourist Visa", "Tourist Visa"


class CaseStatus(models.TextChoices):
    ACTIVE = "Active", "Active"
    COMPLETED = "Completed", "Completed"
    OTHER = "Other", "Other"


def normalize_status(value):
    """Rows created before the status column existed read as Active."""
    return value or CaseStatus.ACTIVE


class ClientCaseQuerySet(models.QuerySet):
    def with_latest_note(self):
        # One-row subquery per case keeps the read proportional to the number of cases.
        from notes.models import CaseNote

        latest = CaseNote.objects.filter(client_case=OuterRef("pk")).order_by("-created_at", "-id")
        return self.annotate(
            latest_note=Subquery(latest.values("content")[:1]),
            latest_note_date=Subquery(latest.values("created_at")[:1]),
        )


class ClientCase(models.Model):
    client_name = models.CharField(max_length=255)
    case_type = models.CharField(max_length=100, choices=CaseType.choices)
    status = models.CharField(
        max_length=50, choices=CaseStatus.choices, default=CaseStatus.ACTIVE, db_index=True
    )
    paralegal = models.CharField(max_length=100, null=True, blank=True)
    total_contract = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    objects = ClientCaseQuerySet.as_manager()

    class Meta:
        db_table = "client_cases"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_contract__isnull=True) | models.Q(total_contract__gt=0),
                name="client_case_total_contract_positive",
            ),
        ]

    def __str__(self):
        return f"{self.client_name} ({self.case_type})"

    def save(self, *args, **kwargs):
        if self._state.adding:
            self.updated_at = self.created_at
        else:
            self.updated_at = timezone.now()
            update_fields = kwargs.get("update_fields")
            if update_fields is not None:
                kwargs["update_fields"] = set(update_fields) | {"updated_at"}
        super().save(*args, **kwargs)

    def latest_case_note(self):
        return self.case_notes.order_by("-created_at", "-id").first()
