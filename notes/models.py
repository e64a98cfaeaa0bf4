from django.db import models
from django.utils import timezone


class CaseNote(models.Model):
    client_case = models.ForeignKey(
        "cases.ClientCase", on_delete=models.CASCADE, related_name="case_notes"
    )
    content = models.TextField()
    # Overridable so legacy imports keep the historical date.
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "case_notes"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["client_case", "-created_at"], name="case_note_latest_idx"),
        ]

    def __str__(self):
        return f"Note {self.pk} on case {self.client_case_id}"
