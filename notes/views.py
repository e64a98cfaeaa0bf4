import logging

from rest_framework import generics
from rest_framework.exceptions import NotFound, ValidationError

from cases.models import ClientCase
from .models import CaseNote
from .serializers import CaseNoteSerializer

logger = logging.getLogger(__name__)


class CaseNoteListCreateView(generics.ListCreateAPIView):
    serializer_class = CaseNoteSerializer
    pagination_class = None

    def get_queryset(self):
        raw_id = self.request.query_params.get("clientCaseId")
        if not raw_id:
            raise ValidationError({"clientCaseId": ["Client case ID is required."]})
        try:
            case_id = int(raw_id)
        except ValueError:
            raise ValidationError({"clientCaseId": ["A valid integer is required."]})
        if not ClientCase.objects.filter(pk=case_id).exists():
            raise NotFound("Case not found.")
        return CaseNote.objects.filter(client_case_id=case_id).order_by("-created_at", "-id")

    def perform_create(self, serializer):
        note = serializer.save()
        logger.info("Added note %s to client case %s", note.pk, note.client_case_id)
