from rest_framework import serializers

from cases.models import ClientCase
from .models import CaseNote


class CaseNoteSerializer(serializers.ModelSerializer):
    clientCaseId = serializers.PrimaryKeyRelatedField(
        source="client_case", queryset=ClientCase.objects.all()
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = CaseNote
        fields = ["id", "clientCaseId", "content", "createdAt"]
        read_only_fields = ["id"]

