import logging

from django.conf import settings
from django.db import transaction
from rest_framework import serializers

from notes.models import CaseNote
from .models import CaseStatus, CaseType, ClientCase, normalize_status
from .query import ALL, NOT_ASSIGNED, SORT_DIRECTIONS, SORT_FIELDS

logger = logging.getLogger(__name__)

CASE_TYPE_ALIASES = {
    "Fiancé(e) Visa": CaseType.FIANCE_VISA,
}


def note_text(value):
    return (value or "").strip()


class CaseTypeField(serializers.ChoiceField):
    def __init__(self, **kwargs):
        super().__init__(choices=CaseType.choices, **kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.strip()
            data = CASE_TYPE_ALIASES.get(data, data)
        return super().to_internal_value(data)


class ContractAmountField(serializers.DecimalField):
    """Blank means "not specified"; anything else must be a positive amount."""

    default_error_messages = {
        "not_positive": "Total contract must be a positive number.",
    }

    def __init__(self, **kwargs):
        kwargs.setdefault("max_digits", 12)
        kwargs.setdefault("decimal_places", 2)
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if value <= 0:
            self.fail("not_positive")
        return value


class ClientCaseSerializer(serializers.ModelSerializer):
    clientName = serializers.CharField(source="client_name", max_length=255)
    caseType = CaseTypeField(source="case_type")
    status = serializers.ChoiceField(
        choices=CaseStatus.choices, required=False, allow_null=True, allow_blank=True
    )
    paralegal = serializers.CharField(
        max_length=100, required=False, allow_null=True, allow_blank=True
    )
    totalContract = ContractAmountField(source="total_contract")
    notes = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    latestNote = serializers.CharField(source="latest_note", read_only=True, allow_null=True)
    latestNoteDate = serializers.DateTimeField(
        source="latest_note_date", read_only=True, allow_null=True
    )

    class Meta:
        model = ClientCase
        fields = [
            "id",
            "clientName",
            "caseType",
            "status",
            "paralegal",
            "totalContract",
            "notes",
            "createdAt",
            "updatedAt",
            "latestNote",
            "latestNoteDate",
        ]
        read_only_fields = ["id"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["status"] = normalize_status(data.get("status"))
        return data

    def validate_paralegal(self, value):
        value = (value or "").strip()
        if not value:
            return None
        roster = settings.CASE_TRACKER["PARALEGALS"]
        if value not in roster:
            raise serializers.ValidationError(f'"{value}" is not a listed paralegal.')
        return value

    def validate(self, attrs):
        attrs["status"] = normalize_status(attrs.get("status"))
        return attrs

    def create(self, validated_data):
        with transaction.atomic():
            client_case = ClientCase.objects.create(**validated_data)
            content = note_text(validated_data.get("notes"))
            if content:
                CaseNote.objects.create(client_case=client_case, content=content)
        return client_case

    def update(self, instance, validated_data):
        instance.client_name = validated_data["client_name"]
        instance.case_type = validated_data["case_type"]
        instance.status = validated_data["status"]
        instance.paralegal = validated_data.get("paralegal")
        instance.total_contract = validated_data.get("total_contract")
        if "notes" in validated_data:
            instance.notes = validated_data["notes"]

        with transaction.atomic():
            instance.save()
            content = note_text(validated_data.get("notes"))
            if content:
                latest = instance.latest_case_note()
                # Editing a case rewrites its latest note rather than appending one.
                if latest is not None:
                    latest.content = content
                    latest.save(update_fields=["content"])
                    logger.info("Overwrote latest note %s on client case %s", latest.pk, instance.pk)
                else:
                    CaseNote.objects.create(client_case=instance, content=content)
        return instance


class CaseBrowseParamsSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[ALL, *CaseStatus.values], required=False, default=ALL
    )
    paralegal = serializers.CharField(required=False, default=ALL)
    search = serializers.CharField(
        required=False, allow_blank=True, default="", trim_whitespace=False
    )
    sort = serializers.ChoiceField(choices=SORT_FIELDS, required=False, allow_null=True, default=None)
    direction = serializers.ChoiceField(choices=SORT_DIRECTIONS, required=False, default="asc")
    page = serializers.IntegerField(required=False, default=1)

    def validate_paralegal(self, value):
        value = value.strip()
        if value in (ALL, NOT_ASSIGNED):
            return value
        if value not in settings.CASE_TRACKER["PARALEGALS"]:
            raise serializers.ValidationError(f'"{value}" is not a listed paralegal.')
        return value
