import logging

from django.conf import settings
from rest_framework import serializers, status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import ClientCase
from .query import ListQuery, apply_query
from .serializers import CaseBrowseParamsSerializer, ClientCaseSerializer

logger = logging.getLogger(__name__)


def _parse_case_id(raw_id, missing_message):
    if raw_id is None or raw_id == "":
        raise ValidationError({"id": [missing_message]})
    # Booleans and fractional numbers are rejected, not truncated.
    try:
        return serializers.IntegerField().run_validation(raw_id)
    except ValidationError as exc:
        raise ValidationError({"id": exc.detail})


def _projected_case(pk):
    return ClientCase.objects.with_latest_note().get(pk=pk)


def projected_cases():
    return ClientCase.objects.with_latest_note().order_by("-created_at", "-id")


class ClientCaseView(APIView):
    def get(self, request):
        serializer = ClientCaseSerializer(projected_cases(), many=True)
        return Response(serializer.data)

    def post(self, request):
        serializer = ClientCaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        client_case = serializer.save()
        logger.info("Created client case %s", client_case.pk)
        return Response(
            ClientCaseSerializer(_projected_case(client_case.pk)).data,
            status=status.HTTP_201_CREATED,
        )

    def put(self, request):
        case_id = _parse_case_id(request.data.get("id"), "ID is required for update.")
        try:
            client_case = ClientCase.objects.get(pk=case_id)
        except ClientCase.DoesNotExist:
            raise NotFound("Case not found.")

        serializer = ClientCaseSerializer(client_case, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Updated client case %s", case_id)
        return Response(ClientCaseSerializer(_projected_case(case_id)).data)

    def delete(self, request):
        case_id = _parse_case_id(request.query_params.get("id"), "ID is required for deletion.")
        deleted, _ = ClientCase.objects.filter(pk=case_id).delete()
        if not deleted:
            raise NotFound("Case not found.")
        logger.info("Deleted client case %s and its notes", case_id)
        return Response({"detail": "Client case deleted successfully."})


class ClientCaseBrowseView(APIView):
    """Runs the list pipeline server-side over the projected case list."""

    def get(self, request):
        params = CaseBrowseParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        values = params.validated_data
        query = ListQuery(
            status=values["status"],
            paralegal=values["paralegal"],
            search=values["search"],
            sort_field=values["sort"],
            sort_direction=values["direction"],
            page=values["page"],
        )
        page_size = settings.CASE_TRACKER["PAGE_SIZE"]
        cases = ClientCaseSerializer(projected_cases(), many=True).data
        page = apply_query(cases, query, page_size)
        return Response(
            {
                "results": page.items,
                "page": page.page,
                "totalPages": page.total_pages,
                "totalCount": page.total_count,
                "pageSize": page_size,
            }
        )
