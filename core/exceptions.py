import logging

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized"
UNEXPECTED_MESSAGE = "An unexpected error occurred"


def _flatten_errors(errors, prefix=""):
    if isinstance(errors, dict):
        for field, value in errors.items():
            label = field if not prefix else f"{prefix}.{field}"
            yield from _flatten_errors(value, label)
    elif isinstance(errors, (list, tuple)):
        for value in errors:
            yield from _flatten_errors(value, prefix)
    else:
        yield f"{prefix}: {errors}" if prefix and prefix != "non_field_errors" else str(errors)


def _validation_payload(data):
    if not isinstance(data, dict):
        data = {"non_field_errors": data}
    return {"detail": " ".join(_flatten_errors(data)), "errors": data}


def api_exception_handler(exc, context):
    """
    Renders every API failure as ``{"detail": ...}``.

    Validation errors also carry field-level ``errors``. Missing or invalid
    sessions all read the same. Anything DRF does not recognise is logged and
    answered with a generic 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view is not None else "unknown view",
            exc_info=exc,
        )
        set_rollback()
        return Response(
            {"detail": UNEXPECTED_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, NotAuthenticated):
        response.data = {"detail": UNAUTHORIZED_MESSAGE}
    elif isinstance(exc, ValidationError):
        response.data = _validation_payload(response.data)

    return response
