import pytest
from rest_framework.exceptions import NotAuthenticated, NotFound, ValidationError

from core.exceptions import api_exception_handler

pytestmark = pytest.mark.django_db


def test_unexpected_errors_are_generic(caplog):
    response = api_exception_handler(RuntimeError("database exploded at /var/db"), {"view": None})

    assert response.status_code == 500
    assert response.data == {"detail": "An unexpected error occurred"}
    assert "database exploded" not in str(response.data)
    assert "Unhandled error" in caplog.text


def test_not_authenticated_is_uniform():
    response = api_exception_handler(NotAuthenticated("Token expired at noon"), {"view": None})

    assert response.status_code == 401
    assert response.data == {"detail": "Unauthorized"}


def test_validation_errors_carry_fields_and_summary():
    exc = ValidationError({"clientName": ["This field may not be blank."]})
    response = api_exception_handler(exc, {"view": None})

    assert response.status_code == 400
    assert response.data["errors"] == {"clientName": ["This field may not be blank."]}
    assert response.data["detail"] == "clientName: This field may not be blank."


def test_non_field_validation_errors_are_wrapped():
    response = api_exception_handler(ValidationError(["Something is off."]), {"view": None})

    assert response.data["errors"] == {"non_field_errors": ["Something is off."]}
    assert response.data["detail"] == "Something is off."


def test_not_found_passes_through():
    response = api_exception_handler(NotFound("Case not found."), {"view": None})

    assert response.status_code == 404
    assert response.data == {"detail": "Case not found."}
