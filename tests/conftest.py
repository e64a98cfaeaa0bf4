from datetime import timedelta

import pytest
from django.conf import settings
from django.utils import timezone
from rest_framework.test import APIClient

from cases.models import ClientCase
from notes.models import CaseNote


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_credentials():
    config = settings.CASE_TRACKER
    return {"username": config["ADMIN_USERNAME"], "password": config["ADMIN_PASSWORD"]}


@pytest.fixture
def auth_client(api_client, admin_credentials):
    response = api_client.post("/api/auth/", admin_credentials)
    assert response.status_code == 200
    return api_client


@pytest.fixture
def make_case(db):
    def _make_case(**overrides):
        fields = {
            "client_name": "Jane Doe",
            "case_type": "Green Card",
            "status": "Active",
        }
        fields.update(overrides)
        return ClientCase.objects.create(**fields)

    return _make_case


@pytest.fixture
def make_note(db):
    def _make_note(client_case, content, minutes_ago=0):
        return CaseNote.objects.create(
            client_case=client_case,
            content=content,
            created_at=timezone.now() - timedelta(minutes=minutes_ago),
        )

    return _make_note
