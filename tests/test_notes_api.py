import pytest

from notes.models import CaseNote

NOTES_URL = "/api/case-notes/"

pytestmark = pytest.mark.django_db


def test_add_note_trims_and_returns_note(auth_client, make_case):
    client_case = make_case()

    response = auth_client.post(NOTES_URL, {"clientCaseId": client_case.pk, "content": "  Biometrics scheduled \n"})

    assert response.status_code == 201
    body = response.json()
    assert body["clientCaseId"] == client_case.pk
    assert body["content"] == "Biometrics scheduled"
    assert body["createdAt"]
    assert CaseNote.objects.get(pk=body["id"]).content == "Biometrics scheduled"


@pytest.mark.parametrize("content", ["", "   ", None])
def test_add_note_rejects_empty_content(auth_client, make_case, content):
    client_case = make_case()

    response = auth_client.post(NOTES_URL, {"clientCaseId": client_case.pk, "content": content})

    assert response.status_code == 400
    assert "content" in response.json()["errors"]
    assert CaseNote.objects.count() == 0


def test_add_note_rejects_unknown_case(auth_client, db):
    response = auth_client.post(NOTES_URL, {"clientCaseId": 999, "content": "Orphan"})

    assert response.status_code == 400
    assert "clientCaseId" in response.json()["errors"]
    assert CaseNote.objects.count() == 0


def test_add_note_requires_case_id(auth_client, db):
    response = auth_client.post(NOTES_URL, {"content": "No case"})

    assert response.status_code == 400
    assert "clientCaseId" in response.json()["errors"]


def test_list_notes_newest_first(auth_client, make_case, make_note):
    client_case = make_case()
    make_note(client_case, "t1", minutes_ago=20)
    make_note(client_case, "t3", minutes_ago=0)
    make_note(client_case, "t2", minutes_ago=10)
    make_note(make_case(client_name="Someone Else"), "elsewhere")

    response = auth_client.get(NOTES_URL, {"clientCaseId": client_case.pk})

    assert response.status_code == 200
    assert [note["content"] for note in response.json()] == ["t3", "t2", "t1"]


def test_list_notes_for_case_without_notes_is_empty(auth_client, make_case):
    client_case = make_case()
    response = auth_client.get(NOTES_URL, {"clientCaseId": client_case.pk})
    assert response.status_code == 200
    assert response.json() == []


def test_list_notes_requires_case_id(auth_client, db):
    response = auth_client.get(NOTES_URL)

    assert response.status_code == 400
    assert "clientCaseId" in response.json()["errors"]


def test_list_notes_rejects_non_integer_case_id(auth_client, db):
    assert auth_client.get(NOTES_URL, {"clientCaseId": "abc"}).status_code == 400


def test_list_notes_for_unknown_case_is_not_found(auth_client, db):
    response = auth_client.get(NOTES_URL, {"clientCaseId": 999})

    assert response.status_code == 404
    assert response.json() == {"detail": "Case not found."}
