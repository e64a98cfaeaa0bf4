from datetime import timedelta

import jwt
import pytest

from authapi.tokens import (
    credentials_match,
    is_request_authorized,
    issue_session_token,
    read_session_token,
)
from casetracker.settings import DEV_SECRET_KEY

AUTH_URL = "/api/auth/"
CASES_URL = "/api/client-cases/"

pytestmark = pytest.mark.django_db


def _cookie_name(settings):
    return settings.CASE_TRACKER["AUTH_COOKIE_NAME"]


def test_login_sets_http_only_strict_cookie(api_client, admin_credentials, settings):
    response = api_client.post(AUTH_URL, admin_credentials)

    assert response.status_code == 200
    assert response.json() == {"detail": "Login successful"}
    cookie = response.cookies[_cookie_name(settings)]
    assert cookie.value
    assert cookie["httponly"]
    assert cookie["samesite"] == "Strict"
    assert cookie["path"] == "/"
    assert int(cookie["max-age"]) == 24 * 60 * 60


def test_login_token_carries_identity_and_role(api_client, admin_credentials, settings):
    response = api_client.post(AUTH_URL, admin_credentials)
    token = read_session_token(response.cookies[_cookie_name(settings)].value)

    assert token is not None
    assert token["username"] == admin_credentials["username"]
    assert token["role"] == "admin"


def test_authenticated_client_can_list_cases(auth_client):
    response = auth_client.get(CASES_URL)
    assert response.status_code == 200
    assert response.json() == []


def test_wrong_password_is_rejected_without_cookie(api_client, admin_credentials, settings):
    response = api_client.post(
        AUTH_URL, {"username": admin_credentials["username"], "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}
    assert _cookie_name(settings) not in response.cookies

    follow_up = api_client.get(CASES_URL)
    assert follow_up.status_code == 401
    assert follow_up.json() == {"detail": "Unauthorized"}


def test_wrong_username_reads_the_same_as_wrong_password(api_client, admin_credentials):
    response = api_client.post(
        AUTH_URL, {"username": "someone", "password": admin_credentials["password"]}
    )
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_login_with_missing_fields_is_an_authentication_error(api_client):
    response = api_client.post(AUTH_URL, {"username": "admin"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_logout_expires_cookie_and_blocks_further_requests(auth_client, settings):
    response = auth_client.delete(AUTH_URL)

    assert response.status_code == 200
    cookie = response.cookies[_cookie_name(settings)]
    assert cookie.value == ""
    assert int(cookie["max-age"]) == 0
    assert auth_client.get(CASES_URL).status_code == 401


def test_logout_requires_a_session(api_client):
    assert api_client.delete(AUTH_URL).status_code == 401


@pytest.mark.parametrize(
    "make_token",
    [
        lambda: "not-a-jwt",
        lambda: jwt.encode({"username": "admin", "role": "admin"}, "some-other-key", algorithm="HS256"),
    ],
    ids=["malformed", "bad-signature"],
)
def test_invalid_tokens_are_uniformly_unauthorized(api_client, settings, make_token):
    api_client.cookies[_cookie_name(settings)] = make_token()
    response = api_client.get(CASES_URL)

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


def test_expired_token_is_unauthorized(api_client, settings):
    token = issue_session_token()
    token.set_exp(lifetime=-timedelta(minutes=5))
    api_client.cookies[_cookie_name(settings)] = str(token)

    response = api_client.get(CASES_URL)
    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


def test_token_without_admin_role_is_unauthorized(api_client, settings):
    token = issue_session_token()
    token["role"] = "viewer"
    api_client.cookies[_cookie_name(settings)] = str(token)

    assert api_client.get(CASES_URL).status_code == 401


def test_read_session_token_rejects_empty_values():
    assert read_session_token(None) is None
    assert read_session_token("") is None


def test_credentials_match_uses_configured_identity(settings):
    settings.CASE_TRACKER = {**settings.CASE_TRACKER, "ADMIN_USERNAME": "clerk", "ADMIN_PASSWORD": "s3cret"}

    assert credentials_match("clerk", "s3cret")
    assert not credentials_match("clerk", "S3cret")
    assert not credentials_match("admin", "s3cret")
    assert not credentials_match(None, "s3cret")


def test_is_request_authorized_checks_the_auth_cookie(rf, settings):
    request = rf.get("/api/client-cases/")
    assert not is_request_authorized(request)

    request.COOKIES[_cookie_name(settings)] = "garbage"
    assert not is_request_authorized(request)

    request.COOKIES[_cookie_name(settings)] = str(issue_session_token())
    assert is_request_authorized(request)


def test_development_signing_key_is_long_enough_for_hs256():
    assert len(DEV_SECRET_KEY.encode()) >= 32
