"""
Session credential for the single admin identity.

The credential is a simplejwt ``AccessToken`` carrying the admin username and a
fixed role claim. Its lifetime comes from ``SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]``.
"""
from django.conf import settings
from django.utils.crypto import constant_time_compare
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken


def case_tracker_setting(name):
    return settings.CASE_TRACKER[name]


def credentials_match(username, password):
    """Compare a username/password pair against the configured admin identity."""
    if not isinstance(username, str) or not isinstance(password, str):
        return False
    username_ok = constant_time_compare(username, case_tracker_setting("ADMIN_USERNAME"))
    password_ok = constant_time_compare(password, case_tracker_setting("ADMIN_PASSWORD"))
    return username_ok and password_ok


def issue_session_token():
    token = AccessToken()
    token["username"] = case_tracker_setting("ADMIN_USERNAME")
    token["role"] = case_tracker_setting("ADMIN_ROLE")
    return token


def read_session_token(raw_token):
    """
    Decode and verify a raw session credential.

    Returns the token, or None when it is missing, malformed, expired, badly
    signed or not issued for the admin identity. Callers never learn which.
    """
    if not raw_token:
        return None
    try:
        token = AccessToken(raw_token)
    except TokenError:
        return None
    if token.get("role") != case_tracker_setting("ADMIN_ROLE"):
        return None
    if token.get("username") != case_tracker_setting("ADMIN_USERNAME"):
        return None
    return token


def is_request_authorized(request):
    raw_token = request.COOKIES.get(case_tracker_setting("AUTH_COOKIE_NAME"))
    return read_session_token(raw_token) is not None
