from rest_framework.authentication import BaseAuthentication

from authapi.tokens import case_tracker_setting, read_session_token


class AdminIdentity:
    """Request principal for a verified admin session. Not backed by a user table."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, username, role):
        self.username = username
        self.role = role

    def __str__(self):
        return self.username


class AuthCookieJWTAuthentication(BaseAuthentication):
    """
    Reads the session JWT from the HTTP-only auth cookie.
    Any token problem leaves the request anonymous; the permission layer
    answers with a uniform 401.
    """

    www_authenticate_realm = "api"

    def authenticate(self, request):
        raw_token = request.COOKIES.get(case_tracker_setting("AUTH_COOKIE_NAME"))
        token = read_session_token(raw_token)
        if token is None:
            return None
        return AdminIdentity(token["username"], token["role"]), token

    def authenticate_header(self, request):
        return f'Cookie realm="{self.www_authenticate_realm}"'
