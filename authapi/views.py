import logging

from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import LoginSerializer
from .tokens import case_tracker_setting, credentials_match, issue_session_token

logger = logging.getLogger(__name__)


def _set_auth_cookie(response, value, max_age):
    response.set_cookie(
        case_tracker_setting("AUTH_COOKIE_NAME"),
        value,
        max_age=max_age,
        path="/",
        secure=case_tracker_setting("AUTH_COOKIE_SECURE"),
        httponly=True,
        samesite=case_tracker_setting("AUTH_COOKIE_SAMESITE"),
    )


class SessionView(APIView):
    """
    POST logs the admin in and sets the session cookie.
    DELETE logs out by replacing the cookie with an already-expired one.
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [AllowAny()]
        return super().get_permissions()

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning("Rejected login with malformed payload")
            raise AuthenticationFailed("Invalid credentials")

        username = serializer.validated_data["username"]
        if not credentials_match(username, serializer.validated_data["password"]):
            logger.warning("Rejected login for username %r", username)
            raise AuthenticationFailed("Invalid credentials")

        token = issue_session_token()
        lifetime = token.lifetime
        response = Response({"detail": "Login successful"}, status=status.HTTP_200_OK)
        _set_auth_cookie(response, str(token), int(lifetime.total_seconds()))
        logger.info("Admin %s logged in", username)
        return response

    def delete(self, request):
        response = Response({"detail": "Logout successful"}, status=status.HTTP_200_OK)
        _set_auth_cookie(response, "", 0)
        logger.info("Admin %s logged out", request.user)
        return response
