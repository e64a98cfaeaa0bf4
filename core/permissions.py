from rest_framework.permissions import BasePermission

from authapi.tokens import case_tracker_setting


class IsCaseAdmin(BasePermission):
    """
    Grants access only to requests authenticated with a valid admin session.
    """

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return getattr(user, "role", None) == case_tracker_setting("ADMIN_ROLE")
