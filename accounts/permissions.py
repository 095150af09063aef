from rest_framework.permissions import BasePermission

from .utils import is_admin, is_candidate


class IsAdmin(BasePermission):
    message = "Forbidden"

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return is_admin(user)


class IsCandidate(BasePermission):
    message = "Forbidden"

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return is_candidate(user)
