"""Profiles API permissions.

Contains the object-level permission used by the user detail endpoint.
"""

from rest_framework.permissions import SAFE_METHODS, BasePermission

from common.policy import can_edit_user, can_remove_user


class CanEditOrRemoveUser(BasePermission):
    """
    Object-level permission for a user account.

    - SAFE methods (GET/HEAD/OPTIONS) are always allowed.
    - PATCH: the user themselves or an administrator.
    - DELETE: as PATCH, but administrator accounts cannot be removed.
    """

    message = "You may not modify this user."

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        if request.method == "DELETE":
            return can_remove_user(request.user, obj)
        return can_edit_user(request.user, obj)
