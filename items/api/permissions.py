"""Items API permissions."""

from rest_framework.permissions import SAFE_METHODS, BasePermission

from common.policy import can_manage_items


class CanManageItemsOrReadOnly(BasePermission):
    """Reads are public; adding, editing and removing items is admin-only."""

    message = "Only administrators can manage items."

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return can_manage_items(request.user)
