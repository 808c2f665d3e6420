"""Reviews API permissions."""

from rest_framework.permissions import BasePermission

from common.policy import can_rate


class CanRate(BasePermission):
    """Any signed-in user may rate; the review is always the caller's own.

    401 for anonymous callers comes from DRF's authentication check.
    """

    message = "You must be signed in to rate items."

    def has_permission(self, request, view):
        return can_rate(request.user)
