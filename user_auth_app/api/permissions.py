"""Auth API permissions."""

from rest_framework.permissions import AllowAny, BasePermission
from rest_framework.request import Request
from rest_framework.views import View

from common.policy import is_authenticated


class AllowAnyRegistration(AllowAny):
    """Explicit alias for registration endpoints (semantics: allow any)."""
    pass


class AllowedAnyLogin(AllowAny):
    """Explicit alias for login endpoints (semantics: allow any)."""
    pass


class IsSignedIn(BasePermission):
    """Grant access only to users holding a valid token."""

    def has_permission(self, request: Request, view: View) -> bool:
        return is_authenticated(request.user)
