"""Auth API views.

Token-based registration, login and logout. A successful registration signs
the new user in right away by returning a token.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from user_auth_app import services
from .permissions import AllowAnyRegistration, AllowedAnyLogin, IsSignedIn
from .serializers import LoginSerializer, RegistrationSerializer, auth_payload


class RegistrationView(APIView):
    """POST /api/registration/ -> create user, return auth token."""

    permission_classes = [AllowAnyRegistration]

    def post(self, request, *args, **kwargs):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        token = services.issue_token(user)
        return Response(auth_payload(user, token), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """POST /api/login/ -> validate credentials and return auth token."""

    permission_classes = [AllowedAnyLogin]

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        token = services.issue_token(user)
        return Response(auth_payload(user, token), status=status.HTTP_200_OK)


class LogoutView(APIView):
    """POST /api/logout/ -> delete the caller's token."""

    permission_classes = [IsSignedIn]

    def post(self, request, *args, **kwargs):
        services.logout(request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
