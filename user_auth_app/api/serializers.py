"""Auth API serializers.

Collect the registration and login form fields. Blank values are accepted here
and rejected by the account services, so every failure surfaces as one of the
domain error kinds.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers

from user_auth_app import services

User = get_user_model()


class RegistrationSerializer(serializers.Serializer):
    """Create a new user from username and a repeated password."""

    username = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    password1 = serializers.CharField(write_only=True, required=False, allow_blank=True, default="", trim_whitespace=False)
    password2 = serializers.CharField(write_only=True, required=False, allow_blank=True, default="", trim_whitespace=False)

    def create(self, validated_data):
        return services.register(
            validated_data["username"],
            validated_data["password1"],
            validated_data["password2"],
        )


class LoginSerializer(serializers.Serializer):
    """Authenticate username/password and attach the user to validated data."""

    username = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True, default="", trim_whitespace=False)

    def validate(self, attrs):
        attrs["user"] = services.login(attrs["username"], attrs["password"])
        return attrs


def auth_payload(user, token):
    return {
        "token": token.key,
        "username": user.username,
        "user_id": user.id,
        "is_admin": user.is_staff,
    }
