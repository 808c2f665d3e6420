"""Profiles API serializers.

Users are shown with their avatar data: `avatar` is the uploaded image URL
(empty when there is none) and `avatar_hue` the fallback color.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers

from common.media import AVATARS, image_url

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Read serializer for list entries and the user page."""

    is_admin = serializers.BooleanField(source="is_staff", read_only=True)
    has_avatar = serializers.BooleanField(source="profile.has_avatar", read_only=True)
    avatar_hue = serializers.IntegerField(source="profile.avatar_hue", read_only=True)
    avatar = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["username", "is_admin", "has_avatar", "avatar_hue", "avatar", "date_joined"]
        read_only_fields = fields

    def get_avatar(self, obj):
        profile = getattr(obj, "profile", None)
        if profile is None or not profile.has_avatar:
            return ""
        url = image_url(AVATARS, obj.username)
        request = self.context.get("request")
        if url and request is not None:
            return request.build_absolute_uri(url)
        return url


class UserPatchSerializer(serializers.Serializer):
    """
    Partial update of a user.

    `avatar` uploads a new image; `clear_avatar` removes the current one. The
    password changes only when both password fields are filled in.
    """

    username = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    password1 = serializers.CharField(write_only=True, required=False, allow_blank=True, trim_whitespace=False)
    password2 = serializers.CharField(write_only=True, required=False, allow_blank=True, trim_whitespace=False)
    avatar = serializers.FileField(required=False, allow_empty_file=True)
    clear_avatar = serializers.BooleanField(required=False, default=False)
