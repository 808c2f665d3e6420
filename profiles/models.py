"""Profiles app models.

Defines the Profile model that extends the base user with avatar metadata.
Every user gets exactly one profile, created when the user is saved for the
first time (see `profiles.signals`).
"""

import hashlib

from django.conf import settings
from django.db import models


def avatar_hue(username: str) -> int:
    """Fallback avatar color: first two bytes of md5(username), mod 360."""
    digest = hashlib.md5(username.encode("utf-8")).digest()
    return (digest[0] * 256 + digest[1]) % 360


class Profile(models.Model):
    """Profile for a single user (OneToOne)."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    has_avatar = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    @property
    def avatar_hue(self) -> int:
        return avatar_hue(self.user.username)

    def __str__(self):
        """Readable representation for admin and debugging."""
        return f"Profile<{self.user_id}:{self.user.username}>"
