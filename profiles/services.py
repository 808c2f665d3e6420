"""User profile mutations.

`edit_user` and `remove_user` return file intents for the avatar; the caller
applies them once the database write went through.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction

from common.db import store_errors
from common.errors import DuplicateUser, PasswordsDiffer
from common.media import AVATARS, DeleteFile, RenameFile
from common.validators import is_blank
from user_auth_app.services import check_password_strength, clean_username

from .models import Profile

logger = logging.getLogger(__name__)

User = get_user_model()


@dataclass
class UserUpdate:
    """Partial user update; None means unchanged."""

    new_username: Optional[str] = None
    has_avatar: Optional[bool] = None
    new_password1: Optional[str] = None
    new_password2: Optional[str] = None


@store_errors(conflict=DuplicateUser)
def edit_user(username: str, update: UserUpdate):
    """Apply `update` to the user; returns (user, intents) or (None, [])."""
    user = User.objects.select_related("profile").filter(username=username).first()
    if user is None:
        return None, []

    intents: List = []
    user_fields = []

    if update.new_username is not None:
        new_username = clean_username(update.new_username)
        if new_username != user.username:
            intents.append(RenameFile(AVATARS, user.username, new_username))
            user.username = new_username
            user_fields.append("username")

    # Only a filled-in pair of password fields changes the password.
    if not is_blank(update.new_password1) and not is_blank(update.new_password2):
        if update.new_password1 != update.new_password2:
            raise PasswordsDiffer()
        check_password_strength(update.new_password1, user)
        user.set_password(update.new_password1)
        user_fields.append("password")

    profile, _ = Profile.objects.get_or_create(user=user)
    avatar_changed = update.has_avatar is not None and update.has_avatar != profile.has_avatar
    if avatar_changed:
        profile.has_avatar = update.has_avatar
        if not update.has_avatar:
            intents.append(DeleteFile(AVATARS, user.username))

    with transaction.atomic():
        if user_fields:
            user.save(update_fields=user_fields)
        if avatar_changed:
            profile.save(update_fields=["has_avatar"])

    changed = user_fields + (["has_avatar"] if avatar_changed else [])
    if changed:
        logger.info("Edited user %s (%s)", username, ", ".join(changed))
    return user, intents


@store_errors()
def remove_user(username: str) -> List:
    """Delete the user with profile, token and reviews; returns avatar intents."""
    deleted, _ = User.objects.filter(username=username).delete()
    if not deleted:
        return []
    logger.info("Removed user %s", username)
    return [DeleteFile(AVATARS, username)]
