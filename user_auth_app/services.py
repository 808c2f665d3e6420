"""Account services: registration, credential checks and strength policy.

Functions take plain values and the acting user explicitly; the API views
handle tokens and HTTP concerns.
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction
from rest_framework.authtoken.models import Token

from common.db import store_errors
from common.errors import (
    DuplicateUser,
    EmptyFields,
    IllegalUsername,
    IncorrectCredentials,
    PasswordsDiffer,
    WeakPassword,
)
from common.validators import is_blank, is_identifier

logger = logging.getLogger(__name__)

User = get_user_model()


def check_password_strength(password, user):
    """Run the configured password validators; any failure is WeakPassword."""
    try:
        validate_password(password, user)
    except ValidationError as exc:
        raise WeakPassword() from exc


def clean_username(username):
    if is_blank(username):
        raise EmptyFields()
    if not is_identifier(username):
        raise IllegalUsername()
    return username


@store_errors(conflict=DuplicateUser)
def register(username, password1, password2):
    """Create a regular user with an Argon2-hashed password."""
    if any(is_blank(value) for value in (username, password1, password2)):
        raise EmptyFields()
    username = clean_username(username)
    if password1 != password2:
        raise PasswordsDiffer()
    check_password_strength(password1, User(username=username))

    with transaction.atomic():
        user = User.objects.create_user(username=username, password=password1)
    logger.info("Registered user %s", username)
    return user


@store_errors()
def login(username, password):
    """Return the user for valid credentials.

    Unknown usernames and wrong passwords are indistinguishable to the caller.
    """
    if is_blank(username) or is_blank(password):
        raise EmptyFields()
    user = authenticate(username=username, password=password)
    if user is None:
        logger.info("Failed login for %s", username)
        raise IncorrectCredentials()
    return user


def issue_token(user):
    token, _ = Token.objects.get_or_create(user=user)
    return token


@store_errors()
def logout(user):
    """Invalidate the user's auth token."""
    Token.objects.filter(user=user).delete()
    logger.info("User %s logged out", user.username)
