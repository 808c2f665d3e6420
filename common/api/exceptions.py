"""API error rendering.

Maps each domain error kind to an HTTP status and a user-facing message.
Internal errors are logged with their chained cause; the response body never
contains store details.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.errors import CatalogError, ErrorKind

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    ErrorKind.INTERNAL_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error!",
    ),
    ErrorKind.INCORRECT_CREDENTIALS: (
        status.HTTP_400_BAD_REQUEST,
        "Incorrect login credentials!",
    ),
    ErrorKind.EMPTY_FIELDS: (status.HTTP_400_BAD_REQUEST, "Some fields are empty!"),
    ErrorKind.PASSWORDS_DIFFER: (status.HTTP_400_BAD_REQUEST, "Passwords do not match!"),
    ErrorKind.WEAK_PASSWORD: (status.HTTP_400_BAD_REQUEST, "Password is not strong enough!"),
    ErrorKind.DUPLICATE_USER: (
        status.HTTP_409_CONFLICT,
        "User with this username already exists!",
    ),
    ErrorKind.DUPLICATE_ITEM: (
        status.HTTP_409_CONFLICT,
        "Item with this locator already exists!",
    ),
    ErrorKind.ILLEGAL_USERNAME: (
        status.HTTP_400_BAD_REQUEST,
        "Only alphanumerical characters and underscores are allowed in usernames!",
    ),
    ErrorKind.ILLEGAL_LOCATOR: (
        status.HTTP_400_BAD_REQUEST,
        "Only alphanumerical characters and underscores are allowed in item locator!",
    ),
    ErrorKind.NOT_VALID_IMAGE: (
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Uploaded file is not a valid image",
    ),
}


def catalog_exception_handler(exc, context):
    """DRF exception handler: domain errors first, then DRF's defaults."""
    if isinstance(exc, CatalogError):
        status_code, message = ERROR_RESPONSES[exc.kind]
        if status_code >= 500:
            view = context.get("view")
            logger.error(
                "Internal error in %s",
                type(view).__name__ if view else "unknown view",
                exc_info=exc.__cause__ or exc,
            )
        return Response({"code": exc.kind.value, "detail": message}, status=status_code)
    return exception_handler(exc, context)
