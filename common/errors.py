"""Domain error taxonomy.

Every failure the core reports is one of a closed set of kinds. Errors carry
no display text: each consumer (the JSON API, the admin, a CLI) maps the kind
to its own message and status.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INTERNAL_ERROR = "internal_error"
    INCORRECT_CREDENTIALS = "incorrect_credentials"
    EMPTY_FIELDS = "empty_fields"
    PASSWORDS_DIFFER = "passwords_differ"
    WEAK_PASSWORD = "weak_password"
    DUPLICATE_USER = "duplicate_user"
    DUPLICATE_ITEM = "duplicate_item"
    ILLEGAL_USERNAME = "illegal_username"
    ILLEGAL_LOCATOR = "illegal_locator"
    NOT_VALID_IMAGE = "not_valid_image"


class CatalogError(Exception):
    """Base class; subclasses pin `kind`."""

    kind: ErrorKind

    def __str__(self) -> str:
        return self.kind.value


class InternalError(CatalogError):
    """Wraps a store or infrastructure failure; the cause is chained."""

    kind = ErrorKind.INTERNAL_ERROR


class IncorrectCredentials(CatalogError):
    kind = ErrorKind.INCORRECT_CREDENTIALS


class EmptyFields(CatalogError):
    kind = ErrorKind.EMPTY_FIELDS


class PasswordsDiffer(CatalogError):
    kind = ErrorKind.PASSWORDS_DIFFER


class WeakPassword(CatalogError):
    kind = ErrorKind.WEAK_PASSWORD


class DuplicateUser(CatalogError):
    kind = ErrorKind.DUPLICATE_USER


class DuplicateItem(CatalogError):
    kind = ErrorKind.DUPLICATE_ITEM


class IllegalUsername(CatalogError):
    kind = ErrorKind.ILLEGAL_USERNAME


class IllegalLocator(CatalogError):
    kind = ErrorKind.ILLEGAL_LOCATOR


class NotValidImage(CatalogError):
    kind = ErrorKind.NOT_VALID_IMAGE
