"""Store error translation.

Query and service functions run inside `store_errors`, which turns database
exceptions into the domain taxonomy: unique-constraint violations become the
conflict error of the entity being written, anything else an `InternalError`
with the original exception chained for diagnostics.
"""

import functools
import logging

from django.db import DatabaseError, IntegrityError

from .errors import InternalError

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation (PostgreSQL).
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the IntegrityError was raised by a UNIQUE constraint."""
    cause = exc.__cause__
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION
    return "UNIQUE constraint failed" in str(exc)


def store_errors(conflict=None):
    """Decorator translating database exceptions raised by `func`.

    `conflict` is the CatalogError subclass raised on a unique violation; when
    omitted, unique violations are internal errors like any other failure.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except IntegrityError as exc:
                if conflict is not None and is_unique_violation(exc):
                    raise conflict() from exc
                logger.exception("Integrity error in %s", func.__qualname__)
                raise InternalError() from exc
            except DatabaseError as exc:
                logger.exception("Database error in %s", func.__qualname__)
                raise InternalError() from exc

        return wrapper

    return decorator
