"""Trigram similarity search.

PostgreSQL provides `SIMILARITY()` through the pg_trgm extension (installed by
the items migrations). SQLite gets a function of the same name with the same
semantics on every new connection, so `TrigramSimilarity` annotations compile
to identical SQL on both backends.
"""

import logging
import re

from django.conf import settings
from django.contrib.postgres.search import TrigramSimilarity

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[^\W_]+")


def trigrams(text):
    """Return the pg_trgm trigram set of `text`.

    Words are lower-cased runs of letters and digits, each padded with two
    blanks in front and one behind.
    """
    result = set()
    for word in WORD_RE.findall((text or "").lower()):
        padded = f"  {word} "
        for i in range(len(padded) - 2):
            result.add(padded[i:i + 3])
    return result


def trigram_similarity(a, b):
    """Shared trigrams divided by all distinct trigrams of both strings."""
    left, right = trigrams(a), trigrams(b)
    if not left or not right:
        return 0.0
    shared = len(left & right)
    return shared / (len(left) + len(right) - shared)


def register_similarity_function(sender, connection, **kwargs):
    """`connection_created` receiver installing SIMILARITY() on SQLite."""
    if connection.vendor != "sqlite":
        return
    connection.connection.create_function(
        "SIMILARITY", 2, trigram_similarity, deterministic=True
    )
    logger.debug("Registered SIMILARITY() on SQLite connection %s", connection.alias)


def similarity_threshold() -> float:
    return settings.TRIGRAM_SIMILARITY_THRESHOLD


def fuzzy_filter(queryset, field: str, query: str):
    """Annotate `similarity` and keep rows at or above the threshold."""
    return queryset.annotate(similarity=TrigramSimilarity(field, query)).filter(
        similarity__gte=similarity_threshold()
    )
