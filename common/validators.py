"""Field checks shared by account and item management."""

import re
from typing import Optional

IDENTIFIER_RE = re.compile(r"\w+")


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_identifier(value: str) -> bool:
    """Usernames and locators: letters, digits and underscores only."""
    return IDENTIFIER_RE.fullmatch(value) is not None
