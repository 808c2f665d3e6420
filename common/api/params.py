"""Query-parameter parsing shared by the list and detail views."""

from rest_framework.exceptions import ValidationError


def parse_page(params):
    """Read the optional 0-based `page` parameter."""
    value = params.get("page")
    if value in (None, ""):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError({"page": "Must be an integer."})


def parse_search(params):
    """Read the optional `search` parameter; blank means no search."""
    value = (params.get("search") or "").strip()
    return value or None
