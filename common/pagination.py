"""Zero-based page windows over ordered querysets.

Built on Django's Paginator: a list call is a COUNT for the number of pages
and a LIMIT/OFFSET fetch for the window. Requests outside
`[0, number_of_pages)` produce no page at all rather than an error or a
clamped page.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from django.core.paginator import InvalidPage, Paginator

T = TypeVar("T")

CATALOG_PAGE_SIZE = 12
RATING_PAGE_SIZE = 3


@dataclass(frozen=True)
class Page(Generic[T]):
    """Read-only window of an ordered result set."""

    target: str
    items: List[T] = field(default_factory=list)
    current_page: int = 0
    number_of_pages: int = 0
    query: Optional[str] = None


def paginate(queryset, page_number: Optional[int], page_size: int, target: str,
             query: Optional[str] = None) -> Optional[Page]:
    """Return page `page_number` (default 0) of `queryset`, or None if out of range.

    `queryset` must already be ordered; the caller decides the ranking.
    """
    page_number = 0 if page_number is None else page_number
    paginator = Paginator(queryset, page_size, allow_empty_first_page=False)
    try:
        window = paginator.page(page_number + 1)
    except InvalidPage:
        return None
    return Page(
        target=target,
        items=list(window.object_list),
        current_page=page_number,
        number_of_pages=paginator.num_pages,
        query=query,
    )
