"""Item reads: single lookup and the ranked, searchable catalog listing.

Every item read joins the `items_score` view, so score, rank and popularity
are the same wherever an item is shown.
"""

from typing import Optional

from common.db import store_errors
from common.pagination import CATALOG_PAGE_SIZE, Page, paginate
from common.search import fuzzy_filter

from .models import Item

ITEMS_TARGET = "/items"


def scored_items():
    return Item.objects.select_related("snapshot")


@store_errors()
def get_item(locator: str) -> Optional[Item]:
    return scored_items().filter(locator=locator).first()


@store_errors()
def list_items(page: Optional[int] = None, query: Optional[str] = None) -> Optional[Page]:
    """Best-scored first, or closest title match first when searching."""
    if query:
        queryset = fuzzy_filter(scored_items(), "title", query).order_by(
            "-similarity", "-snapshot__score", "id"
        )
    else:
        queryset = scored_items().order_by("-snapshot__score", "id")
    return paginate(queryset, page, CATALOG_PAGE_SIZE, ITEMS_TARGET, query)
