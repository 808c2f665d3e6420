"""Rating reads: a user's own rating and paginated rating histories."""

from typing import Optional

from common.db import store_errors
from common.pagination import RATING_PAGE_SIZE, Page, paginate

from .models import Review


@store_errors()
def get_rating(locator: str, user) -> Optional[int]:
    """The rating `user` gave the item, or None."""
    if user is None or not user.is_authenticated:
        return None
    return (
        Review.objects.filter(item__locator=locator, user=user)
        .values_list("rating", flat=True)
        .first()
    )


@store_errors()
def item_rating_history(locator: str, page: Optional[int] = None) -> Optional[Page]:
    """Ratings of one item with their authors, newest first."""
    queryset = (
        Review.objects.filter(item__locator=locator)
        .select_related("user", "user__profile")
        .order_by("-date", "-id")
    )
    return paginate(queryset, page, RATING_PAGE_SIZE, f"/items/{locator}")


@store_errors()
def user_rating_history(username: str, page: Optional[int] = None) -> Optional[Page]:
    """Ratings by one user with the rated items and their scores, newest first."""
    queryset = (
        Review.objects.filter(user__username=username)
        .select_related("item", "item__snapshot")
        .order_by("-date", "-id")
    )
    return paginate(queryset, page, RATING_PAGE_SIZE, f"/users/{username}")
