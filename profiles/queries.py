"""User reads: single lookup and the searchable member listing."""

from typing import Optional

from django.contrib.auth import get_user_model

from common.db import store_errors
from common.pagination import CATALOG_PAGE_SIZE, Page, paginate
from common.search import fuzzy_filter

User = get_user_model()

USERS_TARGET = "/users"


def users_with_profile():
    return User.objects.select_related("profile")


@store_errors()
def get_user(username: str):
    return users_with_profile().filter(username=username).first()


@store_errors()
def list_users(page: Optional[int] = None, query: Optional[str] = None) -> Optional[Page]:
    """Registration order, or closest username match first when searching."""
    if query:
        queryset = fuzzy_filter(users_with_profile(), "username", query).order_by(
            "-similarity", "id"
        )
    else:
        queryset = users_with_profile().order_by("id")
    return paginate(queryset, page, CATALOG_PAGE_SIZE, USERS_TARGET, query)
