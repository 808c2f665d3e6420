"""Rating writes.

`rate` is an upsert settled by the `(item, user)` unique constraint: the
insert runs in a savepoint, and a unique violation turns it into an update of
the existing row. There is no existence check before the insert, so two
concurrent first ratings cannot both insert.
"""

import logging

from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone

from common.db import is_unique_violation, store_errors
from items.models import Item

from .models import Review, clamp_rating

logger = logging.getLogger(__name__)


@store_errors()
def rate(locator: str, user, rating: int) -> int:
    """Set `user`'s rating of the item to `rating` clamped to 1..10.

    Returns the stored rating. Raises Http404 for an unknown locator.
    """
    item_id = get_object_or_404(Item.objects.only("id"), locator=locator).pk
    rating = clamp_rating(rating)
    try:
        with transaction.atomic():
            Review.objects.create(item_id=item_id, user=user, rating=rating)
        logger.info("User %s rated %s: %s", user.username, locator, rating)
    except IntegrityError as exc:
        if not is_unique_violation(exc):
            raise
        Review.objects.filter(item_id=item_id, user=user).update(
            rating=rating, date=timezone.now()
        )
        logger.info("User %s re-rated %s: %s", user.username, locator, rating)
    return rating


@store_errors()
def unrate(locator: str, user) -> None:
    """Remove `user`'s rating of the item if there is one."""
    deleted, _ = Review.objects.filter(item__locator=locator, user=user).delete()
    if deleted:
        logger.info("User %s removed rating of %s", user.username, locator)
