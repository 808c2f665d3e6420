"""Reviews app models.

Defines the Review model. A user can leave at most one rating per item;
ratings are integers between 1 and 10. Re-rating updates the row and moves
its date forward.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

MIN_RATING = 1
MAX_RATING = 10


def clamp_rating(rating: int) -> int:
    return max(MIN_RATING, min(MAX_RATING, int(rating)))


class Review(models.Model):
    """Represents one user's rating of one item."""

    item = models.ForeignKey(
        "items.Item",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)]
    )
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "reviews"
        constraints = [
            models.UniqueConstraint(
                fields=["item", "user"],
                name="unique_review_per_item_and_user",
            ),
            models.CheckConstraint(
                condition=Q(rating__gte=MIN_RATING) & Q(rating__lte=MAX_RATING),
                name="review_rating_between_1_and_10",
            ),
        ]
        ordering = ("-date", "-id")

    def __str__(self) -> str:
        """Readable representation for admin and debugging."""
        return f"Review<{self.id} {self.user_id}->{self.item_id} {self.rating}>"
