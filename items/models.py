"""Items app models.

Defines the Item catalog entry and its read-only ScoreSnapshot. The locator is
the item's URL key and image file name; the title is only for display.
"""

from django.db import models


class Item(models.Model):
    """A catalog entry that users can rate."""

    locator = models.CharField(max_length=100, unique=True)
    title = models.CharField(max_length=200)
    description = models.TextField()

    class Meta:
        db_table = "items"
        ordering = ["id"]

    def __str__(self):
        return f"{self.title} ({self.locator})"


class ScoreSnapshot(models.Model):
    """Rating aggregates of one item, read from the `items_score` view.

    score: mean rating (0 when unrated). rank/popularity: dense rank over all
    items by score and by review count, highest first.
    """

    item = models.OneToOneField(
        Item,
        on_delete=models.DO_NOTHING,
        primary_key=True,
        db_column="item_id",
        related_name="snapshot",
    )
    score = models.FloatField()
    review_count = models.IntegerField()
    rank = models.IntegerField()
    popularity = models.IntegerField()

    class Meta:
        managed = False
        db_table = "items_score"

    def __str__(self):
        return f"ScoreSnapshot<{self.item_id} score={self.score:.2f} #{self.rank}>"
