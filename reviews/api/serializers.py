"""Reviews API serializers.

Rating history entries come in two shapes: on an item page each rating shows
its author, on a user page it shows the rated item and its current score.
"""

from rest_framework import serializers

from reviews.models import Review


class ItemRatingSerializer(serializers.ModelSerializer):
    """One rating of an item, with the rater's display data."""

    username = serializers.CharField(source="user.username", read_only=True)
    avatar_hue = serializers.IntegerField(source="user.profile.avatar_hue", read_only=True)
    has_avatar = serializers.BooleanField(source="user.profile.has_avatar", read_only=True)

    class Meta:
        model = Review
        fields = ["username", "avatar_hue", "has_avatar", "rating", "date"]
        read_only_fields = fields


class UserRatingSerializer(serializers.ModelSerializer):
    """One rating by a user, with the rated item and its score."""

    locator = serializers.CharField(source="item.locator", read_only=True)
    title = serializers.CharField(source="item.title", read_only=True)
    score = serializers.FloatField(source="item.snapshot.score", read_only=True)

    class Meta:
        model = Review
        fields = ["locator", "title", "score", "rating", "date"]
        read_only_fields = fields


class RateSerializer(serializers.Serializer):
    """Input for rating an item; out-of-range values are clamped, not rejected."""

    rating = serializers.IntegerField()
