"""Items API serializers.

Items are always rendered together with their score snapshot, so the output
serializer expects instances loaded through `items.queries`.
"""

from rest_framework import serializers

from common.media import ITEM_IMAGES, image_url
from items.models import Item


class ItemSerializer(serializers.ModelSerializer):
    """Read serializer: item fields plus score, rank and popularity."""

    score = serializers.FloatField(source="snapshot.score", read_only=True)
    review_count = serializers.IntegerField(source="snapshot.review_count", read_only=True)
    rank = serializers.IntegerField(source="snapshot.rank", read_only=True)
    popularity = serializers.IntegerField(source="snapshot.popularity", read_only=True)
    image = serializers.SerializerMethodField()

    class Meta:
        model = Item
        fields = [
            "locator",
            "title",
            "description",
            "score",
            "review_count",
            "rank",
            "popularity",
            "image",
        ]
        read_only_fields = fields

    def get_image(self, obj):
        url = image_url(ITEM_IMAGES, obj.locator)
        request = self.context.get("request")
        if url and request is not None:
            return request.build_absolute_uri(url)
        return url


class ItemWriteSerializer(serializers.Serializer):
    """Input for creating (all fields) or patching (any subset) an item."""

    locator = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    image = serializers.FileField(required=False, allow_empty_file=True)
