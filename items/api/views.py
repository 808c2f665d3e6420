"""Items API views.

List and add items on the collection route; retrieve, patch and remove on the
locator route. The detail view also shows the item's rating history and the
caller's own rating.
"""

from django.http import Http404
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from common.api.params import parse_page, parse_search
from common.api.serializers import page_data
from common.media import ITEM_IMAGES, apply_file_intents, save_image, validate_image
from items import queries, services
from reviews.api.serializers import ItemRatingSerializer
from reviews.queries import get_rating, item_rating_history
from .permissions import CanManageItemsOrReadOnly
from .serializers import ItemSerializer, ItemWriteSerializer


def _item_or_404(locator):
    item = queries.get_item(locator)
    if item is None:
        raise Http404("No item with this locator.")
    return item


class ItemListCreateAPIView(APIView):
    """GET: ranked, searchable page of items. POST: add an item (admin only)."""

    permission_classes = [CanManageItemsOrReadOnly]
    parser_classes = (JSONParser, FormParser, MultiPartParser)

    def get(self, request, *args, **kwargs):
        page = queries.list_items(
            parse_page(request.query_params), parse_search(request.query_params)
        )
        context = {"request": request}
        return Response({"page": page_data(page, ItemSerializer, context)})

    def post(self, request, *args, **kwargs):
        serializer = ItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        image = data.get("image")
        if image is not None:
            validate_image(image)

        item = services.add_item(
            data.get("locator", ""), data.get("title", ""), data.get("description", "")
        )
        if image is not None:
            save_image(ITEM_IMAGES, item.locator, image)

        item = queries.get_item(item.locator)
        return Response(
            ItemSerializer(item, context={"request": request}).data,
            status=status.HTTP_201_CREATED,
        )


class ItemDetailAPIView(APIView):
    """GET: item with ratings. PATCH/DELETE: admin-only edit and removal."""

    permission_classes = [CanManageItemsOrReadOnly]
    parser_classes = (JSONParser, FormParser, MultiPartParser)

    def get(self, request, locator, *args, **kwargs):
        item = _item_or_404(locator)
        context = {"request": request}
        ratings = item_rating_history(locator, parse_page(request.query_params))
        return Response(
            {
                "item": ItemSerializer(item, context=context).data,
                "ratings": page_data(ratings, ItemRatingSerializer, context),
                "my_rating": get_rating(locator, request.user),
            }
        )

    def patch(self, request, locator, *args, **kwargs):
        _item_or_404(locator)
        serializer = ItemWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        image = data.get("image")
        if image is not None:
            validate_image(image)

        update = services.ItemUpdate(
            locator=data.get("locator"),
            title=data.get("title"),
            description=data.get("description"),
        )
        item, intents = services.edit_item(locator, update)
        if item is None:
            raise Http404("No item with this locator.")
        apply_file_intents(intents)
        if image is not None:
            save_image(ITEM_IMAGES, item.locator, image)

        item = queries.get_item(item.locator)
        return Response(ItemSerializer(item, context={"request": request}).data)

    def delete(self, request, locator, *args, **kwargs):
        _item_or_404(locator)
        apply_file_intents(services.remove_item(locator))
        return Response(status=status.HTTP_204_NO_CONTENT)
