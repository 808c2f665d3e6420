"""Reviews API views.

POST sets (or replaces) the caller's rating of an item, DELETE removes it.
There is no review id in the URL: a user has at most one rating per item.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from reviews import services
from .permissions import CanRate
from .serializers import RateSerializer


class ItemRatingAPIView(APIView):
    """POST/DELETE /api/items/{locator}/rating/ for the authenticated user."""

    permission_classes = [CanRate]

    def post(self, request, locator, *args, **kwargs):
        serializer = RateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rating = services.rate(locator, request.user, serializer.validated_data["rating"])
        return Response({"rating": rating}, status=status.HTTP_200_OK)

    def delete(self, request, locator, *args, **kwargs):
        services.unrate(locator, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
