from django.urls import path
from .views import ItemRatingAPIView

urlpatterns = [
    path("items/<str:locator>/rating/", ItemRatingAPIView.as_view(), name="item-rating"),
]
