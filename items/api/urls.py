from django.urls import path
from .views import ItemDetailAPIView, ItemListCreateAPIView

urlpatterns = [
    path("items/", ItemListCreateAPIView.as_view(), name="item-list"),
    path("items/<str:locator>/", ItemDetailAPIView.as_view(), name="item-detail"),
]
