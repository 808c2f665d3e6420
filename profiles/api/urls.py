from django.urls import path
from .views import UserDetailAPIView, UserListAPIView

urlpatterns = [
    path("users/", UserListAPIView.as_view(), name="user-list"),
    path("users/<str:username>/", UserDetailAPIView.as_view(), name="user-detail"),
]
