"""URL configuration for the catalog project."""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("user_auth_app.api.urls")),
    path("api/", include("items.api.urls")),
    path("api/", include("reviews.api.urls")),
    path("api/", include("profiles.api.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
