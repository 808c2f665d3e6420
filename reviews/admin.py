from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """
    Bewertungs-Liste: Item, User, Rating, Datum.
    """
    list_display = ("id", "item", "user", "rating", "date")
    list_select_related = ("item", "user")
    list_filter = ("rating", "date")
    date_hierarchy = "date"
    ordering = ("-date", "-id")
    search_fields = ("item__locator", "item__title", "user__username")
    autocomplete_fields = ("item", "user")
