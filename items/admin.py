from django.contrib import admin
from .models import Item
from reviews.models import Review


class ReviewInline(admin.TabularInline):
    """
    Bewertungen eines Items direkt im Item-Form (nur lesend).
    """
    model = Review
    extra = 0
    fields = ("user", "rating", "date")
    readonly_fields = fields
    can_delete = False
    show_change_link = True

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    """
    Item-Verwaltung:
    - Score, Anzahl Bewertungen und Rang aus der items_score View
    - Suche über Locator und Titel
    - performant via select_related auf den Snapshot
    """
    inlines = [ReviewInline]

    list_display = ("id", "locator", "title", "score_display", "review_count_display", "rank_display")
    list_select_related = ("snapshot",)
    search_fields = ("locator", "title")
    ordering = ("id",)
    readonly_fields = ("score_display", "review_count_display", "rank_display")

    def _snapshot(self, obj):
        return getattr(obj, "snapshot", None)

    def score_display(self, obj):
        snap = self._snapshot(obj)
        return f"{snap.score:.2f}" if snap else "-"
    score_display.short_description = "score"
    score_display.admin_order_field = "snapshot__score"

    def review_count_display(self, obj):
        snap = self._snapshot(obj)
        return snap.review_count if snap else "-"
    review_count_display.short_description = "reviews"
    review_count_display.admin_order_field = "snapshot__review_count"

    def rank_display(self, obj):
        snap = self._snapshot(obj)
        return snap.rank if snap else "-"
    rank_display.short_description = "rank"
    rank_display.admin_order_field = "snapshot__rank"
