from django.contrib import admin
from .models import Profile

@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """
    Profil-Liste mit eigener ID, zugehöriger User-ID und Avatar-Status.
    """
    list_display = ("id", "user_id_display", "user", "has_avatar", "avatar_hue_display", "created_at")
    list_select_related = ("user",)
    search_fields = ("user__username",)
    list_filter = ("has_avatar", "created_at")
    ordering = ("-created_at", "-id")
    autocomplete_fields = ("user",)
    readonly_fields = ("created_at",)

    def user_id_display(self, obj):
        return obj.user_id
    user_id_display.short_description = "user id"
    user_id_display.admin_order_field = "user__id"

    def avatar_hue_display(self, obj):
        return obj.avatar_hue
    avatar_hue_display.short_description = "avatar hue"
