from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

User = get_user_model()

# Falls User bereits registriert ist, zuerst deregistrieren (idempotent).
try:
    admin.site.unregister(User)
except admin.sites.NotRegistered:
    pass


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    """
    User-Liste inkl. ID, Avatar-Status und Admin-Flags.
    """
    list_display = (
        "id",
        "username",
        "has_avatar_display",
        "is_staff",
        "is_active",
        "date_joined",
        "last_login",
    )
    list_select_related = ("profile",)
    ordering = ("id",)
    search_fields = ("username",)
    list_filter = ("is_staff", "is_active", "profile__has_avatar")

    def has_avatar_display(self, obj):
        prof = getattr(obj, "profile", None)
        return bool(getattr(prof, "has_avatar", False))
    has_avatar_display.short_description = "avatar"
    has_avatar_display.boolean = True
    has_avatar_display.admin_order_field = "profile__has_avatar"
