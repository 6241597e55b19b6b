# users/admin.py

"""
Staff accounts in Django Admin.

Role is the only thing that grants API capabilities; is_staff / is_superuser
only matter for admin access itself.
"""

from __future__ import annotations

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from permissions.roles import capabilities_for

User = get_user_model()


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    ordering = ("username",)
    list_display = ("username", "name", "role", "capabilities", "is_active", "is_staff")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("username", "name", "email")
    readonly_fields = ("capabilities", "last_login", "created_at", "updated_at")

    fieldsets = (
        (None, {"fields": ("username", "password")}),
        ("Profile", {"fields": ("name", "email", "role", "capabilities")}),
        ("Access", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Activity", {"fields": ("last_login", "created_at", "updated_at")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("username", "name", "role", "password1", "password2"),
            },
        ),
    )

    @admin.display(description="Capabilities")
    def capabilities(self, obj):
        return ", ".join(sorted(capabilities_for(obj))) or "-"
