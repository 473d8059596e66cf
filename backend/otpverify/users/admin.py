from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("id", "username", "email", "phone_number", "is_phone_verified", "is_staff")
    search_fields = ("username", "email", "phone_number")
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Phone", {"fields": ("phone_number", "is_phone_verified")}),
    )
