from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Registered office members. PINs are managed through the API."""

    list_display = ['id', 'name', 'must_reset_pin', 'created_at']
    list_filter = ['must_reset_pin']
    search_fields = ['name']
    ordering = ['id']
    exclude = ['pin']
    readonly_fields = ['must_reset_pin', 'created_at']
