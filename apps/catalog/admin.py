from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Catalog management."""

    list_display = ['id', 'name', 'price', 'category', 'icon', 'updated_at']
    list_filter = ['category']
    list_editable = ['price']
    search_fields = ['name']
    ordering = ['id']
    readonly_fields = ['created_at', 'updated_at']
