from django.contrib import admin
from .models import Transaction, PurchaseHistory


class ReadOnlyLedgerAdmin(admin.ModelAdmin):
    """Ledger rows are written by the purchase service only."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(Transaction)
class TransactionAdmin(ReadOnlyLedgerAdmin):
    """Open tab entries; deleting here settles them."""

    list_display = ['id', 'user_id', 'product_name', 'price', 'category', 'timestamp']
    list_filter = ['category', 'timestamp']
    search_fields = ['product_name']
    date_hierarchy = 'timestamp'
    ordering = ['-timestamp']


@admin.register(PurchaseHistory)
class PurchaseHistoryAdmin(ReadOnlyLedgerAdmin):
    """Permanent purchase archive."""

    list_display = ['id', 'user_name', 'product_name', 'price', 'month', 'timestamp']
    list_filter = ['month']
    search_fields = ['user_name', 'product_name']
    date_hierarchy = 'timestamp'
    ordering = ['-timestamp']

    def has_delete_permission(self, request, obj=None):
        return False
