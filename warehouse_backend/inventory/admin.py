# inventory/admin.py

"""
Inventory admin (read-only).

- StockLedgerEntry is immutable: no add, change or delete from admin.
- StockBalance is a projection of the ledger: view only.
"""

from django.contrib import admin

from inventory.models import StockBalance, StockLedgerEntry


class ReadOnlyAdmin(admin.ModelAdmin):
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(StockLedgerEntry)
class StockLedgerEntryAdmin(ReadOnlyAdmin):
    list_display = ("created_at", "kind", "warehouse", "product", "delta_qty", "actor")
    list_filter = ("kind", "warehouse")
    search_fields = ("product__code",)
    list_select_related = ("warehouse", "product", "actor")
    date_hierarchy = "created_at"


@admin.register(StockBalance)
class StockBalanceAdmin(ReadOnlyAdmin):
    list_display = ("warehouse", "product", "qty", "updated_at")
    list_filter = ("warehouse",)
    search_fields = ("product__code",)
    list_select_related = ("warehouse", "product")
