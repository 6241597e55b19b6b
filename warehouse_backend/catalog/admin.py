# catalog/admin.py

"""
Catalog admin.

Catalog rows are seeded by seed_catalog and read by the inventory engine.
Stock is never edited here: it only changes through ledger entries.
"""

from django.contrib import admin

from catalog.models import AlertRule, Formula, Product, Warehouse


@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "created_at")
    search_fields = ("code", "name")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "kind", "unit")
    list_filter = ("kind", "unit")
    search_fields = ("code", "name")


@admin.register(Formula)
class FormulaAdmin(admin.ModelAdmin):
    list_display = ("family_code", "raw_material", "kg_per_liter")
    list_filter = ("family_code",)
    list_select_related = ("raw_material",)


@admin.register(AlertRule)
class AlertRuleAdmin(admin.ModelAdmin):
    list_display = ("warehouse", "product", "min_qty")
    list_filter = ("warehouse",)
    list_select_related = ("warehouse", "product")
