# inventory/management/commands/seed_catalog.py

"""
Seed the fixed catalog: warehouses, products, formulas, alert rules.

Idempotent: rows are upserted by code. Opening stock is written through the
inventory ledger (PURCHASE entries) and only for pairs that have no ledger
history yet, so re-running never double counts.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.codes import CONTAINER_SIZES, container_code, liquid_code, packaged_code
from catalog.models import AlertRule, Formula, Product, Warehouse
from inventory.models import StockLedgerEntry
from inventory.services.ledger import append_entry

RAW_MATERIALS = ["S", "P", "U", "C", "N"]

FAMILIES = ["TP", "TC", "TN", "MN", "MC10", "MC5", "MP11", "MP21"]

FORMULAS = [
    ("TP", "P", "0.53"), ("TP", "S", "0.304"),
    ("TC", "C", "0.15"), ("TC", "S", "0.27"),
    ("TN", "C", "0.2"), ("TN", "S", "0.34"), ("TN", "U", "0.4"),
    ("MN", "C", "0.11"), ("MN", "S", "0.18"), ("MN", "U", "0.22"),
    ("MC10", "C", "0.25"), ("MC10", "S", "0.25"),
    ("MC5", "C", "0.115"), ("MC5", "S", "0.196"),
    ("MP11", "P", "0.184"), ("MP11", "S", "0.184"),
    ("MP21", "P", "0.428"), ("MP21", "S", "0.428"),
]

RAW_MIN_QTY = Decimal("10000")
CONTAINER_MIN_QTY = Decimal("2000")


class Command(BaseCommand):
    help = "Seed warehouses, products, formulas, alert rules and opening stock"

    def add_arguments(self, parser):
        parser.add_argument(
            "--no-opening-stock",
            action="store_true",
            help="Skip the opening stock ledger entries.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding catalog..."))

        codes = settings.WAREHOUSE_CODES

        # -------------------------------
        # WAREHOUSES
        # -------------------------------
        raw_wh = self._warehouse(codes["raw"], "Raw Materials Warehouse")
        gal_wh = self._warehouse(codes["containers"], "Empty Containers Warehouse")
        self._warehouse(codes["finished_goods"], "Finished Goods Warehouse")

        # -------------------------------
        # PRODUCTS
        # -------------------------------
        raw_products = {
            code: self._product(code, code, Product.Kind.RAW_MATERIAL, Product.Unit.KG)
            for code in RAW_MATERIALS
        }

        containers = [
            self._product(
                container_code(size), f"Empty {size}L gallon",
                Product.Kind.EMPTY_CONTAINER, Product.Unit.COUNT,
            )
            for size in CONTAINER_SIZES
        ]

        for family in FAMILIES:
            for size in CONTAINER_SIZES:
                self._product(
                    packaged_code(family, size), f"{family} {size}L",
                    Product.Kind.PACKAGED_PRODUCT, Product.Unit.COUNT,
                )
            self._product(
                liquid_code(family), f"{family} (liters)",
                Product.Kind.LIQUID_PRODUCT, Product.Unit.LITER,
            )

        # -------------------------------
        # FORMULAS
        # -------------------------------
        for family, raw_code, kg_per_liter in FORMULAS:
            Formula.objects.update_or_create(
                family_code=family,
                raw_material=raw_products[raw_code],
                defaults={"kg_per_liter": Decimal(kg_per_liter)},
            )

        # -------------------------------
        # ALERT RULES
        # -------------------------------
        thresholds = [(raw_wh, p, RAW_MIN_QTY) for p in raw_products.values()]
        thresholds += [(gal_wh, p, CONTAINER_MIN_QTY) for p in containers]

        for warehouse, product, min_qty in thresholds:
            AlertRule.objects.update_or_create(
                warehouse=warehouse, product=product, defaults={"min_qty": min_qty}
            )

        # -------------------------------
        # OPENING STOCK (through the ledger)
        # -------------------------------
        if not options["no_opening_stock"]:
            opened = 0
            for warehouse, product, qty in thresholds:
                if StockLedgerEntry.objects.filter(warehouse=warehouse, product=product).exists():
                    continue
                append_entry(
                    kind=StockLedgerEntry.Kind.PURCHASE,
                    warehouse=warehouse,
                    product=product,
                    delta_qty=qty,
                )
                opened += 1
            self.stdout.write(f"Opening stock entries written: {opened}")

        self.stdout.write(self.style.SUCCESS("Catalog seeded successfully."))

    def _warehouse(self, code, name) -> Warehouse:
        obj, _ = Warehouse.objects.update_or_create(code=code, defaults={"name": name})
        return obj

    def _product(self, code, name, kind, unit) -> Product:
        obj, _ = Product.objects.update_or_create(
            code=code, defaults={"name": name, "kind": kind, "unit": unit}
        )
        return obj
