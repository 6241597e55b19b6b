# inventory/tests/test_seed_catalog.py

from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from catalog.models import AlertRule, Formula, Product, Warehouse
from catalog.services.lookups import fixed_warehouses
from inventory.models import StockLedgerEntry
from inventory.services import current_qty


class SeedCatalogTests(TestCase):
    def _seed(self, *args):
        call_command("seed_catalog", *args, stdout=StringIO())

    def test_seed_builds_full_catalog(self):
        self._seed()

        self.assertEqual(Warehouse.objects.count(), 3)
        # 5 raw + 3 containers + 8 families * (3 packs + liters)
        self.assertEqual(Product.objects.count(), 5 + 3 + 8 * 4)
        self.assertEqual(Formula.objects.count(), 18)
        self.assertEqual(AlertRule.objects.count(), 8)

        raw = fixed_warehouses().raw.code
        self.assertEqual(current_qty(raw, "S"), Decimal("10000"))

    def test_seed_is_idempotent(self):
        self._seed()
        self._seed()

        self.assertEqual(Product.objects.count(), 40)
        self.assertEqual(Formula.objects.count(), 18)
        self.assertEqual(StockLedgerEntry.objects.count(), 8)

    def test_seed_without_opening_stock(self):
        self._seed("--no-opening-stock")

        self.assertEqual(StockLedgerEntry.objects.count(), 0)
