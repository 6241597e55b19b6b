# inventory/tests/test_sales.py

from decimal import Decimal

from django.test import TestCase

from inventory.exceptions import (
    InsufficientLiquidStock,
    InsufficientPackagedStock,
    UnknownProduct,
)
from inventory.models import StockLedgerEntry
from inventory.services import record_sale, run_production

from .helpers import adjust_stock, balance, build_catalog, fg_wh, gal_wh, put_stock, raw_wh


class SaleTests(TestCase):
    """
    Sales remove whole packaged units and the matching liters together.
    """

    def setUp(self):
        build_catalog()
        put_stock(raw_wh(), "P", 1000)
        put_stock(raw_wh(), "S", 1000)
        put_stock(gal_wh(), "GALLON_10", 50)
        run_production(family_code="TP", container_size=10, count=10)

    def test_sale_reduces_packaged_and_liquid_in_lockstep(self):
        result = record_sale(family_code="TP", container_size=10, count=4)

        self.assertEqual(result, {"family_code": "TP", "container_size": 10, "count": 4, "liters": 40})
        self.assertEqual(balance(fg_wh(), "TP_PACK_10"), Decimal("6"))
        self.assertEqual(balance(fg_wh(), "TP_LITERS"), Decimal("60"))

    def test_sale_entries_are_negative_sale_entries(self):
        record_sale(family_code="TP", container_size=10, count=4)

        deltas = sorted(
            StockLedgerEntry.objects.filter(kind=StockLedgerEntry.Kind.SALE).values_list(
                "product__code", "delta_qty"
            )
        )
        self.assertEqual(deltas, [("TP_LITERS", Decimal("-40")), ("TP_PACK_10", Decimal("-4"))])

    def test_selling_everything_leaves_zero(self):
        record_sale(family_code="TP", container_size=10, count=10)

        self.assertEqual(balance(fg_wh(), "TP_PACK_10"), Decimal("0"))
        self.assertEqual(balance(fg_wh(), "TP_LITERS"), Decimal("0"))

    def test_insufficient_packaged_stock(self):
        entries_before = StockLedgerEntry.objects.count()

        with self.assertRaises(InsufficientPackagedStock) as ctx:
            record_sale(family_code="TP", container_size=10, count=15)

        self.assertEqual(ctx.exception.details["need"], 15)
        self.assertEqual(ctx.exception.details["available"], 10)
        self.assertEqual(StockLedgerEntry.objects.count(), entries_before)

    def test_other_container_size_has_separate_stock(self):
        with self.assertRaises(InsufficientPackagedStock):
            record_sale(family_code="TP", container_size=5, count=1)

    def test_liquid_breach_is_reported_and_nothing_written(self):
        adjust_stock(fg_wh(), "TP_LITERS", -70)
        entries_before = StockLedgerEntry.objects.count()

        with self.assertLogs("inventory.services.sales", level="ERROR"):
            with self.assertRaises(InsufficientLiquidStock) as ctx:
                record_sale(family_code="TP", container_size=10, count=4)

        self.assertEqual(ctx.exception.details["need"], 40)
        self.assertEqual(ctx.exception.details["available"], 30)
        self.assertEqual(StockLedgerEntry.objects.count(), entries_before)
        self.assertEqual(balance(fg_wh(), "TP_PACK_10"), Decimal("10"))

    def test_unknown_family_is_rejected(self):
        with self.assertRaises(UnknownProduct):
            record_sale(family_code="XX", container_size=10, count=1)
