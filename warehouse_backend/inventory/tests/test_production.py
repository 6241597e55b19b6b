# inventory/tests/test_production.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase

from catalog.models import Formula, Product
from inventory.exceptions import (
    FormulaNotDefined,
    InsufficientContainers,
    InsufficientRawMaterial,
    UnknownProduct,
)
from inventory.models import StockBalance, StockLedgerEntry
from inventory.services import run_production

from .helpers import adjust_stock, balance, build_catalog, fg_wh, gal_wh, put_stock, raw_wh


class ProductionRunTests(TestCase):
    """
    Production converts raw materials + empty containers into finished goods.

    GUARANTEES:
    - Consumption = kg_per_liter * count * size for every formula row
    - Packaged and liquid stock rise together
    - Any shortfall rejects the whole run with no ledger writes
    """

    def setUp(self):
        build_catalog()
        put_stock(raw_wh(), "P", 1000)
        put_stock(raw_wh(), "S", 1000)
        put_stock(gal_wh(), "GALLON_10", 50)

    def test_successful_run_moves_all_stock(self):
        result = run_production(family_code="TP", container_size=10, count=20)

        self.assertEqual(result["liters"], 200)
        self.assertEqual(result["count"], 20)

        self.assertEqual(balance(raw_wh(), "P"), Decimal("894"))
        self.assertEqual(balance(raw_wh(), "S"), Decimal("939.2"))
        self.assertEqual(balance(gal_wh(), "GALLON_10"), Decimal("30"))
        self.assertEqual(balance(fg_wh(), "TP_PACK_10"), Decimal("20"))
        self.assertEqual(balance(fg_wh(), "TP_LITERS"), Decimal("200"))

    def test_result_lists_consumed_raw_materials_in_code_order(self):
        result = run_production(family_code="TP", container_size=10, count=20)

        consumed = [(c["raw_material"], c["kg"]) for c in result["consumed"]]
        self.assertEqual(consumed, [("P", Decimal("106")), ("S", Decimal("60.8"))])

    def test_run_writes_production_entries_only(self):
        before = StockLedgerEntry.objects.count()

        run_production(family_code="TP", container_size=10, count=20)

        self.assertEqual(StockLedgerEntry.objects.count(), before + 5)
        self.assertEqual(
            StockLedgerEntry.objects.filter(kind=StockLedgerEntry.Kind.PRODUCTION).count(), 5
        )

    def test_raw_material_shortfall_reports_need_and_available(self):
        adjust_stock(raw_wh(), "P", -950)
        entries_before = StockLedgerEntry.objects.count()

        with self.assertRaises(InsufficientRawMaterial) as ctx:
            run_production(family_code="TP", container_size=10, count=20)

        self.assertEqual(ctx.exception.details["raw_material"], "P")
        self.assertEqual(ctx.exception.details["needKg"], 106)
        self.assertEqual(ctx.exception.details["availKg"], 50)

        self.assertEqual(StockLedgerEntry.objects.count(), entries_before)
        self.assertEqual(balance(raw_wh(), "S"), Decimal("1000"))
        self.assertEqual(balance(gal_wh(), "GALLON_10"), Decimal("50"))
        self.assertEqual(balance(fg_wh(), "TP_PACK_10"), Decimal("0"))

    def test_container_shortfall_rejects_run(self):
        entries_before = StockLedgerEntry.objects.count()

        with self.assertRaises(InsufficientContainers) as ctx:
            run_production(family_code="TP", container_size=10, count=51)

        self.assertEqual(ctx.exception.details["size"], 10)
        self.assertEqual(ctx.exception.details["need"], 51)
        self.assertEqual(ctx.exception.details["available"], 50)
        self.assertEqual(StockLedgerEntry.objects.count(), entries_before)
        self.assertEqual(balance(raw_wh(), "P"), Decimal("1000"))

    def test_raw_materials_are_checked_before_containers(self):
        adjust_stock(raw_wh(), "S", -1000)

        with self.assertRaises(InsufficientRawMaterial):
            run_production(family_code="TP", container_size=10, count=51)

    def test_family_without_formula_is_rejected(self):
        Formula.objects.filter(family_code="TP").delete()

        with self.assertRaises(FormulaNotDefined) as ctx:
            run_production(family_code="TP", container_size=10, count=1)

        self.assertEqual(ctx.exception.details["family"], "TP")

    def test_unknown_family_with_formula_but_no_products(self):
        Formula.objects.create(
            family_code="ZZ",
            raw_material=Product.objects.get(code="P"),
            kg_per_liter=Decimal("0.1"),
        )

        with self.assertRaises(UnknownProduct):
            run_production(family_code="ZZ", container_size=10, count=1)

    def test_invalid_inputs_are_rejected(self):
        for kwargs in (
            {"family_code": "TP", "container_size": 7, "count": 1},
            {"family_code": "TP", "container_size": 10, "count": 0},
            {"family_code": "TP", "container_size": 10, "count": -3},
            {"family_code": "", "container_size": 10, "count": 1},
        ):
            with self.subTest(**kwargs):
                with self.assertRaises(ValidationError):
                    run_production(**kwargs)

    def test_quantity_is_conserved(self):
        """
        Every kg of raw material consumed matches the formula for the liters produced.
        """
        put_stock(gal_wh(), "GALLON_5", 4)
        put_stock(gal_wh(), "GALLON_20", 3)
        run_production(family_code="TP", container_size=5, count=4)
        run_production(family_code="TP", container_size=20, count=3)

        liters = balance(fg_wh(), "TP_LITERS")
        self.assertEqual(liters, Decimal("80"))

        for code, ratio in (("P", Decimal("0.53")), ("S", Decimal("0.304"))):
            consumed = Decimal("1000") - balance(raw_wh(), code)
            self.assertEqual(consumed, ratio * liters)

    def test_balances_match_ledger_after_runs(self):
        run_production(family_code="TP", container_size=10, count=5)
        run_production(family_code="TP", container_size=10, count=5)

        for b in StockBalance.objects.all():
            total = sum(
                (e.delta_qty for e in StockLedgerEntry.objects.filter(warehouse=b.warehouse, product=b.product)),
                Decimal("0"),
            )
            self.assertEqual(b.qty, total)
