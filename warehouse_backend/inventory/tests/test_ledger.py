# inventory/tests/test_ledger.py

from decimal import Decimal
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db.transaction import TransactionManagementError
from django.test import TestCase, TransactionTestCase

from catalog.models import Product, Warehouse
from inventory.exceptions import UnknownProduct, UnknownWarehouse
from inventory.models import StockBalance, StockLedgerEntry
from inventory.services import current_qty, lock_balances, rebuild_balances, record

from .helpers import adjust_stock, build_catalog, put_stock, raw_wh


class LedgerTests(TestCase):
    """
    GUARANTEES:
    - Ledger entries are append-only
    - StockBalance always equals the sum of ledger deltas
    - Unknown codes are rejected before any write
    """

    def setUp(self):
        build_catalog()

    def test_record_updates_balance(self):
        put_stock(raw_wh(), "S", "12.5")
        put_stock(raw_wh(), "S", "7.5")

        self.assertEqual(current_qty(raw_wh(), "S"), Decimal("20"))

    def test_current_qty_defaults_to_zero(self):
        self.assertEqual(current_qty(raw_wh(), "P"), Decimal("0"))

    def test_unknown_codes_raise(self):
        with self.assertRaises(UnknownWarehouse) as ctx:
            record(kind="PURCHASE", warehouse_code="NOPE", product_code="S", delta_qty=1)
        self.assertEqual(ctx.exception.details, {"warehouse": "NOPE"})

        with self.assertRaises(UnknownProduct):
            record(kind="PURCHASE", warehouse_code=raw_wh(), product_code="NOPE", delta_qty=1)

        self.assertEqual(StockLedgerEntry.objects.count(), 0)

    def test_zero_delta_and_unknown_kind_are_rejected(self):
        with self.assertRaises(ValidationError):
            record(kind="PURCHASE", warehouse_code=raw_wh(), product_code="S", delta_qty=0)
        with self.assertRaises(ValidationError):
            record(kind="ADJUSTMENT", warehouse_code=raw_wh(), product_code="S", delta_qty=1)

    def test_entries_cannot_be_updated(self):
        entry = put_stock(raw_wh(), "S", 10)
        entry.delta_qty = Decimal("99")

        with self.assertRaises(ValidationError):
            entry.save()

    def test_entries_cannot_be_deleted(self):
        entry = put_stock(raw_wh(), "S", 10)

        with self.assertRaises(ValidationError):
            entry.delete()

        self.assertTrue(StockLedgerEntry.objects.filter(pk=entry.pk).exists())

    def test_actor_is_recorded(self):
        user = get_user_model().objects.create_user(username="supply1", password="secret123", role="supply")
        entry = record(kind="PURCHASE", warehouse_code=raw_wh(), product_code="S", delta_qty=1, user=user)

        self.assertEqual(entry.actor, user)

    def test_lock_balances_creates_missing_rows(self):
        warehouse = Warehouse.objects.get(code=raw_wh())
        product = Product.objects.get(code="P")

        locked = lock_balances([(warehouse, product), (warehouse, product)])

        self.assertEqual(len(locked), 1)
        self.assertEqual(locked[(warehouse.pk, product.pk)].qty, Decimal("0"))


class RebuildBalancesTests(TestCase):
    def setUp(self):
        build_catalog()
        put_stock(raw_wh(), "S", 100)
        adjust_stock(raw_wh(), "S", -40)
        put_stock(raw_wh(), "P", 10)

    def _corrupt(self, code, qty):
        StockBalance.objects.filter(product__code=code).update(qty=qty)

    def test_no_drift_when_consistent(self):
        self.assertEqual(rebuild_balances(dry_run=True), [])

    def test_rebuild_restores_ledger_totals(self):
        self._corrupt("S", Decimal("5"))

        drift = rebuild_balances()

        self.assertEqual(len(drift), 1)
        self.assertEqual(drift[0].product_code, "S")
        self.assertEqual(drift[0].balance, Decimal("5"))
        self.assertEqual(drift[0].ledger, Decimal("60"))
        self.assertEqual(current_qty(raw_wh(), "S"), Decimal("60"))

    def test_dry_run_does_not_write(self):
        self._corrupt("P", Decimal("1"))

        drift = rebuild_balances(dry_run=True)

        self.assertEqual(len(drift), 1)
        self.assertEqual(current_qty(raw_wh(), "P"), Decimal("1"))

    def test_missing_balance_row_is_recreated(self):
        StockBalance.objects.filter(product__code="P").delete()

        rebuild_balances()

        self.assertEqual(current_qty(raw_wh(), "P"), Decimal("10"))

    def test_command_check_fails_on_drift(self):
        self._corrupt("S", Decimal("0"))

        with self.assertRaises(CommandError):
            call_command("rebuild_balances", "--check", stdout=StringIO())

        self.assertEqual(current_qty(raw_wh(), "S"), Decimal("0"))

    def test_command_rebuilds(self):
        self._corrupt("S", Decimal("0"))
        out = StringIO()

        call_command("rebuild_balances", stdout=out)

        self.assertIn("Rebuilt 1 balance(s)", out.getvalue())
        self.assertEqual(current_qty(raw_wh(), "S"), Decimal("60"))


class LockOutsideTransactionTests(TransactionTestCase):
    def test_lock_balances_requires_transaction(self):
        build_catalog()
        warehouse = Warehouse.objects.get(code=raw_wh())
        product = Product.objects.get(code="S")

        with self.assertRaises(TransactionManagementError):
            lock_balances([(warehouse, product)])
