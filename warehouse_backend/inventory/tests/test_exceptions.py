# inventory/tests/test_exceptions.py

from decimal import Decimal

from django.test import SimpleTestCase

from catalog import exceptions as catalog_exceptions
from inventory.api.errors import status_for
from inventory.exceptions import (
    DomainError,
    InsufficientLiquidStock,
    InsufficientRawMaterial,
    InventoryError,
    UnknownProduct,
    UnknownWarehouse,
)


class ErrorDetailsTests(SimpleTestCase):
    """
    GUARANTEES:
    - Whole quantities render as ints
    - Fractional quantities keep every digit
    """

    def test_whole_quantities_render_as_int(self):
        exc = InsufficientRawMaterial("P", Decimal("106.00"), Decimal("50.0000"))

        self.assertEqual(exc.details, {"raw_material": "P", "needKg": 106, "availKg": 50})

    def test_fractional_quantities_keep_full_precision(self):
        exc = InsufficientRawMaterial("P", Decimal("123456789012.3457"), Decimal("60.8000"))

        self.assertEqual(exc.details["needKg"], "123456789012.3457")
        self.assertEqual(exc.details["availKg"], "60.8")


class ErrorHierarchyTests(SimpleTestCase):
    def test_catalog_errors_are_re_exported(self):
        self.assertIs(UnknownProduct, catalog_exceptions.UnknownProduct)
        self.assertIs(UnknownWarehouse, catalog_exceptions.UnknownWarehouse)

    def test_all_errors_share_the_domain_base(self):
        self.assertTrue(issubclass(UnknownProduct, DomainError))
        self.assertTrue(issubclass(InventoryError, DomainError))
        self.assertFalse(issubclass(UnknownProduct, InventoryError))

    def test_status_mapping(self):
        self.assertEqual(status_for(UnknownWarehouse("X")), 404)
        self.assertEqual(status_for(InsufficientLiquidStock("TP_LITERS", 10, 5)), 409)
        self.assertEqual(status_for(InsufficientRawMaterial("P", 1, 0)), 400)
