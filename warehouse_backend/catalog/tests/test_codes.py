# catalog/tests/test_codes.py

from django.test import SimpleTestCase

from catalog.codes import (
    container_code,
    liquid_code,
    packaged_code,
    parse_container_code,
    parse_finished_code,
)


class ProductCodeTests(SimpleTestCase):
    def test_builders(self):
        self.assertEqual(container_code(10), "GALLON_10")
        self.assertEqual(packaged_code("TP", 5), "TP_PACK_5")
        self.assertEqual(liquid_code("MC10"), "MC10_LITERS")

    def test_parse_finished_code(self):
        self.assertEqual(parse_finished_code("TP_PACK_20"), ("TP", 20))
        self.assertEqual(parse_finished_code("MC10_PACK_5"), ("MC10", 5))
        self.assertEqual(parse_finished_code("MP21_LITERS"), ("MP21", None))

    def test_parse_finished_code_rejects_other_codes(self):
        for code in ("TP_PACK_7", "TP", "GALLON_10", "tp_LITERS", "", None):
            with self.subTest(code=code):
                self.assertIsNone(parse_finished_code(code))

    def test_parse_container_code(self):
        self.assertEqual(parse_container_code("GALLON_5"), 5)
        self.assertIsNone(parse_container_code("GALLON_15"))
        self.assertIsNone(parse_container_code("TP_PACK_5"))
