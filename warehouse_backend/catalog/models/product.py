# catalog/models/product.py

from django.core.exceptions import ValidationError
from django.db import models

from catalog.codes import (
    CONTAINER_CODE_RE,
    FINISHED_CODE_RE,
    parse_container_code,
    parse_finished_code,
)


class Product(models.Model):
    """
    A stockable item.

    STOCK MODEL (IMPORTANT):
    - Product itself does NOT store stock
    - Stock lives in the inventory ledger (StockLedgerEntry)
    - StockBalance is the materialized running total per warehouse

    KIND RULES:
    - RAW_MATERIAL      measured in kg, bought from suppliers
    - EMPTY_CONTAINER   counted, bought from suppliers, coded GALLON_<size>
    - PACKAGED_PRODUCT  counted, produced, coded <FAMILY>_PACK_<size>
    - LIQUID_PRODUCT    liters, produced, coded <FAMILY>_LITERS
    """

    class Kind(models.TextChoices):
        RAW_MATERIAL = "RAW_MATERIAL", "Raw Material"
        EMPTY_CONTAINER = "EMPTY_CONTAINER", "Empty Container"
        PACKAGED_PRODUCT = "PACKAGED_PRODUCT", "Packaged Product"
        LIQUID_PRODUCT = "LIQUID_PRODUCT", "Liquid Product"

    class Unit(models.TextChoices):
        KG = "kg", "Kilogram"
        COUNT = "count", "Count"
        LITER = "liter", "Liter"

    KIND_TO_UNIT = {
        Kind.RAW_MATERIAL: Unit.KG,
        Kind.EMPTY_CONTAINER: Unit.COUNT,
        Kind.PACKAGED_PRODUCT: Unit.COUNT,
        Kind.LIQUID_PRODUCT: Unit.LITER,
    }

    code = models.CharField(max_length=64, unique=True, db_index=True)
    name = models.CharField(max_length=255)

    kind = models.CharField(max_length=20, choices=Kind.choices)
    unit = models.CharField(max_length=10, choices=Unit.choices)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["code"]
        indexes = [
            models.Index(fields=["kind"], name="catalog_product_kind_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.code})"

    def clean(self):
        expected_unit = self.KIND_TO_UNIT.get(self.kind)
        if expected_unit and self.unit != expected_unit:
            raise ValidationError(f"{self.kind} products must use unit={expected_unit}")

        code = self.code or ""

        if self.kind == self.Kind.EMPTY_CONTAINER and not CONTAINER_CODE_RE.match(code):
            raise ValidationError("Empty container codes must look like GALLON_<5|10|20>")

        if self.kind == self.Kind.PACKAGED_PRODUCT:
            parsed = parse_finished_code(code)
            if not parsed or parsed[1] is None:
                raise ValidationError("Packaged product codes must look like <FAMILY>_PACK_<5|10|20>")

        if self.kind == self.Kind.LIQUID_PRODUCT:
            parsed = parse_finished_code(code)
            if not parsed or parsed[1] is not None:
                raise ValidationError("Liquid product codes must look like <FAMILY>_LITERS")

        if self.kind == self.Kind.RAW_MATERIAL and (
            FINISHED_CODE_RE.match(code) or CONTAINER_CODE_RE.match(code)
        ):
            raise ValidationError("Raw material codes cannot use a finished-goods or container pattern")

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)

    @property
    def family_code(self) -> str | None:
        parsed = parse_finished_code(self.code)
        return parsed[0] if parsed else None

    @property
    def container_size(self) -> int | None:
        if self.kind == self.Kind.EMPTY_CONTAINER:
            return parse_container_code(self.code)
        parsed = parse_finished_code(self.code)
        return parsed[1] if parsed else None
