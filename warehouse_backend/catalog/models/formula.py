# catalog/models/formula.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from catalog.codes import FAMILY_CODE_RE

from .product import Product


class Formula(models.Model):
    """
    Kilograms of one raw material consumed per liter of a product family.

    A family with no formula rows cannot be produced.
    """

    family_code = models.CharField(max_length=32, db_index=True)

    raw_material = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="formulas",
    )

    kg_per_liter = models.DecimalField(max_digits=10, decimal_places=4)

    class Meta:
        ordering = ["family_code", "raw_material__code"]
        constraints = [
            models.UniqueConstraint(
                fields=["family_code", "raw_material"],
                name="uniq_formula_family_raw_material",
            ),
        ]

    def __str__(self):
        raw_code = getattr(self.raw_material, "code", "?")
        return f"{self.family_code}: {raw_code} {self.kg_per_liter} kg/L"

    def clean(self):
        if not FAMILY_CODE_RE.match(self.family_code or ""):
            raise ValidationError("family_code must be upper-case letters and digits")

        if self.kg_per_liter is None or Decimal(self.kg_per_liter) <= 0:
            raise ValidationError("kg_per_liter must be greater than zero")

        if self.raw_material_id:
            kind = (
                Product.objects.filter(id=self.raw_material_id)
                .values_list("kind", flat=True)
                .first()
            )
            if kind != Product.Kind.RAW_MATERIAL:
                raise ValidationError("Formula rows must reference a raw material")

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
