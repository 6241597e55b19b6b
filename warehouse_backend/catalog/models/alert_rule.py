# catalog/models/alert_rule.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from .product import Product
from .warehouse import Warehouse


class AlertRule(models.Model):
    """Minimum stock threshold for one (warehouse, product) pair."""

    warehouse = models.ForeignKey(
        Warehouse, on_delete=models.CASCADE, related_name="alert_rules"
    )
    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="alert_rules"
    )

    min_qty = models.DecimalField(max_digits=16, decimal_places=4)

    class Meta:
        ordering = ["warehouse__code", "product__code"]
        constraints = [
            models.UniqueConstraint(
                fields=["warehouse", "product"],
                name="uniq_alert_rule_warehouse_product",
            ),
        ]

    def __str__(self):
        return f"{self.warehouse_id}/{self.product_id} < {self.min_qty}"

    def clean(self):
        if self.min_qty is None or Decimal(self.min_qty) < 0:
            raise ValidationError("min_qty cannot be negative")
