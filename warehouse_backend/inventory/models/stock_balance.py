# inventory/models/stock_balance.py

from decimal import Decimal

from django.db import models

from catalog.models import Product, Warehouse


class StockBalance(models.Model):
    """
    Materialized running total of the ledger for one (warehouse, product).

    RULES:
    - qty == SUM(StockLedgerEntry.delta_qty) for the pair, always
    - Only inventory.services.ledger writes here
    - Rebuildable from the ledger alone (rebuild_balances)
    """

    warehouse = models.ForeignKey(
        Warehouse, on_delete=models.PROTECT, related_name="balances"
    )
    product = models.ForeignKey(
        Product, on_delete=models.PROTECT, related_name="balances"
    )

    qty = models.DecimalField(max_digits=16, decimal_places=4, default=Decimal("0"))

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["warehouse__code", "product__code"]
        constraints = [
            models.UniqueConstraint(
                fields=["warehouse", "product"],
                name="uniq_stock_balance_warehouse_product",
            ),
        ]

    def __str__(self):
        return f"{self.warehouse_id}/{self.product_id}: {self.qty}"
