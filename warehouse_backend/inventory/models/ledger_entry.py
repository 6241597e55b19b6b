# inventory/models/ledger_entry.py

"""
CANONICAL INVENTORY LEDGER

Immutable stock ledger entry.

GUARANTEES:
- Append-only (no updates, no deletes)
- Created ONCE, never edited
- delta_qty is signed: negative consumes stock, positive adds stock
- Corrections are new entries, never edits
"""

import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from catalog.models import Product, Warehouse


class StockLedgerEntry(models.Model):
    class Kind(models.TextChoices):
        PRODUCTION = "PRODUCTION", "Production"
        SALE = "SALE", "Sale"
        PURCHASE = "PURCHASE", "Purchase"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    kind = models.CharField(max_length=20, choices=Kind.choices)

    warehouse = models.ForeignKey(
        Warehouse, on_delete=models.PROTECT, related_name="ledger_entries"
    )
    product = models.ForeignKey(
        Product, on_delete=models.PROTECT, related_name="ledger_entries"
    )

    delta_qty = models.DecimalField(max_digits=16, decimal_places=4)

    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="stock_ledger_entries",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        verbose_name_plural = "stock ledger entries"
        indexes = [
            models.Index(fields=["created_at"], name="ledger_created_at_idx"),
            models.Index(fields=["kind"], name="ledger_kind_idx"),
            models.Index(
                fields=["warehouse", "product", "created_at"],
                name="ledger_wh_product_created_idx",
            ),
        ]

    def clean(self):
        if self.delta_qty is None or self.delta_qty == 0:
            raise ValidationError("delta_qty must be non-zero")

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("StockLedgerEntry records are immutable")
        self.full_clean()
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError(
            "StockLedgerEntry records are immutable and cannot be deleted"
        )

    def __str__(self):
        return f"{self.kind} | {self.warehouse_id}/{self.product_id} | {self.delta_qty}"
