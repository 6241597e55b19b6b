# catalog/models/warehouse.py

from django.db import models


class Warehouse(models.Model):
    """
    A physical stock location.

    The business runs a fixed set of three warehouses (raw materials,
    empty containers, finished goods). Rows are created by seed_catalog
    and never deleted.
    """

    code = models.CharField(max_length=32, unique=True, db_index=True)
    name = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["code"]

    def __str__(self):
        return f"{self.name} ({self.code})"
