# catalog/exceptions.py

"""
Domain error base + catalog resolution errors.

Each error carries:
- code:    machine-readable kind (stable, used by API clients)
- details: the quantities/codes needed to render an actionable message

Catalog errors are configuration defects (an unseeded or mistyped code) and
are never retried.
"""

from __future__ import annotations

from decimal import Decimal


def _num(value):
    # Whole quantities render as ints; fractions as exact decimal strings.
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return format(value.normalize(), "f")
    return value


class DomainError(Exception):
    code = "domain_error"

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = {key: _num(value) for key, value in details.items()}

    def as_dict(self) -> dict:
        return {"detail": self.message, "code": self.code, "details": self.details}


class CatalogError(DomainError):
    code = "catalog_error"


class UnknownWarehouse(CatalogError):
    code = "unknown_warehouse"

    def __init__(self, warehouse_code: str):
        super().__init__(f"Warehouse not found: {warehouse_code}", warehouse=warehouse_code)


class UnknownProduct(CatalogError):
    code = "unknown_product"

    def __init__(self, product_code: str):
        super().__init__(f"Product not found: {product_code}", product=product_code)
