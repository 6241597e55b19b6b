# inventory/exceptions.py

"""
INVENTORY DOMAIN ERRORS

Every error here is raised BEFORE any ledger write. A caller that catches one
can rely on stock being exactly as it was before the call.

Each error carries:
- code:    machine-readable kind (stable, used by API clients)
- details: the quantities/codes needed to render an actionable message

Catalog resolution errors (UnknownWarehouse, UnknownProduct) live in
catalog.exceptions and are re-exported here.
"""

from __future__ import annotations

from catalog.exceptions import CatalogError, DomainError, UnknownProduct, UnknownWarehouse

__all__ = [
    "CatalogError",
    "DisallowedPurchaseTarget",
    "DomainError",
    "FormulaNotDefined",
    "InsufficientContainers",
    "InsufficientLiquidStock",
    "InsufficientPackagedStock",
    "InsufficientRawMaterial",
    "InsufficientStockError",
    "InventoryError",
    "UnknownProduct",
    "UnknownWarehouse",
]


class InventoryError(DomainError):
    """Base exception for inventory engine rejections."""

    code = "inventory_error"


class FormulaNotDefined(InventoryError):
    code = "formula_not_defined"

    def __init__(self, family_code: str):
        super().__init__(f"Formula not defined for {family_code}", family=family_code)


# ------------------------------------------------------------
# STOCK SUFFICIENCY
# ------------------------------------------------------------

class InsufficientStockError(InventoryError):
    code = "insufficient_stock"


class InsufficientRawMaterial(InsufficientStockError):
    code = "insufficient_raw_material"

    def __init__(self, raw_material: str, need_kg, avail_kg):
        super().__init__(
            f"Insufficient raw material {raw_material}. Need: {need_kg} kg, Available: {avail_kg} kg",
            raw_material=raw_material,
            needKg=need_kg,
            availKg=avail_kg,
        )


class InsufficientContainers(InsufficientStockError):
    code = "insufficient_containers"

    def __init__(self, size: int, need, available):
        super().__init__(
            f"Insufficient empty {size}L containers. Need: {need}, Available: {available}",
            size=size,
            need=need,
            available=available,
        )


class InsufficientPackagedStock(InsufficientStockError):
    code = "insufficient_packaged_stock"

    def __init__(self, product_code: str, need, available):
        super().__init__(
            f"Insufficient packaged stock for {product_code}. Need: {need}, Available: {available}",
            product=product_code,
            need=need,
            available=available,
        )


class InsufficientLiquidStock(InsufficientStockError):
    """
    Liquid balance is lower than the packaged balance implies.

    Production and sale always move packaged and liquid stock together, so this
    only fires if something outside the engine touched the balances.
    """

    code = "insufficient_liquid_stock"

    def __init__(self, product_code: str, need, available):
        super().__init__(
            f"Insufficient liquid stock for {product_code}. Need: {need} L, Available: {available} L",
            product=product_code,
            need=need,
            available=available,
        )


# ------------------------------------------------------------
# ROUTING
# ------------------------------------------------------------

class DisallowedPurchaseTarget(InventoryError):
    code = "disallowed_purchase_target"

    def __init__(self, product_code: str, kind: str):
        super().__init__(
            f"Product {product_code} ({kind}) cannot be purchased",
            product=product_code,
            kind=kind,
        )
