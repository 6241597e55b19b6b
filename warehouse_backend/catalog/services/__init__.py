from .lookups import (
    FixedWarehouses,
    fixed_warehouses,
    formulas_for,
    resolve_product,
    resolve_warehouse,
)

__all__ = [
    "FixedWarehouses",
    "fixed_warehouses",
    "formulas_for",
    "resolve_product",
    "resolve_warehouse",
]
