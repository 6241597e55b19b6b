# catalog/services/lookups.py

"""
CATALOG LOOKUPS

Read-only resolution of catalog rows by their stable codes.
The inventory engine never touches catalog rows through any other path.
"""

from __future__ import annotations

from typing import NamedTuple

from django.conf import settings

from catalog.models import Formula, Product, Warehouse
from catalog.exceptions import UnknownProduct, UnknownWarehouse


class FixedWarehouses(NamedTuple):
    raw: Warehouse
    containers: Warehouse
    finished_goods: Warehouse


def warehouse_codes() -> dict[str, str]:
    return dict(settings.WAREHOUSE_CODES)


def resolve_warehouse(code: str) -> Warehouse:
    try:
        return Warehouse.objects.get(code=(code or "").strip())
    except Warehouse.DoesNotExist as exc:
        raise UnknownWarehouse(code) from exc


def resolve_product(code: str) -> Product:
    try:
        return Product.objects.get(code=(code or "").strip())
    except Product.DoesNotExist as exc:
        raise UnknownProduct(code) from exc


def fixed_warehouses() -> FixedWarehouses:
    codes = warehouse_codes()
    return FixedWarehouses(
        raw=resolve_warehouse(codes["raw"]),
        containers=resolve_warehouse(codes["containers"]),
        finished_goods=resolve_warehouse(codes["finished_goods"]),
    )


def formulas_for(family_code: str) -> list[Formula]:
    return list(
        Formula.objects.select_related("raw_material")
        .filter(family_code=(family_code or "").strip())
        .order_by("raw_material__code")
    )
