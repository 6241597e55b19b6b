# inventory/services/summary.py

"""
Stock summary projection.

Reshapes StockBalance rows into:
- raw_kg:         {raw material code: kg} in the raw warehouse
- gallons_empty:  {"5": n, "10": n, "20": n} in the container warehouse
- products:       one entry per family in finished goods, liters + packs by size

Finished-goods codes outside <FAMILY>_PACK_<size> / <FAMILY>_LITERS are
skipped.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.codes import CONTAINER_SIZES, parse_container_code, parse_finished_code
from catalog.models import Product
from catalog.services.lookups import warehouse_codes
from inventory.models import StockBalance

ZERO = Decimal("0")


def _empty_sizes() -> dict[str, Decimal]:
    return {str(size): ZERO for size in CONTAINER_SIZES}


def stock_summary() -> dict:
    codes = warehouse_codes()

    rows = StockBalance.objects.select_related("warehouse", "product").order_by(
        "warehouse__code", "product__code"
    )

    raw_kg: dict[str, Decimal] = {}
    gallons_empty = _empty_sizes()
    families: dict[str, dict] = {}

    for row in rows:
        wh = row.warehouse.code
        product = row.product

        if wh == codes["raw"] and product.kind == Product.Kind.RAW_MATERIAL:
            raw_kg[product.code] = row.qty
            continue

        if wh == codes["containers"] and product.kind == Product.Kind.EMPTY_CONTAINER:
            size = parse_container_code(product.code)
            if size is not None:
                gallons_empty[str(size)] = row.qty
            continue

        if wh == codes["finished_goods"]:
            parsed = parse_finished_code(product.code)
            if not parsed:
                continue
            family, size = parsed
            entry = families.setdefault(
                family, {"code": family, "liters": ZERO, "pack": _empty_sizes()}
            )
            if size is None:
                entry["liters"] = row.qty
            else:
                entry["pack"][str(size)] = row.qty

    return {
        "raw_kg": raw_kg,
        "gallons_empty": gallons_empty,
        "products": [families[code] for code in sorted(families)],
    }
