# inventory/services/purchases.py

"""
PURCHASE

Receives raw materials and empty containers from suppliers.

Routing (by Product.Kind):
- RAW_MATERIAL      -> raw materials warehouse
- EMPTY_CONTAINER   -> empty containers warehouse
- PACKAGED_PRODUCT  -> rejected (finished goods only come from production)
- LIQUID_PRODUCT    -> rejected

Every item is resolved and routed before the first write, so one bad item
rejects the whole batch.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from django.core.exceptions import ValidationError
from django.db import transaction

from catalog.models import Product, Warehouse
from catalog.services.lookups import FixedWarehouses, fixed_warehouses, resolve_product
from inventory.exceptions import DisallowedPurchaseTarget
from inventory.models import StockLedgerEntry
from inventory.services.inputs import require_positive_qty
from inventory.services.ledger import append_entry, lock_balances

logger = logging.getLogger(__name__)


def route_purchase(product: Product, warehouses: FixedWarehouses) -> Warehouse:
    kind = product.kind

    if kind == Product.Kind.RAW_MATERIAL:
        return warehouses.raw
    if kind == Product.Kind.EMPTY_CONTAINER:
        return warehouses.containers
    if kind in (Product.Kind.PACKAGED_PRODUCT, Product.Kind.LIQUID_PRODUCT):
        raise DisallowedPurchaseTarget(product.code, kind)

    raise ValueError(f"Unhandled product kind: {kind!r}")


@transaction.atomic
def record_purchase(*, items: Iterable[Mapping], user=None) -> dict:
    lines = list(items or [])
    if not lines:
        raise ValidationError("items must contain at least one purchase line")

    warehouses = fixed_warehouses()

    planned = []
    for index, line in enumerate(lines):
        code = (line.get("product_code") or line.get("code") or "").strip()
        if not code:
            raise ValidationError(f"items[{index}].product_code is required")

        qty = require_positive_qty(line.get("qty"), field_name=f"items[{index}].qty")
        product = resolve_product(code)
        warehouse = route_purchase(product, warehouses)
        planned.append((warehouse, product, qty))

    lock_balances([(warehouse, product) for warehouse, product, _ in planned])

    kind = StockLedgerEntry.Kind.PURCHASE
    recorded = []
    for warehouse, product, qty in planned:
        append_entry(kind=kind, warehouse=warehouse, product=product, delta_qty=qty, user=user)
        recorded.append({"product_code": product.code, "warehouse_code": warehouse.code, "qty": qty})

    logger.info("Purchase recorded", extra={"lines": len(recorded)})

    return {"items": recorded}
