# inventory/services/sales.py

"""
SALE

Sells whole packaged units out of the finished-goods warehouse.
Packaged count and liquid liters move together (lockstep).
"""

from __future__ import annotations

import logging

from django.db import transaction

from catalog.codes import liquid_code, packaged_code
from catalog.services.lookups import fixed_warehouses, resolve_product
from inventory.exceptions import InsufficientLiquidStock, InsufficientPackagedStock
from inventory.models import StockLedgerEntry
from inventory.services.inputs import (
    require_container_size,
    require_family_code,
    require_positive_int,
)
from inventory.services.ledger import append_entry, balance_key, lock_balances

logger = logging.getLogger(__name__)


@transaction.atomic
def record_sale(*, family_code: str, container_size, count, user=None) -> dict:
    family = require_family_code(family_code)
    size = require_container_size(container_size)
    qty = require_positive_int(count, field_name="count")
    liters = qty * size

    finished_goods = fixed_warehouses().finished_goods
    pack = resolve_product(packaged_code(family, size))
    liquid = resolve_product(liquid_code(family))

    balances = lock_balances([(finished_goods, pack), (finished_goods, liquid)])

    avail_pack = balances[balance_key(finished_goods, pack)].qty
    if avail_pack < qty:
        logger.warning(
            "Sale rejected: packaged stock shortfall",
            extra={"product": pack.code, "need": qty, "available": str(avail_pack)},
        )
        raise InsufficientPackagedStock(pack.code, qty, avail_pack)

    avail_liters = balances[balance_key(finished_goods, liquid)].qty
    if avail_liters < liters:
        # Packaged and liquid balances only ever move together, so this means
        # something outside the engine changed stock.
        logger.error(
            "Lockstep breach: liquid stock below packaged stock",
            extra={"product": liquid.code, "need": liters, "available": str(avail_liters)},
        )
        raise InsufficientLiquidStock(liquid.code, liters, avail_liters)

    kind = StockLedgerEntry.Kind.SALE
    append_entry(kind=kind, warehouse=finished_goods, product=pack, delta_qty=-qty, user=user)
    append_entry(kind=kind, warehouse=finished_goods, product=liquid, delta_qty=-liters, user=user)

    logger.info(
        "Sale recorded",
        extra={"family": family, "size": size, "count": qty, "liters": liters},
    )

    return {
        "family_code": family,
        "container_size": size,
        "count": qty,
        "liters": liters,
    }
