# inventory/services/production.py

"""
PRODUCTION RUN

Turns raw materials + empty containers into finished goods.

Canonical flow:
1) Validate inputs (family, container size, positive count)
2) Resolve warehouses, formula rows and every product row involved
3) Lock every balance row that will be read or written
4) Pre-check ALL raw materials, then empty containers
5) Only then write: raw materials (-kg), containers (-count),
   packaged (+count) and liquid (+liters) in finished goods

Any failure in 1-4 raises before the first ledger write; the surrounding
transaction means a failure in 5 leaves nothing behind either.
"""

from __future__ import annotations

import logging

from django.db import transaction

from catalog.codes import container_code, liquid_code, packaged_code
from catalog.services.lookups import fixed_warehouses, formulas_for, resolve_product
from inventory.exceptions import (
    FormulaNotDefined,
    InsufficientContainers,
    InsufficientRawMaterial,
)
from inventory.models import StockLedgerEntry
from inventory.services.inputs import (
    require_container_size,
    require_family_code,
    require_positive_int,
)
from inventory.services.ledger import append_entry, balance_key, lock_balances

logger = logging.getLogger(__name__)


@transaction.atomic
def run_production(*, family_code: str, container_size, count, user=None) -> dict:
    family = require_family_code(family_code)
    size = require_container_size(container_size)
    qty = require_positive_int(count, field_name="count")
    liters = qty * size

    warehouses = fixed_warehouses()

    formulas = formulas_for(family)
    if not formulas:
        raise FormulaNotDefined(family)

    container = resolve_product(container_code(size))
    pack = resolve_product(packaged_code(family, size))
    liquid = resolve_product(liquid_code(family))

    needs = [(f.raw_material, f.kg_per_liter * liters) for f in formulas]

    balances = lock_balances(
        [(warehouses.raw, raw) for raw, _ in needs]
        + [
            (warehouses.containers, container),
            (warehouses.finished_goods, pack),
            (warehouses.finished_goods, liquid),
        ]
    )

    # ---- pre-checks (no writes above this line) ----
    for raw, need_kg in needs:
        avail_kg = balances[balance_key(warehouses.raw, raw)].qty
        if avail_kg < need_kg:
            logger.warning(
                "Production rejected: raw material shortfall",
                extra={"family": family, "raw_material": raw.code, "need_kg": str(need_kg), "avail_kg": str(avail_kg)},
            )
            raise InsufficientRawMaterial(raw.code, need_kg, avail_kg)

    avail_containers = balances[balance_key(warehouses.containers, container)].qty
    if avail_containers < qty:
        logger.warning(
            "Production rejected: empty container shortfall",
            extra={"family": family, "size": size, "need": qty, "available": str(avail_containers)},
        )
        raise InsufficientContainers(size, qty, avail_containers)

    # ---- commit ----
    kind = StockLedgerEntry.Kind.PRODUCTION
    consumed = []

    for raw, need_kg in needs:
        append_entry(kind=kind, warehouse=warehouses.raw, product=raw, delta_qty=-need_kg, user=user)
        consumed.append({"raw_material": raw.code, "kg": need_kg})

    append_entry(kind=kind, warehouse=warehouses.containers, product=container, delta_qty=-qty, user=user)
    append_entry(kind=kind, warehouse=warehouses.finished_goods, product=pack, delta_qty=qty, user=user)
    append_entry(kind=kind, warehouse=warehouses.finished_goods, product=liquid, delta_qty=liters, user=user)

    logger.info(
        "Production recorded",
        extra={"family": family, "size": size, "count": qty, "liters": liters},
    )

    return {
        "family_code": family,
        "container_size": size,
        "count": qty,
        "liters": liters,
        "consumed": consumed,
    }
