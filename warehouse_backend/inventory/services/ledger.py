# inventory/services/ledger.py

"""
======================================================
PATH: inventory/services/ledger.py
======================================================
STOCK LEDGER + BALANCE PROJECTION

Purpose:
- Append signed quantity deltas to the immutable StockLedgerEntry log.
- Keep StockBalance equal to the ledger sum for each (warehouse, product).
- Lock balance rows for check-then-act operations in the engine.
- Rebuild balances from the ledger alone (recovery / audit).

Rules:
- The ONLY writer of StockBalance.qty is this module.
- Balance increments use F() so the database applies them atomically.
- Locks are taken in primary-key order so concurrent operations touching the
  same rows queue instead of deadlocking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F, Sum
from django.db.transaction import TransactionManagementError
from django.utils import timezone

from catalog.models import Product, Warehouse
from catalog.services.lookups import resolve_product, resolve_warehouse
from inventory.models import StockBalance, StockLedgerEntry
from inventory.services.inputs import to_decimal

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

BalanceKey = tuple[int, int]


def balance_key(warehouse: Warehouse, product: Product) -> BalanceKey:
    return (warehouse.pk, product.pk)


def _balance_qty(warehouse: Warehouse, product: Product) -> Decimal:
    qty = (
        StockBalance.objects.filter(warehouse=warehouse, product=product)
        .values_list("qty", flat=True)
        .first()
    )
    return qty if qty is not None else ZERO


def current_qty(warehouse_code: str, product_code: str) -> Decimal:
    """Materialized balance for the pair, 0 when it has no ledger history."""
    warehouse = resolve_warehouse(warehouse_code)
    product = resolve_product(product_code)
    return _balance_qty(warehouse, product)


def lock_balances(pairs: Iterable[tuple[Warehouse, Product]]) -> dict[BalanceKey, StockBalance]:
    """
    Lock the balance rows an operation is about to read and write.

    Missing rows are created at 0 first so there is always a row to lock.
    Must be called inside transaction.atomic; the locks are held until the
    surrounding transaction commits or rolls back.
    """
    if not transaction.get_connection().in_atomic_block:
        raise TransactionManagementError("lock_balances() must run inside transaction.atomic")

    keys = sorted({balance_key(w, p) for w, p in pairs})

    ids = []
    for warehouse_id, product_id in keys:
        balance, _ = StockBalance.objects.get_or_create(
            warehouse_id=warehouse_id, product_id=product_id
        )
        ids.append(balance.pk)

    locked = StockBalance.objects.select_for_update().filter(pk__in=ids).order_by("pk")
    return {(b.warehouse_id, b.product_id): b for b in locked}


@transaction.atomic
def append_entry(
    *,
    kind: str,
    warehouse: Warehouse,
    product: Product,
    delta_qty: Decimal,
    user=None,
) -> StockLedgerEntry:
    """
    Append one ledger entry and apply its delta to the balance row.

    Callers inside the engine have already resolved and locked everything;
    this function performs no availability checks.
    """
    entry = StockLedgerEntry.objects.create(
        kind=kind,
        warehouse=warehouse,
        product=product,
        delta_qty=delta_qty,
        actor=user,
    )

    balance, _ = StockBalance.objects.get_or_create(warehouse=warehouse, product=product)
    StockBalance.objects.filter(pk=balance.pk).update(
        qty=F("qty") + delta_qty,
        updated_at=timezone.now(),
    )

    return entry


@transaction.atomic
def record(
    *,
    kind: str,
    warehouse_code: str,
    product_code: str,
    delta_qty,
    user=None,
) -> StockLedgerEntry:
    """
    Append a single ledger entry by catalog codes.

    Fails with UnknownWarehouse / UnknownProduct before writing anything.
    """
    if kind not in StockLedgerEntry.Kind.values:
        raise ValidationError(f"Unknown ledger entry kind: {kind}")

    warehouse = resolve_warehouse(warehouse_code)
    product = resolve_product(product_code)

    delta = to_decimal(delta_qty, field_name="delta_qty")
    if delta == ZERO:
        raise ValidationError("delta_qty cannot be 0")

    return append_entry(
        kind=kind,
        warehouse=warehouse,
        product=product,
        delta_qty=delta,
        user=user,
    )


# ============================================================
# REBUILD FROM LEDGER
# ============================================================

@dataclass(frozen=True)
class BalanceDrift:
    warehouse_code: str
    product_code: str
    balance: Decimal
    ledger: Decimal


@transaction.atomic
def rebuild_balances(*, dry_run: bool = False) -> list[BalanceDrift]:
    """
    Recompute every StockBalance from the ledger.

    Returns the pairs whose materialized balance disagreed with the ledger.
    With dry_run=True nothing is written.
    """
    totals = (
        StockLedgerEntry.objects.values("warehouse_id", "product_id")
        .annotate(total=Sum("delta_qty"))
        .order_by()
    )
    expected = {(row["warehouse_id"], row["product_id"]): row["total"] or ZERO for row in totals}

    balances = {
        (b.warehouse_id, b.product_id): b
        for b in StockBalance.objects.select_for_update().order_by("pk")
    }

    warehouse_codes = dict(Warehouse.objects.values_list("id", "code"))
    product_codes = dict(Product.objects.values_list("id", "code"))

    drift = []
    for key in sorted(set(expected) | set(balances)):
        want = expected.get(key, ZERO)
        balance = balances.get(key)
        have = balance.qty if balance is not None else ZERO

        if have == want:
            continue

        drift.append(
            BalanceDrift(
                warehouse_code=warehouse_codes.get(key[0], str(key[0])),
                product_code=product_codes.get(key[1], str(key[1])),
                balance=have,
                ledger=want,
            )
        )

        if dry_run:
            continue

        if balance is None:
            StockBalance.objects.create(warehouse_id=key[0], product_id=key[1], qty=want)
        else:
            StockBalance.objects.filter(pk=balance.pk).update(qty=want, updated_at=timezone.now())

    if drift:
        logger.warning(
            "Stock balances drifted from ledger",
            extra={"pairs": len(drift), "dry_run": dry_run},
        )
    else:
        logger.info("Stock balances match ledger", extra={"pairs": len(expected)})

    return drift
