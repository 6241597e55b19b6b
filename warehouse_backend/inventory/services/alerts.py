# inventory/services/alerts.py

"""
Low-stock alerts.

A rule breaches when the current balance is strictly below its minimum.
Rules without any ledger history count as 0.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal

from catalog.models import AlertRule
from inventory.models import StockBalance


@dataclass(frozen=True)
class AlertBreach:
    warehouse_code: str
    warehouse: str
    product: str
    current: Decimal
    min: Decimal
    unit: str

    def as_dict(self) -> dict:
        return asdict(self)


def active_alerts() -> list[AlertBreach]:
    rules = AlertRule.objects.select_related("warehouse", "product").order_by(
        "warehouse__code", "product__code"
    )

    balances = {
        (warehouse_id, product_id): qty
        for warehouse_id, product_id, qty in StockBalance.objects.values_list(
            "warehouse_id", "product_id", "qty"
        )
    }

    breaches = []
    for rule in rules:
        current = balances.get((rule.warehouse_id, rule.product_id), Decimal("0"))
        if current < rule.min_qty:
            breaches.append(
                AlertBreach(
                    warehouse_code=rule.warehouse.code,
                    warehouse=rule.warehouse.name,
                    product=rule.product.code,
                    current=current,
                    min=rule.min_qty,
                    unit=rule.product.unit,
                )
            )
    return breaches
