# inventory/tests/helpers.py

"""
Shared fixtures for inventory tests.

Builds the minimal catalog for one family ("TP") with the default fixed
warehouses and lets tests put stock in place through the ledger.
"""

from decimal import Decimal

from django.conf import settings

from catalog.codes import CONTAINER_SIZES, container_code, liquid_code, packaged_code
from catalog.models import Formula, Product, Warehouse
from inventory.models import StockBalance, StockLedgerEntry
from inventory.services.ledger import record


def build_catalog(family="TP", formula=(("P", "0.53"), ("S", "0.304"))):
    codes = settings.WAREHOUSE_CODES

    warehouses = {
        key: Warehouse.objects.get_or_create(code=code, defaults={"name": f"{key} warehouse"})[0]
        for key, code in codes.items()
    }

    for raw_code, _ in formula:
        Product.objects.get_or_create(
            code=raw_code,
            defaults={"name": raw_code, "kind": Product.Kind.RAW_MATERIAL, "unit": Product.Unit.KG},
        )

    for size in CONTAINER_SIZES:
        Product.objects.get_or_create(
            code=container_code(size),
            defaults={
                "name": f"Empty {size}L",
                "kind": Product.Kind.EMPTY_CONTAINER,
                "unit": Product.Unit.COUNT,
            },
        )
        Product.objects.get_or_create(
            code=packaged_code(family, size),
            defaults={
                "name": f"{family} {size}L",
                "kind": Product.Kind.PACKAGED_PRODUCT,
                "unit": Product.Unit.COUNT,
            },
        )

    Product.objects.get_or_create(
        code=liquid_code(family),
        defaults={
            "name": f"{family} liters",
            "kind": Product.Kind.LIQUID_PRODUCT,
            "unit": Product.Unit.LITER,
        },
    )

    for raw_code, kg_per_liter in formula:
        Formula.objects.create(
            family_code=family,
            raw_material=Product.objects.get(code=raw_code),
            kg_per_liter=Decimal(kg_per_liter),
        )

    return warehouses


def put_stock(warehouse_code, product_code, qty, kind=StockLedgerEntry.Kind.PURCHASE):
    return record(
        kind=kind,
        warehouse_code=warehouse_code,
        product_code=product_code,
        delta_qty=qty,
    )


def adjust_stock(warehouse_code, product_code, delta):
    """
    Shift a balance outside the engine (spillage, miscount, manual edit).

    The ledger has no adjustment kind, so these test-only corrections are
    booked as PURCHASE entries carrying whatever sign the delta has.
    """
    return record(
        kind=StockLedgerEntry.Kind.PURCHASE,
        warehouse_code=warehouse_code,
        product_code=product_code,
        delta_qty=delta,
    )


def balance(warehouse_code, product_code):
    qty = (
        StockBalance.objects.filter(warehouse__code=warehouse_code, product__code=product_code)
        .values_list("qty", flat=True)
        .first()
    )
    return qty if qty is not None else Decimal("0")


def raw_wh():
    return settings.WAREHOUSE_CODES["raw"]


def gal_wh():
    return settings.WAREHOUSE_CODES["containers"]


def fg_wh():
    return settings.WAREHOUSE_CODES["finished_goods"]
