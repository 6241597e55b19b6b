"""
Catalog models export surface.
"""

from .alert_rule import AlertRule
from .formula import Formula
from .product import Product
from .warehouse import Warehouse

__all__ = [
    "AlertRule",
    "Formula",
    "Product",
    "Warehouse",
]
