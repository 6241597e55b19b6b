# catalog/codes.py

"""
PRODUCT CODE CONVENTIONS

A finished product family (e.g. "TP") is stored as four catalog rows:
- TP_LITERS        liquid volume (liter)
- TP_PACK_5/10/20  packaged units per container size (count)

Empty containers are coded GALLON_<size>.

These helpers are the single place that builds or parses those codes.
"""

from __future__ import annotations

import re

CONTAINER_SIZES = (5, 10, 20)

FAMILY_CODE_RE = re.compile(r"^[A-Z0-9]+$")
FINISHED_CODE_RE = re.compile(r"^([A-Z0-9]+)_(?:PACK_(5|10|20)|LITERS)$")
CONTAINER_CODE_RE = re.compile(r"^GALLON_(5|10|20)$")


def container_code(size: int) -> str:
    return f"GALLON_{int(size)}"


def packaged_code(family_code: str, size: int) -> str:
    return f"{family_code}_PACK_{int(size)}"


def liquid_code(family_code: str) -> str:
    return f"{family_code}_LITERS"


def parse_finished_code(code: str) -> tuple[str, int | None] | None:
    """
    Split a finished-goods code into (family, container size).

    Liquid codes return size=None. Codes outside the convention return None.
    """
    match = FINISHED_CODE_RE.match(code or "")
    if not match:
        return None
    family, size = match.groups()
    return family, (int(size) if size else None)


def parse_container_code(code: str) -> int | None:
    match = CONTAINER_CODE_RE.match(code or "")
    return int(match.group(1)) if match else None
