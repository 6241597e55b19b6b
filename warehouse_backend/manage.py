"""
PATH: manage.py

Django management entrypoint.

Common commands:
- migrate
- seed_catalog        warehouses, products, formulas, alert rules, opening stock
- seed_users          staff accounts (admin / sales / warehouse / supply)
- rebuild_balances    recompute StockBalance from the ledger (--check to audit)

DJANGO_SETTINGS_MODULE falls back to backend.settings.dev when unset or when
it names the settings package itself (which loads nothing).
"""

from __future__ import annotations

import os
import sys


def _ensure_settings_module() -> None:
    current = (os.environ.get("DJANGO_SETTINGS_MODULE") or "").strip()
    if current in ("", "backend.settings"):
        os.environ["DJANGO_SETTINGS_MODULE"] = "backend.settings.dev"


def main() -> None:
    _ensure_settings_module()

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
