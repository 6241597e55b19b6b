from .alerts import AlertBreach, active_alerts
from .ledger import current_qty, lock_balances, rebuild_balances, record
from .production import run_production
from .purchases import record_purchase
from .sales import record_sale
from .summary import stock_summary

__all__ = [
    "AlertBreach",
    "active_alerts",
    "current_qty",
    "lock_balances",
    "rebuild_balances",
    "record",
    "record_purchase",
    "record_sale",
    "run_production",
    "stock_summary",
]
