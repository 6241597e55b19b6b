from .ledger_entry import StockLedgerEntry
from .stock_balance import StockBalance

__all__ = [
    "StockBalance",
    "StockLedgerEntry",
]
