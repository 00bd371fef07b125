"""Shared data models for the trade processor.

CRITICAL: All monetary values use Decimal. Never use float for lots or prices.
"""

from dataclasses import dataclass
from decimal import Decimal

LOT_SIZE = Decimal("100000")


@dataclass
class TradeRecord:
    """A validated trade line.

    Stored in SQLite with lots and price as TEXT to preserve Decimal precision.
    """

    source_currency: str  # 3-letter code, e.g. "USD"
    destination_currency: str
    lots: Decimal
    price: Decimal
