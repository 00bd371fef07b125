"""Trade input and persistence layer.

Provides the source reader for raw trade lines, SQLite database management,
and the transactional trade store.
"""

from trade_processor.data.database import TradeDatabase
from trade_processor.data.source import TradeSourceReader, read_trade_lines
from trade_processor.data.store import TradeStore

__all__ = [
    "TradeDatabase",
    "TradeSourceReader",
    "TradeStore",
    "read_trade_lines",
]
