"""Transactional persistence of parsed trades.

All records of a run are inserted in one transaction and committed once.
On failure the transaction is rolled back explicitly and TradeStoreError is
raised; nothing is retried.

CRITICAL: lots and price are stored as TEXT in SQLite, restored as Decimal on read.
"""

from collections.abc import Sequence
from decimal import Decimal

import aiosqlite

from trade_processor.data.database import TradeDatabase
from trade_processor.exceptions import TradeStoreError
from trade_processor.logging import INFO, TradeLog, get_logger
from trade_processor.models import TradeRecord

logger = get_logger(__name__)

INSERT_TRADE_SQL = (
    "INSERT INTO trades (source_currency, destination_currency, lots, price) "
    "VALUES (:source_currency, :destination_currency, :lots, :price)"
)


def _trade_params(trade: TradeRecord) -> dict[str, str]:
    return {
        "source_currency": trade.source_currency,
        "destination_currency": trade.destination_currency,
        "lots": str(trade.lots),
        "price": str(trade.price),
    }


class TradeStore:
    """Writes a batch of TradeRecords through one connection and one transaction.

    Usage:
        store = TradeStore(TradeDatabase("data/trades.db"), XmlTradeLog())
        count = await store.store_trades(trades)
    """

    def __init__(self, database: TradeDatabase, log: TradeLog) -> None:
        self._database = database
        self._log = log

    async def store_trades(self, trades: Sequence[TradeRecord]) -> int:
        """Insert every trade and commit once.

        Returns:
            Number of trades stored.

        Raises:
            TradeStoreError: If connecting, inserting or committing fails.
        """
        self._log.log(INFO, "Connecting to Database")
        try:
            async with self._database as database:
                await self._insert_all(database.db, trades)
        except (aiosqlite.Error, OSError) as e:
            logger.error("trades_store_failed", db_path=self._database.db_path, error=str(e))
            raise TradeStoreError(
                f"Failed to store {len(trades)} trades in {self._database.db_path}: {e}"
            ) from e

        self._log.log(INFO, "{0} trades processed", len(trades))
        return len(trades)

    async def _insert_all(
        self, connection: aiosqlite.Connection, trades: Sequence[TradeRecord]
    ) -> None:
        try:
            for trade in trades:
                await connection.execute(INSERT_TRADE_SQL, _trade_params(trade))
            await connection.commit()
        except aiosqlite.Error:
            await connection.rollback()
            raise

    async def get_trades(self) -> list[TradeRecord]:
        """Return all stored trades in insertion order."""
        async with self._database as database:
            cursor = await database.db.execute(
                "SELECT source_currency, destination_currency, lots, price "
                "FROM trades ORDER BY id"
            )
            rows = await cursor.fetchall()

        return [
            TradeRecord(
                source_currency=row[0],
                destination_currency=row[1],
                lots=Decimal(row[2]),
                price=Decimal(row[3]),
            )
            for row in rows
        ]
