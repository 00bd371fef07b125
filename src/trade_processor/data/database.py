"""Async SQLite database manager for trade persistence.

Uses aiosqlite for database access. One TradeDatabase opens one connection
per `async with` block.
"""

import os
from typing import Self

import aiosqlite

from trade_processor.logging import get_logger

logger = get_logger(__name__)

_CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS trades (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    source_currency TEXT NOT NULL,
    destination_currency TEXT NOT NULL,
    lots TEXT NOT NULL,
    price TEXT NOT NULL
);
"""


class TradeDatabase:
    """Async SQLite connection manager for the trades table.

    Usage:
        async with TradeDatabase("data/trades.db") as database:
            await database.db.execute("SELECT ...")
    """

    def __init__(self, db_path: str = "data/trades.db") -> None:
        self._db_path = db_path
        self._connection: aiosqlite.Connection | None = None

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def db(self) -> aiosqlite.Connection:
        """Access the raw aiosqlite connection.

        Raises RuntimeError if not connected.
        """
        if self._connection is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._connection

    async def connect(self) -> None:
        """Open the connection and create the trades table if missing.

        Creates the parent directory if it does not exist.
        """
        db_dir = os.path.dirname(self._db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

        self._connection = await aiosqlite.connect(self._db_path)
        try:
            await self._connection.executescript(_CREATE_TABLES_SQL)
            await self._connection.commit()
        except BaseException:
            # __aexit__ does not run when __aenter__ fails; the worker thread
            # would otherwise keep the interpreter alive.
            await self._connection.close()
            self._connection = None
            raise

        logger.info("trade_db_connected", db_path=self._db_path)

    async def close(self) -> None:
        """Close the database connection if open."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            logger.info("trade_db_closed", db_path=self._db_path)

    async def __aenter__(self) -> Self:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore[no-untyped-def]
        """Async context manager exit."""
        await self.close()
