"""Trade processor -- runs the read, parse and store steps in sequence.

Each step is awaited before the next begins. Only per-line validation
failures are handled (inside the parser); source and store failures
propagate to the caller unchanged.
"""

from typing import BinaryIO

from trade_processor.data.source import TradeSourceReader
from trade_processor.data.store import TradeStore
from trade_processor.logging import get_logger
from trade_processor.parsing.parser import TradeParser

logger = get_logger(__name__)


class TradeProcessor:
    """Wires TradeSourceReader -> TradeParser -> TradeStore.

    Args:
        reader: Fetches raw lines for a locator.
        parser: Turns lines into validated TradeRecords.
        store: Persists the records in one transaction.
    """

    def __init__(
        self,
        reader: TradeSourceReader,
        parser: TradeParser,
        store: TradeStore,
    ) -> None:
        self._reader = reader
        self._parser = parser
        self._store = store

    async def process_trades(self, locator: str | BinaryIO) -> None:
        """Read, parse and store every trade behind the locator.

        Raises:
            SourceReadError: If the locator cannot be read.
            TradeStoreError: If persisting the batch fails.
        """
        lines = self._reader.read_lines(locator)
        trades = self._parser.parse(lines)
        stored = await self._store.store_trades(trades)
        logger.info("trades_run_complete", lines=len(lines), stored=stored)
