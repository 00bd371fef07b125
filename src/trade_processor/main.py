"""Entry point for the trade processor.

Reads one trade file, validates and parses its lines, and stores the
accepted trades. The locator comes from the command line or SOURCE_URL.

Component wiring order (in _build_components):
1. XmlTradeLog (diagnostics sink)
2. TradeSourceReader (URL / path reader)
3. TradeValidator + TradeParser (line validation and mapping)
4. TradeDatabase + TradeStore (transactional persistence)
5. TradeProcessor (pipeline)
"""

import argparse
import asyncio
from collections.abc import Sequence
from typing import Any

from trade_processor.config import AppSettings
from trade_processor.data.database import TradeDatabase
from trade_processor.data.source import TradeSourceReader
from trade_processor.data.store import TradeStore
from trade_processor.logging import XmlTradeLog, get_logger, setup_logging
from trade_processor.parsing.parser import TradeParser
from trade_processor.parsing.validator import TradeValidator
from trade_processor.processor import TradeProcessor


def _build_components(settings: AppSettings) -> dict[str, Any]:
    """Build all pipeline components from settings.

    Returns:
        Dict mapping component names to instances.
    """
    trade_log = XmlTradeLog(settings.log.file_path)
    reader = TradeSourceReader(settings.source)
    validator = TradeValidator(trade_log, settings.trade)
    parser = TradeParser(validator, settings.trade.lot_size)
    store = TradeStore(TradeDatabase(settings.store.db_path), trade_log)
    processor = TradeProcessor(reader=reader, parser=parser, store=store)

    return {
        "trade_log": trade_log,
        "reader": reader,
        "parser": parser,
        "store": store,
        "processor": processor,
    }


async def run(locator: str, settings: AppSettings) -> None:
    """Process every trade behind the locator."""
    logger = get_logger("trade_processor.main")
    components = _build_components(settings)

    logger.info(
        "trade_processing_started",
        locator=locator,
        db_path=settings.store.db_path,
        log_file=settings.log.file_path,
    )
    await components["processor"].process_trades(locator)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trade-processor",
        description="Validate a trade file and store its trades",
    )
    parser.add_argument(
        "locator",
        nargs="?",
        help="URL or path of the trade file (defaults to SOURCE_URL)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Synchronous entry point."""
    args = build_parser().parse_args(argv)

    settings = AppSettings()
    setup_logging(settings.log_level)

    locator = args.locator or settings.source.url
    if not locator:
        build_parser().error("no locator given and SOURCE_URL is not set")

    asyncio.run(run(locator, settings))


if __name__ == "__main__":
    main()
