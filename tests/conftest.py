"""Shared test fixtures for the trade processor."""

from decimal import Decimal
from typing import Any

import pytest

from trade_processor.config import (
    AppSettings,
    LogSettings,
    SourceSettings,
    StoreSettings,
    TradeSettings,
)


class RecordingTradeLog:
    """TradeLog fake that keeps (tag, message) pairs in memory."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str]] = []

    def log(self, tag: str, template: str, *args: Any) -> None:
        self.entries.append((tag, template.format(*args)))

    def messages(self, tag: str | None = None) -> list[str]:
        return [message for entry_tag, message in self.entries if tag is None or entry_tag == tag]


@pytest.fixture
def trade_log() -> RecordingTradeLog:
    """In-memory trade log."""
    return RecordingTradeLog()


@pytest.fixture
def trade_settings() -> TradeSettings:
    """Default bounds: 1,000..100,000 units, 100,000 units per lot."""
    return TradeSettings()


@pytest.fixture
def mock_settings(tmp_path) -> AppSettings:  # type: ignore[no-untyped-def]
    """Return AppSettings writing the database and log file under tmp_path."""
    return AppSettings(
        log_level="DEBUG",
        source=SourceSettings(url=""),
        store=StoreSettings(db_path=str(tmp_path / "data" / "trades.db")),
        trade=TradeSettings(lot_size=Decimal("100000")),
        log=LogSettings(file_path=str(tmp_path / "log.xml")),
    )
