"""Custom exceptions for the trade processor.

Per-line validation failures are not exceptions: the parser logs and skips
them. Everything here is fatal to the current run.
"""


class TradeProcessorError(Exception):
    """Base exception for all trade processor errors."""


class SourceReadError(TradeProcessorError):
    """Raised when trade lines cannot be fetched from the locator."""


class TradeStoreError(TradeProcessorError):
    """Raised when trades cannot be persisted. The transaction is rolled back first."""
