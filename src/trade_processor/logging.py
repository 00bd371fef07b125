"""Structured logging configuration and the trade diagnostics log.

setup_logging/get_logger configure structlog for the module loggers.
XmlTradeLog is the narrow tagged logger the pipeline reports through: each
entry goes to the console and is appended to an XML-like log file.
"""

import logging
import os
from typing import Any, Protocol
from xml.sax.saxutils import escape

import structlog

INFO = "INFO"
WARN = "WARN"
ERROR = "ERROR"


def setup_logging(log_level: str = "INFO") -> None:
    """Configure structlog with JSON or console rendering.

    Rendering format is controlled by the LOG_FORMAT environment variable:
    - "json" for production (machine-readable)
    - "console" for development (human-readable, default)
    """
    log_format = os.environ.get("LOG_FORMAT", "console").lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to use structlog's ProcessorFormatter
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)


class TradeLog(Protocol):
    """Tagged message sink used by the validator, store and processor."""

    def log(self, tag: str, template: str, *args: Any) -> None:
        """Emit `template.format(*args)` under the given tag."""
        ...


def format_log_entry(tag: str, message: str) -> str:
    """Render one log file entry. Markup characters are escaped."""
    return f"<log><type>{escape(tag)}</type><message>{escape(message)}</message></log>"


def _console_method(tag: str) -> str:
    upper = tag.upper()
    if upper.startswith(WARN):
        return "warning"
    if upper.startswith(ERROR):
        return "error"
    return "info"


class XmlTradeLog:
    """Writes tagged messages to the console and an append-only XML log file.

    No buffering and no rotation: every call opens the file in append mode,
    writes one entry, and closes it.

    Args:
        file_path: Log file to append to. Parent directories are created.
        console: structlog logger used as the console sink.
    """

    def __init__(
        self,
        file_path: str = "log.xml",
        console: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._file_path = file_path
        self._console = console if console is not None else get_logger("trade_processor.trades")

    @property
    def file_path(self) -> str:
        return self._file_path

    def log(self, tag: str, template: str, *args: Any) -> None:
        message = template.format(*args)
        getattr(self._console, _console_method(tag))(message, tag=tag)

        log_dir = os.path.dirname(self._file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(self._file_path, "a", encoding="utf-8") as logfile:
            logfile.write(format_log_entry(tag, message) + "\n")
