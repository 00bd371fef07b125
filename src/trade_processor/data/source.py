"""Reads raw trade lines from a URL, a local path, or an open byte stream.

Uses urllib.request (stdlib) for URL fetches. The whole input is read and
split into lines before parsing starts; nothing is streamed.
"""

import http.client
import urllib.request
from typing import BinaryIO
from urllib.parse import urlparse

from trade_processor.config import SourceSettings
from trade_processor.exceptions import SourceReadError
from trade_processor.logging import get_logger

logger = get_logger(__name__)

URL_SCHEMES = frozenset({"http", "https", "ftp", "file"})


def split_lines(text: str) -> list[str]:
    """Split text on \\n, \\r\\n or \\r. A trailing terminator adds no empty line."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_trade_lines(stream: BinaryIO, encoding: str = "utf-8-sig") -> list[str]:
    """Read every line from an open binary stream. The stream is left open."""
    return split_lines(stream.read().decode(encoding))


class TradeSourceReader:
    """Fetches the ordered lines of a trade file.

    Args:
        settings: Timeout, text encoding and User-Agent for URL fetches.
    """

    def __init__(self, settings: SourceSettings | None = None) -> None:
        self._settings = settings if settings is not None else SourceSettings()

    def read_lines(self, locator: str | BinaryIO) -> list[str]:
        """Return all lines behind the locator, without line terminators.

        Args:
            locator: http(s)/ftp/file URL, filesystem path, or open binary stream.

        Raises:
            SourceReadError: If the source cannot be opened, read, or decoded.
        """
        if not isinstance(locator, str):
            return self._read_stream(locator, "<stream>")

        if _is_url(locator):
            return self._read_url(locator)
        return self._read_path(locator)

    def _read_url(self, url: str) -> list[str]:
        headers = {"User-Agent": self._settings.user_agent}
        req = urllib.request.Request(url, headers=headers)
        try:
            with urllib.request.urlopen(req, timeout=self._settings.timeout_seconds) as resp:
                return self._read_stream(resp, url)
        except (OSError, http.client.HTTPException) as e:
            raise SourceReadError(f"Failed to fetch trades from {url}: {e}") from e

    def _read_path(self, path: str) -> list[str]:
        try:
            with open(path, "rb") as stream:
                return self._read_stream(stream, path)
        except OSError as e:
            raise SourceReadError(f"Failed to read trades from {path}: {e}") from e

    def _read_stream(self, stream: BinaryIO, name: str) -> list[str]:
        try:
            lines = read_trade_lines(stream, self._settings.encoding)
        except UnicodeDecodeError as e:
            raise SourceReadError(
                f"Trade source {name} is not valid {self._settings.encoding} text: {e}"
            ) from e
        except (OSError, http.client.HTTPException) as e:
            raise SourceReadError(f"Failed to read trades from {name}: {e}") from e
        logger.info("trades_fetched", source=name, lines=len(lines))
        return lines


def _is_url(locator: str) -> bool:
    # Single-letter schemes are Windows drive letters, not URLs.
    scheme = urlparse(locator).scheme.lower()
    return len(scheme) > 1 and scheme in URL_SCHEMES
