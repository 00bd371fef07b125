"""Per-line validation of split trade fields.

Rules run in order and stop at the first failure. Each failure emits exactly
one WARN diagnostic through the injected TradeLog, naming the line number and
the offending raw value.
"""

import re
from collections.abc import Sequence
from decimal import Decimal

from trade_processor.config import TradeSettings
from trade_processor.logging import WARN, TradeLog

FIELD_COUNT = 3
CURRENCY_PAIR_LENGTH = 6

# ASCII digits only: no exponents, digit-group underscores, or non-Latin digits.
_AMOUNT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
_PRICE_PATTERN = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*", re.ASCII)


def parse_amount(field: str) -> int | None:
    """Parse a trade amount, or return None if it is not a plain integer.

    Accepts an optional sign and surrounding whitespace.
    """
    if _AMOUNT_PATTERN.fullmatch(field) is None:
        return None
    return int(field)


def parse_price(field: str) -> Decimal | None:
    """Parse a trade price, or return None if it is not a plain decimal number."""
    if _PRICE_PATTERN.fullmatch(field) is None:
        return None
    return Decimal(field.strip())


class TradeValidator:
    """Checks split trade fields against the trade line rules.

    Args:
        log: Sink for validation diagnostics.
        settings: Amount bounds (inclusive). Defaults to TradeSettings().
    """

    def __init__(self, log: TradeLog, settings: TradeSettings | None = None) -> None:
        self._log = log
        self._settings = settings if settings is not None else TradeSettings()

    def validate(self, fields: Sequence[str], line_number: int) -> bool:
        """Return True if the fields form a valid trade line.

        Args:
            fields: The comma-split raw line.
            line_number: 1-based line number reported in diagnostics.

        Returns:
            False after logging one diagnostic for the first rule that fails.
        """
        if len(fields) != FIELD_COUNT:
            self._log.log(
                WARN, "Line {0} malformed. Only {1} field(s) found.", line_number, len(fields)
            )
            return False

        if len(fields[0]) != CURRENCY_PAIR_LENGTH:
            self._log.log(
                WARN, "Trade currencies on line {0} malformed: '{1}'", line_number, fields[0]
            )
            return False

        amount = parse_amount(fields[1])
        if amount is None:
            self._log.log(
                WARN,
                "Trade amount on line {0} not a valid integer: '{1}'",
                line_number,
                fields[1],
            )
            return False

        if amount < self._settings.min_amount or amount > self._settings.max_amount:
            self._log.log(
                WARN,
                "Trade amount on line {0} outside trade amount bounds "
                "(Trade amounts must be between {2:,} and {3:,} units.): '{1}'",
                line_number,
                fields[1],
                self._settings.min_amount,
                self._settings.max_amount,
            )
            return False

        if parse_price(fields[2]) is None:
            self._log.log(
                WARN,
                "Trade price on line {0} not a valid decimal: '{1}'",
                line_number,
                fields[2],
            )
            return False

        return True
