"""Turns raw trade lines into TradeRecords, skipping invalid lines."""

from collections.abc import Iterable
from decimal import Decimal

from trade_processor.logging import get_logger
from trade_processor.models import LOT_SIZE, TradeRecord
from trade_processor.parsing.mapper import map_trade_record
from trade_processor.parsing.validator import TradeValidator

logger = get_logger(__name__)

FIELD_DELIMITER = ","


class TradeParser:
    """Validates and maps each line in input order.

    The line number passed to the validator starts at 1 and advances only
    after a line is accepted, so diagnostics that follow a rejected line
    report the count of accepted lines plus one rather than the physical
    line. Existing log consumers depend on this numbering.

    Args:
        validator: Rule checker that logs diagnostics for rejected lines.
        lot_size: Units per lot used by the mapper.
    """

    def __init__(self, validator: TradeValidator, lot_size: Decimal = LOT_SIZE) -> None:
        self._validator = validator
        self._lot_size = lot_size

    def parse(self, lines: Iterable[str]) -> list[TradeRecord]:
        trades: list[TradeRecord] = []
        line_count = 1
        total = 0
        for line in lines:
            total += 1
            fields = line.split(FIELD_DELIMITER)

            if not self._validator.validate(fields, line_count):
                continue

            trades.append(map_trade_record(fields, self._lot_size))
            line_count += 1

        logger.debug("trades_parsed", lines=total, accepted=len(trades), rejected=total - len(trades))
        return trades
