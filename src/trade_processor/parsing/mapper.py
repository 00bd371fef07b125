"""Maps validated trade fields to a TradeRecord."""

from collections.abc import Sequence
from decimal import Decimal

from trade_processor.models import LOT_SIZE, TradeRecord


def map_trade_record(fields: Sequence[str], lot_size: Decimal = LOT_SIZE) -> TradeRecord:
    """Build a TradeRecord from fields that already passed TradeValidator.

    No re-validation: invalid fields raise whatever int()/Decimal() raise.

    Args:
        fields: [currency pair, amount, price], e.g. ["GBPUSD", "5000", "1.51"].
        lot_size: Units per lot.

    Returns:
        TradeRecord with lots = amount / lot_size (fractional).
    """
    pair = fields[0]
    return TradeRecord(
        source_currency=pair[:3],
        destination_currency=pair[3:6],
        lots=Decimal(int(fields[1])) / lot_size,
        price=Decimal(fields[2]),
    )
