"""Trade line parsing.

Validation rules, field-to-record mapping, and the parser that composes them.
"""

from trade_processor.parsing.mapper import map_trade_record
from trade_processor.parsing.parser import TradeParser
from trade_processor.parsing.validator import TradeValidator

__all__ = [
    "TradeParser",
    "TradeValidator",
    "map_trade_record",
]
