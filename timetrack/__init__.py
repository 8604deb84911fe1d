from .interval import Interval
from .lexer import escape, json_encode, quote_if_needed
from .moment import Datetime
from .range import Range

__all__ = [
    "Interval",
    "Range",
    "Datetime",
    "quote_if_needed",
    "escape",
    "json_encode",
]
