from .money import Money
from .order_update import OrderUpdate
from .timestamps import (
    CLIENT_TIMESTAMP_FORMAT,
    ORDER_TIMESTAMP_FORMAT,
    format_timestamp,
    parse_timestamp
)

__all__ = [
    "Money",
    "OrderUpdate",
    "CLIENT_TIMESTAMP_FORMAT",
    "ORDER_TIMESTAMP_FORMAT",
    "format_timestamp",
    "parse_timestamp"
]
