"""
Kernel: capability contract, normalized models and error taxonomy.
"""

from .errors import (  # noqa: F401
    ExError,
    TransportError,
    ApiError,
    DecodeError,
    ClockError,
    NotFound,
    Unsupported,
    ConfigError,
)
from .models import SymbolInfo, PriceLevel, Orderbook, Ticker, Kline, Balance, Order  # noqa: F401
from .syscalls import FutureSyscalls  # noqa: F401
