# -*- coding: utf-8 -*-
# xconnect/__init__.py
# Normalized connectivity layer for futures/swap exchange REST APIs

from .core.kernel import (  # noqa: F401
    ExError,
    TransportError,
    ApiError,
    DecodeError,
    ClockError,
    NotFound,
    Unsupported,
    ConfigError,
    FutureSyscalls,
    SymbolInfo,
    PriceLevel,
    Orderbook,
    Ticker,
    Kline,
    Balance,
    Order,
)
from .drivers.binance import BinanceSwapDriver, init_binance_driver  # noqa: F401

__version__ = "0.1.0"
