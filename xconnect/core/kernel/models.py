# -*- coding: utf-8 -*-
# xconnect/core/kernel/models.py
"""
Venue-neutral value objects returned by every driver.

Trading logic works only with these; raw exchange payloads never leave a driver.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class SymbolInfo:
    """Trading rules of one instrument."""
    symbol: str
    base_asset: str
    quote_asset: str
    price_precision: int
    quantity_precision: int
    tick_size: float      # 下单价格精度
    step_size: float      # 下单数量精度
    min_qty: float        # 最小下单数量
    status: str = ""


@dataclass(frozen=True)
class PriceLevel:
    price: float
    quantity: float


@dataclass(frozen=True)
class Orderbook:
    """Depth snapshot, best price first on both sides."""
    timestamp: int
    bids: List[PriceLevel] = field(default_factory=list)
    asks: List[PriceLevel] = field(default_factory=list)


@dataclass(frozen=True)
class Ticker:
    symbol: str
    bid: float
    bid_qty: float
    ask: float
    ask_qty: float
    timestamp: int = 0


@dataclass(frozen=True)
class Kline:
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float


@dataclass(frozen=True)
class Balance:
    """free = available balance, locked = wallet balance - available balance."""
    asset: str
    free: float
    locked: float


@dataclass(frozen=True)
class Order:
    id: str
    symbol: str
    side: str
    order_type: str
    price: float
    quantity: float
    filled: float
    status: str


__all__ = [
    "SymbolInfo",
    "PriceLevel",
    "Orderbook",
    "Ticker",
    "Kline",
    "Balance",
    "Order",
]
