# -*- coding: utf-8 -*-
# xconnect/drivers/binance/types.py
"""
Binance futures wire shapes.

Two stages per payload:
  decode_*(body) -> Raw*      JSON parse + shape check, the only place that knows field names
  Raw*.to_*()    -> model     pure conversion to xconnect.core.kernel.models
Any mismatch raises DecodeError carrying a summary of the body.
"""

import json
from dataclasses import dataclass
from typing import Any, List, Tuple

from xconnect.core.kernel.errors import DecodeError, NotFound
from xconnect.core.kernel.models import Balance, Kline, Order, Orderbook, PriceLevel, SymbolInfo, Ticker
from .util import to_float, to_int


# -------------- helpers --------------
def _loads(body):
    try:
        return json.loads(body)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"invalid JSON: {e}", body) from e


def _decode(body, factory, what):
    data = _loads(body)
    try:
        return factory(data)
    except DecodeError as e:
        raise DecodeError(f"{what}: {e.message}", body) from e


def _require(data, kind, what):
    if not isinstance(data, kind):
        raise DecodeError(f"{what}: expected {kind.__name__}, got {type(data).__name__}")
    return data


def _field(data, key):
    try:
        return data[key]
    except KeyError:
        raise DecodeError(f"missing field '{key}'") from None


def _levels(data, key) -> List[Tuple[Any, Any]]:
    rows = _require(_field(data, key), list, key)
    levels = []
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            raise DecodeError(f"{key}: malformed level {row!r}")
        levels.append((row[0], row[1]))
    return levels


def _order_id(value) -> str:
    """orderId may be a JSON number or a string; always hand back a string."""
    if isinstance(value, str) and value:
        return value
    return str(to_int(value, "orderId"))


# -------------- orderbook --------------
@dataclass(frozen=True)
class RawOrderbook:
    timestamp: Any
    bids: List[Tuple[Any, Any]]
    asks: List[Tuple[Any, Any]]

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "orderbook")
        ts = data.get("T", data.get("E"))
        if ts is None:
            raise DecodeError("missing field 'T'")
        return cls(ts, _levels(data, "bids"), _levels(data, "asks"))

    def to_orderbook(self) -> Orderbook:
        return Orderbook(
            timestamp=to_int(self.timestamp, "T"),
            bids=[PriceLevel(to_float(p, "price"), to_float(q, "qty")) for p, q in self.bids],
            asks=[PriceLevel(to_float(p, "price"), to_float(q, "qty")) for p, q in self.asks],
        )


def decode_orderbook(body) -> RawOrderbook:
    return _decode(body, RawOrderbook.from_json, "orderbook")


# -------------- ticker --------------
@dataclass(frozen=True)
class RawTicker:
    symbol: str
    bid_price: Any
    bid_qty: Any
    ask_price: Any
    ask_qty: Any
    time: Any = 0

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "ticker")
        return cls(
            symbol=_field(data, "symbol"),
            bid_price=_field(data, "bidPrice"),
            bid_qty=_field(data, "bidQty"),
            ask_price=_field(data, "askPrice"),
            ask_qty=_field(data, "askQty"),
            time=data.get("time", 0),
        )

    def to_ticker(self) -> Ticker:
        return Ticker(
            symbol=self.symbol,
            bid=to_float(self.bid_price, "bidPrice"),
            bid_qty=to_float(self.bid_qty, "bidQty"),
            ask=to_float(self.ask_price, "askPrice"),
            ask_qty=to_float(self.ask_qty, "askQty"),
            timestamp=to_int(self.time, "time"),
        )


def decode_ticker(body) -> RawTicker:
    return _decode(body, RawTicker.from_json, "ticker")


# -------------- kline --------------
@dataclass(frozen=True)
class RawKline:
    # [open time, open, high, low, close, volume, close time, ...]
    row: List[Any]

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, list) or len(data) < 6:
            raise DecodeError(f"malformed kline row {data!r}")
        return cls(list(data))

    def to_kline(self) -> Kline:
        r = self.row
        return Kline(
            timestamp=to_int(r[0], "open time"),
            open=to_float(r[1], "open"),
            high=to_float(r[2], "high"),
            low=to_float(r[3], "low"),
            close=to_float(r[4], "close"),
            volume=to_float(r[5], "volume"),
        )


def decode_klines(body) -> List[RawKline]:
    def factory(data):
        return [RawKline.from_json(row) for row in _require(data, list, "klines")]
    return _decode(body, factory, "klines")


# -------------- account --------------
@dataclass(frozen=True)
class RawAssetBalance:
    asset: str
    wallet_balance: Any
    available_balance: Any

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "asset")
        return cls(
            asset=_field(data, "asset"),
            wallet_balance=_field(data, "walletBalance"),
            available_balance=_field(data, "availableBalance"),
        )


@dataclass(frozen=True)
class RawSwapAccount:
    assets: List[RawAssetBalance]

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "account")
        rows = _require(_field(data, "assets"), list, "assets")
        return cls([RawAssetBalance.from_json(row) for row in rows])

    def to_balance(self, asset) -> Balance:
        """
        No entry for the asset means the account never held it: NotFound, not a zero balance.
        """
        for bal in self.assets:
            if bal.asset == asset:
                free = to_float(bal.available_balance, "availableBalance")
                wallet = to_float(bal.wallet_balance, "walletBalance")
                return Balance(asset=asset, free=free, locked=wallet - free)
        raise NotFound(f"asset not found: {asset}")


def decode_account(body) -> RawSwapAccount:
    return _decode(body, RawSwapAccount.from_json, "account")


# -------------- orders --------------
@dataclass(frozen=True)
class RawOrder:
    order_id: Any
    symbol: str
    side: str
    type: str
    price: Any
    orig_qty: Any
    executed_qty: Any
    status: str

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "order")
        return cls(
            order_id=_field(data, "orderId"),
            symbol=_field(data, "symbol"),
            side=_field(data, "side"),
            type=_field(data, "type"),
            price=_field(data, "price"),
            orig_qty=_field(data, "origQty"),
            executed_qty=data.get("executedQty", "0"),
            status=_field(data, "status"),
        )

    def to_order(self) -> Order:
        return Order(
            id=_order_id(self.order_id),
            symbol=self.symbol,
            side=self.side,
            order_type=self.type,
            price=to_float(self.price, "price"),
            quantity=to_float(self.orig_qty, "origQty"),
            filled=to_float(self.executed_qty, "executedQty"),
            status=self.status,
        )


def decode_order(body) -> RawOrder:
    return _decode(body, RawOrder.from_json, "order")


def decode_orders(body) -> List[RawOrder]:
    def factory(data):
        return [RawOrder.from_json(row) for row in _require(data, list, "orders")]
    return _decode(body, factory, "orders")


@dataclass(frozen=True)
class RawOrderResult:
    order_id: Any

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "order result")
        return cls(_field(data, "orderId"))

    def to_order_id(self) -> str:
        return _order_id(self.order_id)


def decode_order_result(body) -> RawOrderResult:
    return _decode(body, RawOrderResult.from_json, "order result")


# -------------- exchange info --------------
@dataclass(frozen=True)
class RawSymbol:
    symbol: str
    status: str
    base_asset: str
    quote_asset: str
    price_precision: Any
    quantity_precision: Any
    filters: List[dict]

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "symbol")
        return cls(
            symbol=_field(data, "symbol"),
            status=data.get("status", ""),
            base_asset=_field(data, "baseAsset"),
            quote_asset=_field(data, "quoteAsset"),
            price_precision=_field(data, "pricePrecision"),
            quantity_precision=_field(data, "quantityPrecision"),
            filters=[f for f in _require(data.get("filters") or [], list, "filters") if isinstance(f, dict)],
        )

    def _filter_value(self, filter_type, key):
        for f in self.filters:
            if f.get("filterType") == filter_type and key in f:
                return to_float(f[key], key)
        return 0.0

    def to_symbol_info(self) -> SymbolInfo:
        return SymbolInfo(
            symbol=self.symbol,
            base_asset=self.base_asset,
            quote_asset=self.quote_asset,
            price_precision=to_int(self.price_precision, "pricePrecision"),
            quantity_precision=to_int(self.quantity_precision, "quantityPrecision"),
            tick_size=self._filter_value("PRICE_FILTER", "tickSize"),
            step_size=self._filter_value("LOT_SIZE", "stepSize"),
            min_qty=self._filter_value("LOT_SIZE", "minQty"),
            status=self.status,
        )


@dataclass(frozen=True)
class RawExchangeInfo:
    symbols: List[RawSymbol]

    @classmethod
    def from_json(cls, data):
        _require(data, dict, "exchange info")
        rows = _require(_field(data, "symbols"), list, "symbols")
        return cls([RawSymbol.from_json(row) for row in rows])


def decode_exchange_info(body) -> RawExchangeInfo:
    return _decode(body, RawExchangeInfo.from_json, "exchange info")


# -------------- user stream --------------
def decode_listen_key(body) -> str:
    def factory(data):
        key = _field(_require(data, dict, "listen key"), "listenKey")
        if not isinstance(key, str) or not key:
            raise DecodeError(f"bad listenKey {key!r}")
        return key
    return _decode(body, factory, "listen key")
