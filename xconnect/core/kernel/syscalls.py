# -*- coding: utf-8 -*-
# xconnect/core/kernel/syscalls.py
# Venue-neutral capability contract for futures/swap REST bindings.
# Plain base class: a binding overrides what the venue supports, the rest raise Unsupported.

from .errors import Unsupported


class FutureSyscalls(object):
    cex = "UNKNOWN"

    def _unsupported(self, name):
        raise Unsupported(f"{self.cex} binding does not implement {name}")

    # ---- Market data ----
    def get_orderbook(self, symbol, depth=10):
        """Return Orderbook, bids/asks best price first"""
        self._unsupported("get_orderbook")

    def get_ticker(self, symbol):
        """Return Ticker with best bid/ask"""
        self._unsupported("get_ticker")

    def get_kline(self, symbol, period="1m", limit=100):
        """Return list of Kline, oldest first
           :param symbol: Trading pair symbol, e.g. 'BTCUSDT'
           :param period: Interval (e.g., '1m', '1h', '1d')
           :param limit: Number of klines to return
        """
        self._unsupported("get_kline")

    # ---- Account ----
    def get_balance(self, asset):
        """Return Balance for one asset; raise NotFound if the account has no such asset"""
        self._unsupported("get_balance")

    # ---- Trading ----
    def create_order(self, symbol, price, qty, side, order_type):
        """Place a good-till-cancel order, return the order id as str
           :param symbol: Trading pair symbol
           :param price: Order price, not checked against tick size here
           :param qty: Order quantity, not checked against lot size here
           :param side: 'BUY' / 'SELL'
           :param order_type: 'LIMIT' / 'MARKET' ...
        """
        self._unsupported("create_order")

    def cancel(self, order_id, symbol=None):
        """Cancel a single order. True means the venue accepted the request.
           :param order_id: Order ID to cancel
           :param symbol: Trading pair symbol (required by some venues)
        """
        self._unsupported("cancel")

    def cancel_all(self, symbol):
        """Cancel every open order on symbol. True means the venue accepted the request."""
        self._unsupported("cancel_all")

    def get_order(self, order_id, symbol=None):
        """Return Order"""
        self._unsupported("get_order")

    def get_open_orders(self, symbol):
        """Return list of Order still resting on the book"""
        self._unsupported("get_open_orders")

    def get_history_orders(self, symbol):
        """Return list of finished Order"""
        self._unsupported("get_history_orders")

    # ---- Convenience methods ----
    def buy(self, symbol, price, qty, order_type="LIMIT"):
        return self.create_order(symbol, price, qty, "BUY", order_type)

    def sell(self, symbol, price, qty, order_type="LIMIT"):
        return self.create_order(symbol, price, qty, "SELL", order_type)
