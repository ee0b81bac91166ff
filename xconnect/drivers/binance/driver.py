# -*- coding: utf-8 -*-
# xconnect/drivers/binance/driver.py
# Binance USDⓈ-M futures binding of the FutureSyscalls contract, on top of RestClient.

import logging

from xconnect.configs.config_reader import ConfigReader
from xconnect.core.kernel.errors import Unsupported
from xconnect.core.kernel.syscalls import FutureSyscalls
from xconnect.utils.logger import setup_logger
from .rest import RestClient, DEFAULT_RECV_WINDOW, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .signer import canonical_query
from .types import (
    decode_account,
    decode_exchange_info,
    decode_klines,
    decode_listen_key,
    decode_order,
    decode_order_result,
    decode_orders,
    decode_orderbook,
    decode_ticker,
)
from .util import fmt_number, klines_to_frame

logger = logging.getLogger(__name__)

EXCHANGE = 'binance_swap'


def init_binance_driver(account='main', config_dir=None, host=None, session=None, configure_logging=True):
    """
    从配置文件初始化 Binance 合约驱动

    Args:
        account: account name under accounts.binance_swap in xconnect.yaml
        config_dir: directory holding xconnect.yaml, defaults to the packaged one
        host: overrides the configured base URL (testnet, mirror)
        session: optional requests.Session shared with other clients
        configure_logging: attach the configured xconnect handler; pass False when the
            application sets up logging itself

    Returns:
        BinanceSwapDriver
    """
    reader = ConfigReader(config_dir)
    cfg = reader.get_exchange_config(EXCHANGE)
    credentials = reader.get_credentials(EXCHANGE, account)
    log_cfg = reader.get_logging_config()
    if configure_logging:
        setup_logger(log_dir=log_cfg['log_dir'], level=log_cfg['level'])

    rest = RestClient(
        host=host or cfg['host'],
        api_key=credentials['api_key'],
        secret_key=credentials['secret_key'],
        recv_window=cfg.get('recv_window', DEFAULT_RECV_WINDOW),
        timeout=cfg.get('timeout', DEFAULT_TIMEOUT),
        user_agent=cfg.get('user_agent', DEFAULT_USER_AGENT),
        session=session,
    )
    logger.info("Binance driver ready: account=%s host=%s authenticated=%s",
                account, rest.host, bool(credentials['api_key']))
    return BinanceSwapDriver(rest)


class BinanceSwapDriver(FutureSyscalls):
    """
    Binance USDⓈ-M swap driver.
    Symbols are venue-native ('BTCUSDT'); every method returns normalized models
    or raises one of the kernel errors.
    """
    cex = 'Binance'

    def __init__(self, rest=None, host=None, api_key=None, secret_key=None, **rest_options):
        """
        :param rest: Optional. A ready RestClient; otherwise one is built from host/api_key/secret_key.
        :param rest_options: recv_window, timeout, user_agent, session, clock for the RestClient
        """
        if rest is None:
            rest = RestClient(host, api_key or "", secret_key or "", **rest_options)
        self.rest = rest

    # -------------- ref-data / meta --------------
    def get_symbols(self):
        """返回所有合约的交易规则 list[SymbolInfo]"""
        body = self.rest.get("/fapi/v1/exchangeInfo")
        return [s.to_symbol_info() for s in decode_exchange_info(body).symbols]

    # -------------- market data --------------
    def get_orderbook(self, symbol, depth=10):
        query = canonical_query({"symbol": symbol, "limit": depth})
        body = self.rest.get("/fapi/v1/depth", query)
        return decode_orderbook(body).to_orderbook()

    def get_ticker(self, symbol):
        query = canonical_query({"symbol": symbol})
        body = self.rest.get("/fapi/v1/ticker/bookTicker", query)
        return decode_ticker(body).to_ticker()

    def get_kline(self, symbol, period="1m", limit=100):
        query = canonical_query({"symbol": symbol, "interval": period, "limit": limit})
        body = self.rest.get("/fapi/v1/klines", query)
        return [k.to_kline() for k in decode_klines(body)]

    def get_kline_frame(self, symbol, period="1m", limit=100):
        """K线 DataFrame: ts/open/high/low/close/volume"""
        return klines_to_frame(self.get_kline(symbol, period, limit))

    # -------------- account --------------
    def get_balance(self, asset):
        query = self.rest.build_signed_request({})
        body = self.rest.get_signed("/fapi/v2/account", query)
        return decode_account(body).to_balance(asset)

    # -------------- trading --------------
    def create_order(self, symbol, price, qty, side, order_type):
        params = {
            "symbol": symbol,
            "side": str(side).upper(),
            "type": str(order_type).upper(),
            "timeInForce": "GTC",
            "quantity": fmt_number(qty),
            "price": fmt_number(price),
        }
        query = self.rest.build_signed_request(params)
        body = self.rest.post_signed("/fapi/v1/order", query)
        order_id = decode_order_result(body).to_order_id()
        logger.info("order placed: %s %s %s %s@%s -> %s",
                    symbol, params["side"], params["type"], params["quantity"], params["price"], order_id)
        return order_id

    def cancel(self, order_id, symbol=None):
        # True only says the venue accepted the cancel request
        params = {"orderId": order_id}
        if symbol:
            params["symbol"] = symbol
        query = self.rest.build_signed_request(params)
        self.rest.delete_signed("/fapi/v1/order", query)
        logger.info("cancel accepted: %s", order_id)
        return True

    def cancel_all(self, symbol):
        query = self.rest.build_signed_request({"symbol": symbol})
        self.rest.delete_signed("/fapi/v1/allOpenOrders", query)
        logger.info("cancel all accepted: %s", symbol)
        return True

    def get_order(self, order_id, symbol=None):
        params = {"orderId": order_id}
        if symbol:
            params["symbol"] = symbol
        query = self.rest.build_signed_request(params)
        body = self.rest.get_signed("/fapi/v1/order", query)
        return decode_order(body).to_order()

    def get_open_orders(self, symbol):
        query = self.rest.build_signed_request({"symbol": symbol})
        body = self.rest.get_signed("/fapi/v1/openOrders", query)
        return [o.to_order() for o in decode_orders(body)]

    def get_history_orders(self, symbol):
        raise Unsupported("Binance binding does not implement get_history_orders")

    # -------------- user data stream session --------------
    def start_user_stream(self):
        """Open a user-data session, return its listenKey"""
        return decode_listen_key(self.rest.post("/fapi/v1/listenKey"))

    def keepalive_user_stream(self, listen_key):
        self.rest.put("/fapi/v1/listenKey", listen_key)
        return True

    def close_user_stream(self, listen_key):
        self.rest.delete("/fapi/v1/listenKey", listen_key)
        return True


if __name__ == '__main__':
    driver = init_binance_driver()
    print(driver.get_orderbook("BTCUSDT", 5))
    print(driver.get_ticker("BTCUSDT"))
    print(driver.get_kline_frame("BTCUSDT", "1m", 5))
