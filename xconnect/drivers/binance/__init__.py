# -*- coding: utf-8 -*-
# xconnect/drivers/binance/__init__.py
# Binance USDⓈ-M futures driver package

from .driver import BinanceSwapDriver, init_binance_driver
from .rest import RestClient
from .signer import Signer, canonical_query, sign

__all__ = [
    'BinanceSwapDriver',
    'init_binance_driver',
    'RestClient',
    'Signer',
    'canonical_query',
    'sign',
]
