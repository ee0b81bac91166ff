# -*- coding: utf-8 -*-
"""
Pytest 配置文件
Puts the project root on sys.path and provides a fake requests session so that
no test ever touches the network.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Ensure project root (which contains the `xconnect/` package directory) is on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from xconnect.drivers.binance.driver import BinanceSwapDriver  # noqa: E402
from xconnect.drivers.binance.rest import RestClient  # noqa: E402

HOST = "https://fapi.example.test"
API_KEY = "test_key"
SECRET_KEY = "test_secret"
FIXED_TS = 1620000000500


def fixed_clock():
    return FIXED_TS / 1000.0


def make_response(status_code=200, text=""):
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    return resp


def last_call(session):
    """(method, url, kwargs) of the most recent session.request call"""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs


@pytest.fixture
def session():
    s = Mock()
    s.request.return_value = make_response(200, "{}")
    return s


@pytest.fixture
def rest(session):
    return RestClient(HOST, api_key=API_KEY, secret_key=SECRET_KEY, session=session, clock=fixed_clock)


@pytest.fixture
def driver(rest):
    return BinanceSwapDriver(rest)
