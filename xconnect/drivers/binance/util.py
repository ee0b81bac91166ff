# -*- coding: utf-8 -*-
# xconnect/drivers/binance/util.py
# Numeric helpers shared by the request builder and the wire model mapper.

import math
import time
from decimal import Decimal, InvalidOperation

import pandas as pd

from xconnect.core.kernel.errors import ClockError, DecodeError

KLINE_COLUMNS = ['ts', 'open', 'high', 'low', 'close', 'volume']


def get_timestamp(clock=time.time) -> int:
    """
    当前 Unix 毫秒时间戳。
    clock 返回秒（float），失败或返回非正数时抛出 ClockError。
    """
    try:
        seconds = clock()
        ts = int(seconds * 1000)
    except Exception as e:
        raise ClockError(f"timestamp source failed: {e}") from e
    if ts <= 0:
        raise ClockError(f"timestamp source returned {seconds!r}")
    return ts


def fmt_number(value) -> str:
    """
    Stringify a caller-supplied price/quantity the way the venue accepts it:
    plain positional notation, never scientific ('1e-05' -> '0.00001').
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        raise ValueError(f"not a finite number: {value!r}")
    if isinstance(value, int):
        return str(value)
    try:
        # str() first so 0.1 stays 0.1 instead of its binary expansion
        return format(Decimal(str(value)), 'f')
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e


def to_float(value, name="value") -> float:
    """Accept a JSON number or a numeric-looking string; NaN and infinities are rejected."""
    if isinstance(value, bool) or value is None:
        raise DecodeError(f"{name}: expected number, got {value!r}")
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError as e:
            raise DecodeError(f"{name}: expected number, got {value!r}") from e
    else:
        raise DecodeError(f"{name}: expected number, got {type(value).__name__}")
    if not math.isfinite(result):
        raise DecodeError(f"{name}: expected finite number, got {value!r}")
    return result


def to_int(value, name="value") -> int:
    """Like to_float, for integral fields (timestamps, ids)."""
    if isinstance(value, bool) or value is None:
        raise DecodeError(f"{name}: expected integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, str)):
        try:
            d = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise DecodeError(f"{name}: expected integer, got {value!r}") from e
        if not d.is_finite() or d != d.to_integral_value():
            raise DecodeError(f"{name}: expected integer, got {value!r}")
        return int(d)
    raise DecodeError(f"{name}: expected integer, got {type(value).__name__}")


def klines_to_frame(klines):
    """
    Kline 列表转 DataFrame, columns = ts/open/high/low/close/volume.
    """
    rows = [[k.timestamp, k.open, k.high, k.low, k.close, k.volume] for k in klines]
    df = pd.DataFrame(data=rows, columns=KLINE_COLUMNS)
    df['ts'] = df['ts'].astype('int64')
    return df
