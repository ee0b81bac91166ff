# -*- coding: utf-8 -*-
# xconnect/drivers/binance/signer.py
"""
Request signer for the Binance futures REST API.
- canonical query: keys in strict lexicographic order, 'k1=v1&k2=v2', no encoding
- signature: HMAC-SHA256(secret, query), lowercase hex
"""

import hashlib
import hmac

from xconnect.core.kernel.errors import ConfigError


def canonical_query(params) -> str:
    """Serialize params sorted by key. The venue checks the query byte for byte."""
    return "&".join(f"{k}={params[k]}" for k in sorted(params))


def sign(secret: str, query: str) -> str:
    try:
        key = secret.encode("utf-8")
        message = query.encode("utf-8")
    except (AttributeError, UnicodeError) as e:
        raise ConfigError(f"unusable secret/query for signing: {e}") from e
    return hmac.new(key, message, hashlib.sha256).hexdigest()


class Signer:
    def __init__(self, secret_key=""):
        self._secret_key = secret_key

    def sign(self, query):
        return sign(self._secret_key, query)

    def signed_query(self, query):
        """query + '&signature=<hex>'"""
        return f"{query}&signature={self.sign(query)}"
