# -*- coding: utf-8 -*-
# xconnect/drivers/binance/rest.py
"""
REST transport for the Binance USDⓈ-M futures API.
Responsibilities:
- Build the canonical signed query (recvWindow + timestamp + signature)
- Dispatch GET/POST/PUT/DELETE with the right headers
- Classify the outcome: 200 -> body text, other status -> ApiError, network -> TransportError
No retries, no rate limiting: a failed call returns immediately.
"""

import logging
import time

import requests

from xconnect.core.kernel.errors import ApiError, ConfigError, TransportError
from .signer import Signer, canonical_query
from .util import get_timestamp

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "xconnect"
DEFAULT_RECV_WINDOW = 5000
DEFAULT_TIMEOUT = 10
API_KEY_HEADER = "X-MBX-APIKEY"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RestClient:
    def __init__(self, host, api_key="", secret_key="", recv_window=DEFAULT_RECV_WINDOW,
                 timeout=DEFAULT_TIMEOUT, user_agent=DEFAULT_USER_AGENT, session=None, clock=None):
        """
        :param host: base URL, e.g. https://fapi.binance.com (testnets/mirrors welcome)
        :param api_key: public key, sent as X-MBX-APIKEY; '' allows public calls only
        :param secret_key: signing secret, never transmitted
        :param recv_window: venue tolerance for clock skew, ms
        :param timeout: per-request timeout in seconds, passed to requests
        :param session: optional requests.Session (pooled connections)
        :param clock: callable returning epoch seconds, defaults to time.time
        """
        if not host:
            raise ConfigError("host is required")
        api_key = api_key or ""
        if "\r" in api_key or "\n" in api_key:
            raise ConfigError("api_key contains line breaks")
        try:
            # header values go out latin-1 encoded
            api_key.encode("latin-1")
        except UnicodeEncodeError as e:
            raise ConfigError("api_key contains characters not allowed in an HTTP header") from e
        self.host = str(host).rstrip("/")
        self.recv_window = int(recv_window)
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.session = session or requests.Session()
        self._api_key = api_key
        self._signer = Signer(secret_key or "")
        self._clock = clock or time.time

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # -------------- request builder --------------
    def build_signed_request(self, params=None):
        """
        Copy params, add recvWindow and timestamp, serialize in key order.
        Raises ClockError when no timestamp can be obtained.
        """
        req = {str(k): str(v) for k, v in (params or {}).items()}
        req["recvWindow"] = str(self.recv_window)
        req["timestamp"] = str(get_timestamp(self._clock))
        return canonical_query(req)

    # -------------- unauthenticated --------------
    def get(self, endpoint, query=""):
        url = self.host + endpoint
        if query:
            url += "?" + query
        return self._send("GET", endpoint, url, self._build_headers())

    def post(self, endpoint):
        # no body, so no form content type
        return self._send("POST", endpoint, self.host + endpoint,
                          self._build_headers(api_key=True))

    def put(self, endpoint, key):
        return self._send("PUT", endpoint, self.host + endpoint,
                          self._build_headers(api_key=True, form=True), data=f"listenKey={key}")

    def delete(self, endpoint, key):
        return self._send("DELETE", endpoint, self.host + endpoint,
                          self._build_headers(api_key=True, form=True), data=f"listenKey={key}")

    # -------------- authenticated --------------
    # signed payload always travels in the URL query string, even for POST/DELETE
    def get_signed(self, endpoint, query):
        return self._send("GET", endpoint, self._signed_url(endpoint, query),
                          self._build_headers(api_key=True))

    def post_signed(self, endpoint, query):
        return self._send("POST", endpoint, self._signed_url(endpoint, query),
                          self._build_headers(api_key=True))

    def delete_signed(self, endpoint, query):
        return self._send("DELETE", endpoint, self._signed_url(endpoint, query),
                          self._build_headers(api_key=True))

    # -------------- helpers --------------
    def _signed_url(self, endpoint, query):
        return f"{self.host}{endpoint}?{self._signer.signed_query(query)}"

    def _build_headers(self, api_key=False, form=False):
        headers = {"User-Agent": self.user_agent}
        if api_key:
            headers[API_KEY_HEADER] = self._api_key
        if form:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    def _send(self, method, endpoint, url, headers, data=None):
        # url may carry the signature, log the endpoint only
        logger.debug("%s %s", method, endpoint)
        try:
            resp = self.session.request(method, url, headers=headers, data=data, timeout=self.timeout)
            body = resp.text
        except requests.exceptions.RequestException as e:
            logger.error("%s %s transport failure: %s", method, endpoint, e)
            raise TransportError(f"{method} {endpoint} failed: {e}", reason=e) from e
        return self.handler(resp.status_code, body, method, endpoint)

    def handler(self, status_code, body, method="", endpoint=""):
        if status_code == 200:
            return body
        logger.warning("%s %s -> HTTP %s %s", method, endpoint, status_code, (body or "")[:200])
        raise ApiError(status_code, body or "")
