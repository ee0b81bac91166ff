# -*- coding: utf-8 -*-
# tests/test_rest.py

from unittest.mock import Mock

import pytest
import requests

from xconnect.core.kernel.errors import ApiError, ClockError, ConfigError, TransportError
from xconnect.drivers.binance.rest import API_KEY_HEADER, FORM_CONTENT_TYPE, RestClient
from xconnect.drivers.binance.signer import sign

from conftest import FIXED_TS, HOST, SECRET_KEY, fixed_clock, last_call, make_response


class TestBuildSignedRequest:
    def test_empty_params_still_get_window_and_timestamp(self, rest):
        assert rest.build_signed_request({}) == f"recvWindow=5000&timestamp={FIXED_TS}"
        assert rest.build_signed_request() == f"recvWindow=5000&timestamp={FIXED_TS}"

    def test_params_are_sorted_with_injected_fields(self, rest):
        query = rest.build_signed_request({"symbol": "BTCUSDT", "orderId": 42})
        assert query == f"orderId=42&recvWindow=5000&symbol=BTCUSDT&timestamp={FIXED_TS}"

    def test_caller_params_not_mutated(self, rest):
        params = {"symbol": "BTCUSDT"}
        rest.build_signed_request(params)
        assert params == {"symbol": "BTCUSDT"}

    def test_custom_recv_window(self, session):
        client = RestClient(HOST, recv_window=10000, session=session, clock=fixed_clock)
        assert client.build_signed_request({}).startswith("recvWindow=10000&")

    def test_clock_failure_aborts(self, session):
        def broken():
            raise OSError("no clock")
        client = RestClient(HOST, session=session, clock=broken)
        with pytest.raises(ClockError):
            client.build_signed_request({"symbol": "BTCUSDT"})
        session.request.assert_not_called()

    def test_non_positive_clock_is_clock_error(self, session):
        client = RestClient(HOST, session=session, clock=lambda: 0)
        with pytest.raises(ClockError):
            client.build_signed_request({})


class TestConstruction:
    def test_host_is_required(self, session):
        with pytest.raises(ConfigError):
            RestClient(None, session=session)

    def test_host_trailing_slash_dropped(self, session):
        client = RestClient(HOST + "/", session=session)
        client.get("/fapi/v1/ping")
        assert last_call(session)[1] == HOST + "/fapi/v1/ping"

    def test_api_key_with_line_break_rejected(self, session):
        with pytest.raises(ConfigError):
            RestClient(HOST, api_key="abc\r\nX-Evil: 1", session=session)

    @pytest.mark.parametrize("api_key", ["ключ", "key☃", "密钥"])
    def test_api_key_not_header_encodable_rejected(self, session, api_key):
        with pytest.raises(ConfigError):
            RestClient(HOST, api_key=api_key, session=session)
        session.request.assert_not_called()

    def test_latin1_api_key_accepted(self, session):
        client = RestClient(HOST, api_key="clé", session=session)
        client.get_signed("/x", "a=1")
        assert last_call(session)[2]["headers"][API_KEY_HEADER] == "clé"


class TestUnauthenticated:
    def test_get_without_query_targets_bare_endpoint(self, rest, session):
        rest.get("/fapi/v1/exchangeInfo")
        method, url, kwargs = last_call(session)
        assert method == "GET"
        assert url == HOST + "/fapi/v1/exchangeInfo"
        assert kwargs["headers"] == {"User-Agent": "xconnect"}
        assert kwargs["data"] is None
        assert kwargs["timeout"] == 10

    def test_get_with_query(self, rest, session):
        rest.get("/fapi/v1/depth", "limit=5&symbol=BTCUSDT")
        assert last_call(session)[1] == HOST + "/fapi/v1/depth?limit=5&symbol=BTCUSDT"

    def test_post_sends_key_without_content_type(self, rest, session):
        rest.post("/fapi/v1/listenKey")
        method, url, kwargs = last_call(session)
        assert method == "POST"
        assert url == HOST + "/fapi/v1/listenKey"
        assert kwargs["data"] is None
        assert kwargs["headers"] == {"User-Agent": "xconnect", API_KEY_HEADER: "test_key"}

    @pytest.mark.parametrize("verb", ["put", "delete"])
    def test_session_key_body(self, rest, session, verb):
        getattr(rest, verb)("/fapi/v1/listenKey", "abc123")
        method, url, kwargs = last_call(session)
        assert method == verb.upper()
        assert url == HOST + "/fapi/v1/listenKey"
        assert kwargs["data"] == "listenKey=abc123"
        assert kwargs["headers"]["Content-Type"] == FORM_CONTENT_TYPE


class TestAuthenticated:
    @pytest.mark.parametrize("verb", ["get_signed", "post_signed", "delete_signed"])
    def test_signature_travels_in_query_string(self, rest, session, verb):
        query = rest.build_signed_request({"symbol": "BTCUSDT"})
        getattr(rest, verb)("/fapi/v1/order", query)
        method, url, kwargs = last_call(session)
        assert method == verb.split("_")[0].upper()
        assert url == f"{HOST}/fapi/v1/order?{query}&signature={sign(SECRET_KEY, query)}"
        assert kwargs["data"] is None
        assert kwargs["headers"][API_KEY_HEADER] == "test_key"
        assert "Content-Type" not in kwargs["headers"]
        assert kwargs["headers"]["User-Agent"] == "xconnect"


class TestResponseClassification:
    def test_200_returns_raw_text(self, rest, session):
        session.request.return_value = make_response(200, '{"a": 1}')
        assert rest.get("/x") == '{"a": 1}'

    @pytest.mark.parametrize("status", [201, 204, 400, 401, 404, 418, 429, 500, 503])
    def test_any_other_status_is_api_error(self, rest, session, status):
        session.request.return_value = make_response(status, '{"code":-1,"msg":"nope"}')
        with pytest.raises(ApiError) as exc:
            rest.get("/x")
        assert exc.value.status_code == status
        assert exc.value.body == '{"code":-1,"msg":"nope"}'

    def test_empty_error_body_is_still_api_error(self, rest, session):
        session.request.return_value = make_response(502, "")
        with pytest.raises(ApiError) as exc:
            rest.get_signed("/x", "a=1")
        assert exc.value.status_code == 502
        assert exc.value.body == ""

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
        requests.exceptions.InvalidURL("bad"),
    ])
    def test_network_failures_are_transport_errors(self, rest, session, error):
        session.request.side_effect = error
        with pytest.raises(TransportError) as exc:
            rest.get("/x")
        assert exc.value.reason is error
        assert exc.value.__cause__ is error
        assert session.request.call_count == 1

    def test_default_session_is_requests_session(self):
        client = RestClient(HOST)
        assert isinstance(client.session, requests.Session)
        client.close()

    def test_context_manager_closes_session(self):
        s = Mock()
        with RestClient(HOST, session=s):
            pass
        s.close.assert_called_once()
