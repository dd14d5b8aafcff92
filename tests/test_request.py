"""요청 빌더 테스트"""
from decimal import Decimal

import pytest

from binance_rest.models.request import (
    Method,
    SecurityLevel,
    Request,
    format_value,
    with_recv_window,
    with_header,
)


def test_set_param_last_write_wins():
    """같은 키에 set_param을 두 번 호출하면 마지막 값만 남는지 테스트"""
    request = Request(Method.GET, "/api/v3/depth")
    request.set_param("limit", 10).set_param("limit", 20)

    assert request.query.get_all("limit") == ["20"]
    assert request.query.encode() == "limit=20"


def test_add_param_accumulates_values():
    """add_param은 같은 키에 값을 누적하는지 테스트"""
    request = Request(Method.GET, "/api/v3/ticker/price")
    request.add_param("symbols", "BTCUSDT").add_param("symbols", "ETHUSDT")

    assert request.query.get_all("symbols") == ["BTCUSDT", "ETHUSDT"]
    assert request.query.encode() == "symbols=BTCUSDT&symbols=ETHUSDT"


def test_builder_returns_same_request():
    """빌더 메서드 체이닝 테스트"""
    request = Request(Method.POST, "/api/v3/order", SecurityLevel.SIGNED)

    assert request.set_param("symbol", "BTCUSDT") is request
    assert request.add_param("side", "BUY") is request
    assert request.set_form_param("quantity", "1") is request
    assert request.set_params({"type": "MARKET"}) is request
    assert request.set_form_params({"price": "1"}) is request


def test_query_encoding_sorts_keys():
    """쿼리 스트링은 키 정렬 순서로 인코딩되는지 테스트"""
    request = Request(Method.GET, "/api/v3/order")
    request.set_param("symbol", "BTCUSDT").set_param("side", "BUY")

    assert request.query.encode() == "side=BUY&symbol=BTCUSDT"


def test_query_encoding_escapes_values():
    """URL 인코딩 테스트"""
    request = Request(Method.GET, "/sapi/v3/sub-account/assets")
    request.set_param("email", "sub user@example.com")

    assert request.query.encode() == "email=sub+user%40example.com"


def test_format_value():
    """파라미터 값 문자열 변환 테스트"""
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(10) == "10"
    assert format_value(0) == "0"
    assert format_value(1.0) == "1"
    assert format_value(0.5) == "0.5"
    assert format_value(Decimal("0.00000001")) == "0.00000001"
    assert format_value(Method.GET) == "GET"
    assert format_value("BTCUSDT") == "BTCUSDT"


def test_method_and_endpoint_are_read_only():
    """method, endpoint, security는 변경할 수 없는지 테스트"""
    request = Request(Method.GET, "/api/v3/time")

    with pytest.raises(AttributeError):
        request.method = Method.POST
    with pytest.raises(AttributeError):
        request.endpoint = "/api/v3/ping"
    with pytest.raises(AttributeError):
        request.security = SecurityLevel.SIGNED


def test_request_defaults():
    """요청 기본값 테스트"""
    request = Request("GET", "/api/v3/time")

    assert request.method is Method.GET
    assert request.security is SecurityLevel.NONE
    assert request.recv_window is None
    assert request.body is None
    assert not request.query
    assert not request.form
    assert request.dispatched is False


def test_request_options_applied_in_order():
    """런타임 옵션 적용 테스트"""
    request = Request(Method.GET, "/api/v3/account", SecurityLevel.SIGNED)

    for option in (with_recv_window(1000), with_recv_window(2000), with_header("X-Test", "1")):
        option(request)

    assert request.recv_window == 2000
    assert request.headers == {"X-Test": "1"}
