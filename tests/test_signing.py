"""요청 서명 테스트"""
import pytest

from binance_rest.core.exceptions import SigningError
from binance_rest.core.security import hmac_sha256
from binance_rest.models.request import (
    Method,
    SecurityLevel,
    Request,
    with_recv_window,
)

from conftest import FIXED_TIMESTAMP, TEST_API_KEY, TEST_BASE_URL


def test_hmac_sha256_known_vector():
    """바이낸스 문서 예제 서명 테스트"""
    payload = (
        "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1"
        "&price=0.1&recvWindow=5000&timestamp=1499827319559"
    )
    secret = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"

    assert hmac_sha256(secret, payload) == (
        "c8db56825ae71d6d79447849e617115f4a920fa2acdcab2b053c4b2838bd6b71"
    )


def test_hmac_sha256_is_deterministic():
    """같은 입력은 항상 같은 서명을 생성하는지 테스트"""
    payload = "side=BUY&symbol=BTCUSDT&timestamp=1700000000000"

    first = hmac_sha256("testsecret", payload)
    second = hmac_sha256("testsecret", payload)

    assert first == second
    assert len(first) == 64  # HMAC SHA256 produces 64 character hex string
    assert first == first.lower()


def test_hmac_sha256_requires_secret():
    """시크릿이 없으면 SigningError 발생"""
    with pytest.raises(SigningError):
        hmac_sha256("", "timestamp=1")


def test_signed_request_url(make_client, fixed_timestamp):
    """서명 요청 URL 생성 테스트"""
    client = make_client()
    request = Request(Method.GET, "/api/v3/order", SecurityLevel.SIGNED)
    request.set_param("symbol", "BTCUSDT").set_param("side", "BUY")

    prepared = client.parse_request(request)

    assert prepared.url == (
        f"{TEST_BASE_URL}/api/v3/order?side=BUY&symbol=BTCUSDT&timestamp={FIXED_TIMESTAMP}"
        "&signature=d0258471727bcadff9c32e55f3266e4ae7220f6fbfdcbb652e54dd068feb628c"
    )
    assert prepared.headers["X-MBX-APIKEY"] == TEST_API_KEY
    assert prepared.method == "GET"
    assert prepared.body is None


def test_signed_request_without_params(make_client, fixed_timestamp):
    """파라미터가 없는 서명 요청은 timestamp만 서명하는지 테스트"""
    client = make_client()
    request = Request(Method.GET, "/sapi/v1/sub-account/list", SecurityLevel.SIGNED)

    prepared = client.parse_request(request)

    assert prepared.url == (
        f"{TEST_BASE_URL}/sapi/v1/sub-account/list?timestamp={FIXED_TIMESTAMP}"
        "&signature=dd273985d88b32eaeeb19cafcc2dbaa9ac658e274cd4095d474395560c4b09b7"
    )


def test_signed_request_with_recv_window(make_client, fixed_timestamp):
    """recvWindow 옵션은 서명 대상 쿼리에 포함되는지 테스트"""
    client = make_client()
    request = Request(Method.GET, "/api/v3/account", SecurityLevel.SIGNED)
    request.set_param("symbol", "BTCUSDT")

    prepared = client.parse_request(request, with_recv_window(5000))

    assert prepared.url == (
        f"{TEST_BASE_URL}/api/v3/account?recvWindow=5000&symbol=BTCUSDT"
        f"&timestamp={FIXED_TIMESTAMP}"
        "&signature=c848f23c14e1e39ab9b87af2e2b433ebc78ab2393952b62660e5229c0c979fdf"
    )


def test_signed_request_signs_form_body(make_client, fixed_timestamp):
    """폼 본문은 쿼리 뒤에 이어서 서명되는지 테스트"""
    client = make_client()
    request = Request(Method.POST, "/sapi/v1/alpha-trade/order/place", SecurityLevel.SIGNED)
    request.set_param("symbol", "ALPHA_1USDT")
    request.set_form_param("side", "BUY").set_form_param("baseAsset", "ALPHA_1")

    prepared = client.parse_request(request)

    assert prepared.body == b"baseAsset=ALPHA_1&side=BUY"
    assert prepared.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert prepared.url.endswith(
        f"?symbol=ALPHA_1USDT&timestamp={FIXED_TIMESTAMP}"
        "&signature=b50504716813793b1f68ff1423439a799dd3b1f982b1e5a0cafac8da83e476ee"
    )


def test_time_offset_applied_to_timestamp(make_client, fixed_timestamp):
    """time_offset 보정 테스트"""
    client = make_client(time_offset=1000)
    request = Request(Method.GET, "/api/v3/account", SecurityLevel.SIGNED)

    prepared = client.parse_request(request)

    assert f"timestamp={FIXED_TIMESTAMP - 1000}&signature=" in prepared.url


def test_recv_window_omitted_by_default(make_client, fixed_timestamp):
    """recvWindow를 설정하지 않으면 전송하지 않는지 테스트"""
    client = make_client()
    request = Request(Method.GET, "/api/v3/account", SecurityLevel.SIGNED)

    prepared = client.parse_request(request)

    assert "recvWindow" not in prepared.url


@pytest.mark.parametrize("recv_window", [0, -1])
def test_non_positive_recv_window_is_unset(make_client, fixed_timestamp, recv_window):
    """0 이하 recvWindow는 전송하지 않는지 테스트"""
    client = make_client()
    request = Request(Method.GET, "/api/v3/account", SecurityLevel.SIGNED)

    prepared = client.parse_request(request, with_recv_window(recv_window))

    assert "recvWindow" not in prepared.url


def test_later_option_overrides_earlier(make_client, fixed_timestamp):
    """나중 옵션이 앞선 옵션을 덮어쓰는지 테스트"""
    client = make_client()
    request = Request(Method.GET, "/api/v3/account", SecurityLevel.SIGNED)

    prepared = client.parse_request(request, with_recv_window(1000), with_recv_window(2000))

    assert "recvWindow=2000&" in prepared.url
    assert "recvWindow=1000" not in prepared.url


def test_public_request_has_no_auth(make_client):
    """NONE 요청은 API 키 헤더와 서명이 없는지 테스트"""
    client = make_client()
    request = Request(Method.GET, "/api/v3/depth")
    request.set_param("symbol", "BTCUSDT")

    prepared = client.parse_request(request)

    assert prepared.url == f"{TEST_BASE_URL}/api/v3/depth?symbol=BTCUSDT"
    assert "X-MBX-APIKEY" not in prepared.headers
    assert "signature" not in prepared.url
    assert "timestamp" not in prepared.url


def test_public_request_without_params_has_no_query(make_client):
    """쿼리가 비어 있으면 '?'를 붙이지 않는지 테스트"""
    client = make_client()

    prepared = client.parse_request(Request(Method.GET, "/api/v3/ping"))

    assert prepared.url == f"{TEST_BASE_URL}/api/v3/ping"


def test_api_key_request_has_header_only(make_client):
    """API_KEY 요청은 헤더만 있고 서명은 없는지 테스트"""
    client = make_client()
    request = Request(Method.POST, "/api/v3/userDataStream", SecurityLevel.API_KEY)

    prepared = client.parse_request(request)

    assert prepared.headers["X-MBX-APIKEY"] == TEST_API_KEY
    assert prepared.url == f"{TEST_BASE_URL}/api/v3/userDataStream"


def test_raw_body_used_verbatim(make_client, fixed_timestamp):
    """원본 본문은 그대로 전송하고 Content-Type을 지정하지 않는지 테스트"""
    client = make_client()
    request = Request(Method.POST, "/api/v3/batch", SecurityLevel.SIGNED)
    request.body = b'{"orders": []}'

    prepared = client.parse_request(request)

    assert prepared.body == b'{"orders": []}'
    assert "Content-Type" not in prepared.headers


def test_signing_error_without_secret(make_client, fixed_timestamp):
    """시크릿 없이 서명 요청 시 SigningError 발생"""
    client = make_client(api_secret="")
    request = Request(Method.GET, "/api/v3/account", SecurityLevel.SIGNED)

    with pytest.raises(SigningError):
        client.parse_request(request)
