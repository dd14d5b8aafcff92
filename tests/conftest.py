"""테스트 설정"""
import json
from typing import Any, Callable, List

import httpx
import pytest

from binance_rest.services.binance import client as client_module
from binance_rest.services.binance import BinanceClient


TEST_API_KEY = "test_api_key"
TEST_API_SECRET = "testsecret"
TEST_BASE_URL = "https://api.binance.com"
FIXED_TIMESTAMP = 1700000000000


class RequestRecorder:
    """MockTransport 핸들러: 요청을 기록하고 고정 응답 반환"""

    def __init__(self, status_code: int = 200, body: Any = None, content: bytes = None):
        self.status_code = status_code
        self.content = content if content is not None else json.dumps(
            {} if body is None else body
        ).encode()
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fixed_timestamp(monkeypatch):
    """서명 timestamp 고정"""
    monkeypatch.setattr(client_module, "current_timestamp", lambda: FIXED_TIMESTAMP)
    return FIXED_TIMESTAMP


@pytest.fixture
def make_client() -> Callable[..., BinanceClient]:
    """MockTransport를 주입한 클라이언트 팩토리"""
    def factory(handler: Callable[[httpx.Request], Any] = None, **kwargs: Any) -> BinanceClient:
        handler = handler or RequestRecorder()
        kwargs.setdefault("api_key", TEST_API_KEY)
        kwargs.setdefault("api_secret", TEST_API_SECRET)
        kwargs.setdefault("base_url", TEST_BASE_URL)
        return BinanceClient(transport=httpx.MockTransport(handler), **kwargs)
    return factory
