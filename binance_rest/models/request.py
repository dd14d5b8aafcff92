"""API 요청 모델"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlencode


class Method(str, Enum):
    """HTTP 메서드"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class SecurityLevel(str, Enum):
    """엔드포인트 인증 수준"""
    NONE = "NONE"          # 공개 엔드포인트
    API_KEY = "API_KEY"    # X-MBX-APIKEY 헤더만
    SIGNED = "SIGNED"      # 헤더 + timestamp/signature


def format_value(value: Any) -> str:
    """
    파라미터 값을 거래소가 기대하는 문자열로 변환

    Args:
        value: 파라미터 값

    Returns:
        문자열 값 (bool은 true/false)
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


class Params:
    """순서가 보존되는 다중 값 파라미터 맵"""

    def __init__(self) -> None:
        self._values: Dict[str, List[str]] = {}

    def set(self, key: str, value: Any) -> None:
        self._values[key] = [format_value(value)]

    def add(self, key: str, value: Any) -> None:
        self._values.setdefault(key, []).append(format_value(value))

    def get(self, key: str) -> Optional[str]:
        values = self._values.get(key)
        return values[0] if values else None

    def get_all(self, key: str) -> List[str]:
        return list(self._values.get(key, []))

    def copy(self) -> "Params":
        params = Params()
        params._values = {key: list(values) for key, values in self._values.items()}
        return params

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def encode(self) -> str:
        """키 정렬 순서로 URL 인코딩 (같은 키의 값은 추가된 순서 유지)"""
        return urlencode(
            [(key, value) for key in sorted(self._values) for value in self._values[key]]
        )

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)


class Request:
    """
    전송 전 API 요청

    method, endpoint, security는 생성 후 변경할 수 없습니다.
    파라미터 맵과 recv_window만 전송 전에 수정할 수 있으며,
    한 번 전송된 요청은 재사용할 수 없습니다.
    """

    def __init__(
        self,
        method: Method,
        endpoint: str,
        security: SecurityLevel = SecurityLevel.NONE,
    ):
        self._method = Method(method)
        self._endpoint = endpoint
        self._security = SecurityLevel(security)
        self.query = Params()
        self.form = Params()
        self.recv_window: Optional[int] = None
        self.body: Optional[bytes] = None
        self.headers: Dict[str, str] = {}
        self.dispatched = False

    @property
    def method(self) -> Method:
        return self._method

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def security(self) -> SecurityLevel:
        return self._security

    def set_param(self, key: str, value: Any) -> "Request":
        """쿼리 파라미터 설정 (같은 키는 덮어씀)"""
        self.query.set(key, value)
        return self

    def add_param(self, key: str, value: Any) -> "Request":
        """쿼리 파라미터 추가 (같은 키에 값 누적)"""
        self.query.add(key, value)
        return self

    def set_params(self, params: Dict[str, Any]) -> "Request":
        for key, value in params.items():
            self.set_param(key, value)
        return self

    def set_form_param(self, key: str, value: Any) -> "Request":
        """폼 본문 파라미터 설정"""
        self.form.set(key, value)
        return self

    def add_form_param(self, key: str, value: Any) -> "Request":
        self.form.add(key, value)
        return self

    def set_form_params(self, params: Dict[str, Any]) -> "Request":
        for key, value in params.items():
            self.set_form_param(key, value)
        return self

    def __repr__(self) -> str:
        return f"Request(method={self._method.value}, endpoint={self._endpoint!r}, security={self._security.value})"


@dataclass
class PreparedRequest:
    """서명까지 끝난 전송 직전 요청"""
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[bytes]


# 전송 직전에 요청을 수정하는 런타임 옵션
RequestOption = Callable[[Request], None]


def with_recv_window(recv_window: int) -> RequestOption:
    """recvWindow 설정 옵션 (0 이하는 전송하지 않음)"""
    def option(request: Request) -> None:
        request.recv_window = recv_window
    return option


def with_header(key: str, value: str) -> RequestOption:
    """추가 헤더 설정 옵션"""
    def option(request: Request) -> None:
        request.headers[key] = value
    return option
