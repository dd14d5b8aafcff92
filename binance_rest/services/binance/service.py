"""엔드포인트 디스크립터 기반 범용 서비스"""
from typing import Any, Dict, Optional, TYPE_CHECKING

from binance_rest.core.exceptions import ValidationException
from binance_rest.models.request import Request, RequestOption
from .decoders import decode_response
from .endpoints import Endpoint

RECV_WINDOW = "recvWindow"

if TYPE_CHECKING:
    from .client import BinanceClient


class Service:
    """
    엔드포인트 하나에 대한 요청 빌더

    파라미터는 설정한 순서대로 보관되며, None 값은 전송하지 않습니다.
    list/tuple 값은 같은 키로 여러 번 전송됩니다.
    엔드포인트에 정의되지 않은 파라미터는 전송 전에 거부합니다.

    Example:
        klines = await (
            client.service("alpha_klines")
            .set("symbol", "ALPHA_175USDT")
            .set("interval", "1h")
            .do()
        )
    """

    def __init__(self, client: "BinanceClient", endpoint: Endpoint, name: str = ""):
        self.client = client
        self.endpoint = endpoint
        self.name = name or endpoint.path
        self._params: Dict[str, Any] = {}

    def set(self, key: str, value: Any) -> "Service":
        """파라미터 설정 (같은 키는 덮어씀)"""
        self._params[key] = value
        return self

    def params(self, **kwargs: Any) -> "Service":
        for key, value in kwargs.items():
            self.set(key, value)
        return self

    def recv_window(self, recv_window: int) -> "Service":
        """recvWindow 설정 (0 이하는 전송하지 않음)"""
        return self.set(RECV_WINDOW, recv_window)

    def build_request(self) -> Request:
        """
        새 Request 생성

        Raises:
            ValidationException: 필수 파라미터가 없거나 정의되지 않은 파라미터가 있는 경우
        """
        allowed = set(self.endpoint.required) | set(self.endpoint.optional) | {RECV_WINDOW}
        unknown = [key for key in self._params if key not in allowed]
        if unknown:
            raise ValidationException(
                f"Unknown parameter(s) for {self.name}: {', '.join(unknown)}"
            )

        missing = [
            key for key in self.endpoint.required
            if self._params.get(key) is None
        ]
        if missing:
            raise ValidationException(
                f"Missing required parameter(s) for {self.name}: {', '.join(missing)}"
            )

        request = Request(self.endpoint.method, self.endpoint.path, self.endpoint.security)
        for key, value in self._params.items():
            if value is None:
                continue
            if key == RECV_WINDOW:
                if self.endpoint.form:
                    if value > 0:
                        request.set_form_param(key, value)
                else:
                    request.recv_window = value
            elif self.endpoint.form:
                if isinstance(value, (list, tuple)):
                    for item in value:
                        request.add_form_param(key, item)
                else:
                    request.set_form_param(key, value)
            elif isinstance(value, (list, tuple)):
                for item in value:
                    request.add_param(key, item)
            else:
                request.set_param(key, value)
        return request

    async def do(self, *options: RequestOption, timeout: Optional[float] = None) -> Any:
        """
        요청 전송 후 응답 타입으로 변환

        Args:
            *options: 런타임 옵션 (with_recv_window 등)
            timeout: 요청 타임아웃 (초)

        Returns:
            엔드포인트 응답 타입의 객체
        """
        request = self.build_request()
        response = await self.client.send(request, *options, timeout=timeout)
        return decode_response(self.endpoint, response.content, response.status_code)
