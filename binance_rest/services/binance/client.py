"""바이낸스 API 클라이언트"""
import ssl
import time
from typing import Any, Dict, Optional, Union
import httpx
from loguru import logger
from pydantic import ValidationError

from binance_rest.config.settings import (
    ClientSettings,
    BINANCE_MAINNET_BASE_URL,
    BINANCE_TESTNET_BASE_URL,
)
from binance_rest.core.exceptions import (
    BinanceClientException,
    TransportError,
    APIError,
    MalformedResponseError,
    ValidationException,
)
from binance_rest.core.security import hmac_sha256
from binance_rest.models.request import (
    PreparedRequest,
    Request,
    RequestOption,
    SecurityLevel,
)
from binance_rest.models.schemas import APIErrorEnvelope
from .endpoints import ENDPOINTS
from .service import Service


DEFAULT_TIMEOUT = 30.0


def current_timestamp() -> int:
    """현재 시각 (밀리초)"""
    return int(time.time() * 1000)


class BinanceClient:
    """
    바이낸스 REST API 클라이언트

    api_key, api_secret, base_url, time_offset은 요청 처리 중 읽기만 합니다.
    여러 태스크에서 동시에 사용할 경우 첫 요청 전에 설정을 마치거나
    설정 변경을 외부에서 동기화해야 합니다.
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: Optional[str] = None,
        testnet: bool = False,
        time_offset: int = 0,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        verify: Optional[Union[bool, ssl.SSLContext]] = None,
    ):
        """
        초기화

        Args:
            api_key: API 키
            api_secret: API 시크릿
            base_url: 기본 URL (지정하지 않으면 testnet 여부로 결정)
            testnet: 테스트넷 사용 여부
            time_offset: 로컬 시각 - 서버 시각 (밀리초)
            timeout: HTTP 요청 타임아웃 (초, 기본 30)
            transport: httpx 전송 계층 (테스트 모킹 등)
            http_client: 외부에서 생성한 httpx.AsyncClient
            verify: TLS 검증 설정 (bool 또는 SSLContext, 기본 True)

        Raises:
            ValidationException: http_client와 timeout/transport/verify를 함께 지정한 경우
        """
        if http_client is not None:
            conflicting = [
                name for name, value in (
                    ("timeout", timeout), ("transport", transport), ("verify", verify),
                )
                if value is not None
            ]
            if conflicting:
                raise ValidationException(
                    f"{', '.join(conflicting)} cannot be combined with http_client; "
                    "configure the httpx.AsyncClient instead"
                )

        self.api_key = api_key
        self.api_secret = api_secret
        self.testnet = testnet
        self.base_url = base_url or (
            BINANCE_TESTNET_BASE_URL if testnet else BINANCE_MAINNET_BASE_URL
        )
        self.time_offset = time_offset
        self.client = http_client or httpx.AsyncClient(
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
            transport=transport,
            verify=True if verify is None else verify,
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> "BinanceClient":
        """설정 객체로 클라이언트 생성 (http_client를 넘기면 settings.timeout은 사용하지 않음)"""
        if "http_client" not in kwargs:
            kwargs.setdefault("timeout", settings.timeout)
        return cls(
            api_key=settings.api_key,
            api_secret=settings.api_secret,
            base_url=settings.resolved_base_url,
            testnet=settings.testnet,
            time_offset=settings.time_offset,
            **kwargs,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.aclose()

    async def close(self) -> None:
        """클라이언트 종료"""
        await self.client.aclose()

    def set_api_endpoint(self, base_url: str) -> "BinanceClient":
        """기본 URL 변경 (다음 요청부터 적용)"""
        self.base_url = base_url
        return self

    def parse_request(self, request: Request, *options: RequestOption) -> PreparedRequest:
        """
        요청 옵션 적용, 인증 헤더 추가, 서명 후 전송할 요청 생성

        Args:
            request: 전송할 요청
            *options: 런타임 옵션 (순서대로 적용)

        Returns:
            URL, 헤더, 본문이 확정된 요청

        Raises:
            SigningError: 서명 생성 실패
        """
        for option in options:
            option(request)

        # 요청의 쿼리 맵은 변경하지 않음
        query = request.query.copy()
        query_string = query.encode()
        body_string = request.form.encode()
        headers: Dict[str, str] = dict(request.headers)
        body: Optional[bytes] = None

        if request.body is not None:
            body = request.body
        elif body_string:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            body = body_string.encode("utf-8")

        if request.recv_window is not None and request.recv_window > 0:
            query.set("recvWindow", request.recv_window)
            query_string = query.encode()

        if request.security in (SecurityLevel.API_KEY, SecurityLevel.SIGNED):
            headers["X-MBX-APIKEY"] = self.api_key

        if request.security == SecurityLevel.SIGNED:
            query_string = query.encode()
            timestamp = current_timestamp() - self.time_offset
            if query_string:
                query_string += "&"
            query_string += f"timestamp={timestamp}"
            # 서명 대상은 전송되는 쿼리 스트링 + 폼 본문 그대로
            signature = hmac_sha256(self.api_secret, f"{query_string}{body_string}")
            query_string += f"&signature={signature}"

        url = f"{self.base_url}{request.endpoint}"
        if query_string:
            url = f"{url}?{query_string}"

        return PreparedRequest(
            method=request.method.value,
            url=url,
            headers=headers,
            body=body,
        )

    async def dispatch(
        self,
        request: Request,
        *options: RequestOption,
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        API 요청

        Args:
            request: 전송할 요청 (한 번만 사용 가능)
            *options: 런타임 옵션
            timeout: 이 요청에만 적용할 타임아웃 (초)

        Returns:
            응답 본문 (bytes)

        Raises:
            TransportError: 연결/DNS/타임아웃 오류
            APIError: 거래소 에러 응답
            MalformedResponseError: 해석할 수 없는 에러 응답
        """
        response = await self.send(request, *options, timeout=timeout)
        return response.content

    async def send(
        self,
        request: Request,
        *options: RequestOption,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """요청 전송 후 httpx.Response 반환 (에러 응답은 dispatch와 같이 예외 발생)"""
        if request.dispatched:
            raise ValidationException(f"Request already dispatched: {request!r}")
        request.dispatched = True

        prepared = self.parse_request(request, *options)

        kwargs: Dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug(f"request: {prepared.method} {prepared.url}")
        try:
            response = await self.client.request(
                prepared.method,
                prepared.url,
                headers=prepared.headers,
                content=prepared.body,
                **kwargs,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Request failed: {prepared.method} {request.endpoint} - {str(e)}")
            raise TransportError(f"Request failed: {str(e)}", details=e) from e

        data = response.content
        logger.debug(f"response: {response.status_code} {data!r}")

        if response.status_code >= 400:
            raise self._decode_error(response.status_code, data)
        return response

    def _decode_error(self, status_code: int, data: bytes) -> BinanceClientException:
        """에러 응답 본문을 예외로 변환"""
        envelope: Optional[APIErrorEnvelope] = None
        try:
            envelope = APIErrorEnvelope.model_validate_json(data)
        except ValidationError as e:
            logger.debug(f"failed to unmarshal error response: {e}")

        if envelope is None or not envelope.is_valid():
            logger.error(f"HTTP error: {status_code} - {data!r}")
            return MalformedResponseError(
                f"HTTP error: {status_code}",
                response=data,
                status_code=status_code,
            )

        logger.error(f"API error: {status_code} - code={envelope.code}, msg={envelope.msg}")
        return APIError(envelope.code, envelope.msg, status_code=status_code)

    def service(self, name: str) -> Service:
        """
        엔드포인트 이름으로 서비스 생성

        Raises:
            ValidationException: 등록되지 않은 엔드포인트
        """
        endpoint = ENDPOINTS.get(name)
        if endpoint is None:
            raise ValidationException(f"Unknown endpoint: {name}")
        return Service(self, endpoint, name)

    async def call(
        self,
        name: str,
        *options: RequestOption,
        timeout: Optional[float] = None,
        **params: Any,
    ) -> Any:
        """엔드포인트 이름과 파라미터로 바로 요청"""
        return await self.service(name).params(**params).do(*options, timeout=timeout)

    async def ping(self) -> bool:
        """
        서버 연결 테스트

        Returns:
            연결 성공 여부
        """
        try:
            await self.call("ping")
            return True
        except BinanceClientException:
            return False

    async def get_server_time(self) -> int:
        """
        서버 시간 조회

        Returns:
            서버 시간 (밀리초)
        """
        result = await self.call("server_time")
        return result.server_time

    async def sync_time(self) -> int:
        """
        서버 시간과 로컬 시각 차이를 time_offset에 반영

        Returns:
            새 time_offset (밀리초)
        """
        server_time = await self.get_server_time()
        self.time_offset = current_timestamp() - server_time
        logger.info(f"Time offset synchronized: {self.time_offset}ms")
        return self.time_offset
