"""커스텀 예외 클래스"""
from typing import Any, Optional


class BinanceClientException(Exception):
    """기본 예외 클래스"""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class TransportError(BinanceClientException):
    """네트워크 계층 예외 (연결, DNS, 타임아웃)"""
    pass


class APIError(BinanceClientException):
    """거래소가 {code, msg} 에러 응답을 반환한 경우"""

    def __init__(self, code: int, msg: str, status_code: Optional[int] = None):
        self.code = code
        self.msg = msg
        self.status_code = status_code
        super().__init__(f"<APIError> code={code}, msg={msg}", details=msg)


class MalformedResponseError(BinanceClientException):
    """응답 본문을 해석할 수 없는 경우 (원본 바이트 포함)"""

    def __init__(
        self,
        message: str,
        response: bytes = b"",
        status_code: Optional[int] = None,
    ):
        self.response = response
        self.status_code = status_code
        super().__init__(message, details=response)


class SigningError(BinanceClientException):
    """서명 생성 실패"""
    pass


class ValidationException(BinanceClientException):
    """요청 구성 오류"""
    pass
