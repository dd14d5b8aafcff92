"""바이낸스 REST API 클라이언트 라이브러리"""
from .config import ClientSettings
from .core.exceptions import (
    BinanceClientException,
    TransportError,
    APIError,
    MalformedResponseError,
    SigningError,
    ValidationException,
)
from .models.request import (
    Method,
    SecurityLevel,
    Request,
    with_recv_window,
    with_header,
)
from .services.binance import BinanceClient, Service, ENDPOINTS, Endpoint

__version__ = "1.0.0"

__all__ = [
    "ClientSettings",
    "BinanceClientException",
    "TransportError",
    "APIError",
    "MalformedResponseError",
    "SigningError",
    "ValidationException",
    "Method",
    "SecurityLevel",
    "Request",
    "with_recv_window",
    "with_header",
    "BinanceClient",
    "Service",
    "ENDPOINTS",
    "Endpoint",
]
