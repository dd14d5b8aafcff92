"""Core 패키지"""
from .security import hmac_sha256
from .exceptions import (
    BinanceClientException,
    TransportError,
    APIError,
    MalformedResponseError,
    SigningError,
    ValidationException,
)

__all__ = [
    "hmac_sha256",
    "BinanceClientException",
    "TransportError",
    "APIError",
    "MalformedResponseError",
    "SigningError",
    "ValidationException",
]
