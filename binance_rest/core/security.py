"""HMAC 서명 유틸리티"""
import hashlib
import hmac

from .exceptions import SigningError


def hmac_sha256(secret: str, payload: str) -> str:
    """
    HMAC SHA256 서명 생성

    Args:
        secret: API 시크릿
        payload: 서명 대상 문자열 (쿼리 스트링 + 폼 본문)

    Returns:
        소문자 16진수 서명 문자열

    Raises:
        SigningError: 시크릿이 없거나 서명 계산에 실패한 경우
    """
    if not secret:
        raise SigningError("Secret key is required for signed requests")

    try:
        return hmac.new(
            secret.encode("utf-8"),
            payload.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
    except (TypeError, ValueError, AttributeError) as e:
        raise SigningError(f"Failed to sign payload: {str(e)}") from e
