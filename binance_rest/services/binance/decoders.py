"""응답 디코딩"""
import json
import math
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Any, List, Optional, TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from binance_rest.core.exceptions import MalformedResponseError
from binance_rest.models.schemas import Kline

if TYPE_CHECKING:
    from .endpoints import Endpoint

# 캔들 배열의 필드 순서
KLINE_FIELDS = (
    ("open_time", int),
    ("open_price", Decimal),
    ("high_price", Decimal),
    ("low_price", Decimal),
    ("close_price", Decimal),
    ("volume", Decimal),
    ("close_time", int),
    ("quote_asset_volume", Decimal),
    ("number_of_trades", int),
    ("taker_buy_base_asset_volume", Decimal),
    ("taker_buy_quote_asset_volume", Decimal),
    ("ignore", str),
)


def _convert(value: Any, target: type) -> Any:
    # 숫자 필드는 JSON 숫자, 나머지는 문자열만 허용 (타입이 다르면 기본값 유지)
    if target is int:
        if isinstance(value, bool):
            return None
        if isinstance(value, int) or (isinstance(value, float) and math.isfinite(value)):
            return int(value)
        return None
    if not isinstance(value, str):
        return None
    if target is Decimal:
        try:
            number = Decimal(value)
        except InvalidOperation:
            return None
        return number if number.is_finite() else None
    return value


def parse_klines(rows: Any) -> List[Kline]:
    """
    배열의 배열 형태 캔들 응답을 위치 기반으로 변환

    필드 수가 12개 미만인 행은 오류 없이 건너뜁니다.

    Args:
        rows: 파싱된 JSON (list of list)

    Returns:
        캔들 데이터 리스트
    """
    if not isinstance(rows, list):
        raise TypeError(f"expected kline array, got {type(rows).__name__}")

    klines = []
    for row in rows:
        if not isinstance(row, list):
            raise TypeError(f"expected kline row array, got {type(row).__name__}")
        if len(row) < len(KLINE_FIELDS):
            continue

        values = {}
        for (name, target), raw in zip(KLINE_FIELDS, row):
            converted = _convert(raw, target)
            if converted is not None:
                values[name] = converted
        klines.append(Kline(**values))
    return klines


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_response(endpoint: "Endpoint", data: bytes, status_code: Optional[int] = None) -> Any:
    """
    성공 응답 본문을 엔드포인트의 응답 타입으로 변환

    Args:
        endpoint: 엔드포인트 정의
        data: 응답 본문
        status_code: HTTP 상태 코드 (오류에 포함)

    Raises:
        MalformedResponseError: 본문이 기대한 형태가 아닌 경우
    """
    try:
        if endpoint.decoder is not None:
            return endpoint.decoder(json.loads(data))
        if endpoint.response is None:
            return json.loads(data) if data else None
        return _adapter(endpoint.response).validate_json(data)
    except (ValueError, TypeError, ValidationError) as e:
        raise MalformedResponseError(
            f"Failed to decode response for {endpoint.path}: {str(e)}",
            response=data,
            status_code=status_code,
        ) from e
