"""바이낸스 API 엔드포인트 디스크립터"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from binance_rest.models.request import Method, SecurityLevel
from binance_rest.models import schemas
from .decoders import parse_klines


@dataclass(frozen=True)
class Endpoint:
    """
    엔드포인트 하나의 선언적 정의

    Attributes:
        method: HTTP 메서드
        path: API 경로
        security: 인증 수준
        required: 필수 파라미터 이름
        optional: 선택 파라미터 이름 (recvWindow는 항상 허용)
        form: True면 파라미터를 폼 본문으로 전송
        response: 응답 타입 (pydantic 모델 또는 List[...])
        decoder: 파싱된 JSON을 직접 변환하는 함수 (response보다 우선)
    """
    method: Method
    path: str
    security: SecurityLevel = SecurityLevel.SIGNED
    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()
    form: bool = False
    response: Any = None
    decoder: Optional[Callable[[Any], Any]] = None


GET = Method.GET
POST = Method.POST

ENDPOINTS: Dict[str, Endpoint] = {
    # 시스템
    "ping": Endpoint(GET, "/api/v3/ping", SecurityLevel.NONE),
    "server_time": Endpoint(
        GET, "/api/v3/time", SecurityLevel.NONE, response=schemas.ServerTime,
    ),
    "user_data_stream": Endpoint(
        POST, "/api/v3/userDataStream", SecurityLevel.API_KEY, response=schemas.ListenKey,
    ),

    # Alpha 시세 조회
    "alpha_quote_assets": Endpoint(
        GET, "/sapi/v1/alpha-trade/get-from-asset", response=List[str],
    ),
    "alpha_token_info": Endpoint(
        GET, "/sapi/v1/capital/alpha/config/getall", response=List[schemas.TokenConfig],
    ),
    "alpha_exchange_info": Endpoint(
        GET, "/sapi/v1/alpha-trade/get-exchange-info", response=schemas.ExchangeInfo,
    ),
    "alpha_commission_fee": Endpoint(
        GET, "/sapi/v1/alpha-trade/get-fee-rate",
        required=("symbol",), response=schemas.CommissionFee,
    ),
    "alpha_klines": Endpoint(
        GET, "/sapi/v1/alpha-trade/market/klines",
        required=("symbol", "interval"),
        optional=("startTime", "endTime", "limit"),
        decoder=parse_klines,
    ),
    "alpha_ticker": Endpoint(
        GET, "/sapi/v1/alpha-trade/market/ticker",
        required=("symbol",), response=schemas.Ticker,
    ),
    "alpha_ticker_price": Endpoint(
        GET, "/sapi/v1/alpha-trade/market/ticker-price",
        required=("symbol",), response=schemas.TickerPrice,
    ),
    "alpha_agg_trades": Endpoint(
        GET, "/sapi/v1/alpha-trade/market/agg-trades",
        required=("symbol",),
        optional=("fromId", "startTime", "endTime", "limit"),
        response=List[schemas.AggTrade],
    ),
    "alpha_book_ticker": Endpoint(
        GET, "/sapi/v1/alpha-trade/market/book-ticker",
        required=("symbol",), response=schemas.BookTicker,
    ),
    "alpha_depth": Endpoint(
        GET, "/sapi/v1/alpha-trade/market/depth",
        required=("symbol",), optional=("limit",), response=schemas.Depth,
    ),

    # Alpha 주문
    "alpha_listen_key": Endpoint(
        POST, "/sapi/v1/alpha-trade/get-listen-key", response=schemas.ListenKey,
    ),
    "alpha_place_order": Endpoint(
        POST, "/sapi/v1/alpha-trade/order/place",
        required=("baseAsset", "quoteAsset", "side", "quantity", "price"),
        optional=("clientOrderId", "walletType"),
        form=True, response=schemas.PlaceOrderResponse,
    ),
    "alpha_cancel_order": Endpoint(
        POST, "/sapi/v1/alpha-trade/order/cancel",
        required=("symbol", "orderId"),
        form=True, response=schemas.CancelOrderResponse,
    ),
    "alpha_cancel_all_orders": Endpoint(
        POST, "/sapi/v1/alpha-trade/order/cancel-all",
        optional=("symbol", "baseAsset"),
        form=True, response=schemas.CancelAllOrdersResponse,
    ),
    "alpha_open_orders": Endpoint(
        GET, "/sapi/v1/alpha-trade/order/get-open-order",
        optional=("symbol", "side"), response=List[schemas.Order],
    ),
    "alpha_order_history": Endpoint(
        GET, "/sapi/v1/alpha-trade/order/get-order-history",
        optional=("baseAsset", "side", "orderStatus", "startTime", "endTime", "limit", "pageId"),
        response=List[schemas.Order],
    ),
    "alpha_order_detail": Endpoint(
        GET, "/sapi/v1/alpha-trade/order/get-order-detail",
        required=("symbol", "orderId"), response=schemas.Order,
    ),
    "alpha_user_trades": Endpoint(
        GET, "/sapi/v1/alpha-trade/order/get-user-trades",
        optional=("baseAsset", "side", "orderId", "startTime", "endTime", "limit", "pageId"),
        response=List[schemas.Trade],
    ),

    # Alpha 자산
    "alpha_assets": Endpoint(
        GET, "/sapi/v1/asset/get-alpha-asset", response=List[schemas.AlphaAsset],
    ),
    "alpha_token_mapping": Endpoint(
        GET, "/sapi/v1/alpha-trade/token/all/list", response=List[schemas.TokenMapping],
    ),
    "alpha_withdraw": Endpoint(
        POST, "/sapi/v1/capital/alpha-withdraw/apply",
        required=("network", "alphaId", "contractAddress", "address", "amount"),
        optional=("addressTag", "clientOrderId"),
        form=True, response=schemas.AlphaWithdrawResponse,
    ),
    "alpha_withdraw_history": Endpoint(
        GET, "/sapi/v1/capital/alpha-withdraw/history",
        optional=("alphaId", "clientOrderId", "status", "startTime", "endTime", "offset", "limit", "idList"),
        response=List[schemas.AlphaWithdrawHistory],
    ),
    "alpha_deposit_history": Endpoint(
        GET, "/sapi/v1/capital/alpha-deposit/history",
        optional=("alphaId", "txId", "status", "startTime", "endTime", "includeSource", "offset", "limit"),
        response=List[schemas.AlphaDepositHistory],
    ),
    "alpha_deposit_address": Endpoint(
        GET, "/sapi/v1/capital/alpha-deposit/address",
        required=("network",), response=schemas.AlphaDepositAddress,
    ),

    # Convert
    "convert_exchange_info": Endpoint(
        GET, "/sapi/v1/convert/exchangeInfo",
        optional=("fromAsset", "toAsset"), response=List[schemas.ConvertPair],
    ),
    "convert_asset_info": Endpoint(
        GET, "/sapi/v1/convert/assetInfo", response=List[schemas.ConvertAssetInfo],
    ),
    "convert_get_quote": Endpoint(
        POST, "/sapi/v1/convert/getQuote",
        required=("fromAsset", "toAsset"),
        optional=("fromAmount", "toAmount", "walletType", "validTime"),
        response=schemas.ConvertQuote,
    ),
    "convert_accept_quote": Endpoint(
        POST, "/sapi/v1/convert/acceptQuote",
        required=("quoteId",), response=schemas.ConvertAcceptQuote,
    ),
    "convert_order_status": Endpoint(
        GET, "/sapi/v1/convert/orderStatus",
        optional=("orderId", "quoteId"), response=schemas.ConvertOrderStatus,
    ),
    "convert_trade_flow": Endpoint(
        GET, "/sapi/v1/convert/tradeFlow",
        required=("startTime", "endTime"), optional=("limit",),
        response=schemas.ConvertTradeHistory,
    ),

    # Sub-account
    "sub_account_list": Endpoint(
        GET, "/sapi/v1/sub-account/list", response=schemas.SubAccountList,
    ),
    "sub_account_assets": Endpoint(
        GET, "/sapi/v3/sub-account/assets",
        optional=("email",), response=schemas.SubAccountAssets,
    ),
    "sub_account_spot_summary": Endpoint(
        GET, "/sapi/v1/sub-account/spotSummary",
        optional=("email", "page", "size"), response=schemas.SpotSummary,
    ),
    "sub_account_universal_transfer": Endpoint(
        POST, "/sapi/v1/sub-account/universalTransfer",
        required=("asset", "amount"),
        optional=("fromEmail", "toEmail", "fromAccountType", "toAccountType"),
        response=schemas.CreateUniversalTransferResponse,
    ),
    "sub_account_universal_transfer_history": Endpoint(
        GET, "/sapi/v1/sub-account/universalTransfer",
        optional=("fromEmail", "toEmail", "startTime", "endTime", "page", "limit"),
        response=schemas.ListUniversalTransferResponse,
    ),

    # Futures (선물 기본 URL로 생성한 클라이언트에서 사용)
    "futures_open_interest": Endpoint(
        GET, "/fapi/v1/openInterest", SecurityLevel.NONE,
        required=("symbol",), response=schemas.OpenInterest,
    ),
}
