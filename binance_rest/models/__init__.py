"""Models 패키지"""
from .request import (
    Method,
    SecurityLevel,
    Params,
    Request,
    RequestOption,
    PreparedRequest,
    format_value,
    with_recv_window,
    with_header,
)
from .schemas import (
    APIErrorEnvelope,
    ServerTime, ListenKey,
    TokenConfig, ExchangeInfo, CommissionFee, Kline, Ticker, TickerPrice,
    AggTrade, BookTicker, Depth,
    PlaceOrderResponse, CancelOrderResponse, CancelAllOrdersResponse, Order, Trade,
    AlphaAsset, TokenMapping, AlphaWithdrawResponse, AlphaWithdrawHistory,
    AlphaDepositHistory, AlphaDepositAddress,
    ConvertPair, ConvertAssetInfo, ConvertQuote, ConvertAcceptQuote,
    ConvertOrderStatus, ConvertTradeHistory,
    SubAccountList, SubAccountAssets, SpotSummary,
    CreateUniversalTransferResponse, ListUniversalTransferResponse,
    OpenInterest,
)

__all__ = [
    "Method", "SecurityLevel", "Params", "Request", "RequestOption", "PreparedRequest",
    "format_value", "with_recv_window", "with_header",
    "APIErrorEnvelope",
    "ServerTime", "ListenKey",
    "TokenConfig", "ExchangeInfo", "CommissionFee", "Kline", "Ticker", "TickerPrice",
    "AggTrade", "BookTicker", "Depth",
    "PlaceOrderResponse", "CancelOrderResponse", "CancelAllOrdersResponse", "Order", "Trade",
    "AlphaAsset", "TokenMapping", "AlphaWithdrawResponse", "AlphaWithdrawHistory",
    "AlphaDepositHistory", "AlphaDepositAddress",
    "ConvertPair", "ConvertAssetInfo", "ConvertQuote", "ConvertAcceptQuote",
    "ConvertOrderStatus", "ConvertTradeHistory",
    "SubAccountList", "SubAccountAssets", "SpotSummary",
    "CreateUniversalTransferResponse", "ListUniversalTransferResponse",
    "OpenInterest",
]
