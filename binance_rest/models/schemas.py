"""Pydantic 응답 스키마"""
from decimal import Decimal
from typing import List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BinanceModel(BaseModel):
    """응답 스키마 기본 클래스 (camelCase JSON 필드 매핑)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class APIErrorEnvelope(BaseModel):
    """에러 응답 {code, msg}"""
    code: int = 0
    msg: str = ""

    def is_valid(self) -> bool:
        return self.code != 0 or self.msg != ""


# General 스키마
class ServerTime(BinanceModel):
    """서버 시간"""
    server_time: int


class ListenKey(BinanceModel):
    """유저 데이터 스트림 리슨 키"""
    listen_key: str


# Alpha 마켓 스키마
class TokenConfig(BinanceModel):
    """토큰 및 네트워크 설정"""
    network: str = ""
    coin: str = ""
    name: str = ""
    symbol: str = ""
    entity_tag: str = ""
    is_default: bool = False
    deposit_enable: bool = False
    withdraw_enable: bool = False
    deposit_desc: str = ""
    withdraw_desc: str = ""
    special_deposit_tips: str = ""
    special_withdraw_tips: str = ""
    address_regex: str = ""
    address_rule: str = ""
    memo_regex: str = ""
    withdraw_fee: str = ""
    withdraw_min: str = ""
    withdraw_max: str = ""
    deposit_dust: str = ""
    min_confirm: int = 0
    un_lock_confirm: int = 0
    same_address: bool = False
    estimated_arrival_time: int = 0
    contract_address_url: str = ""


class ExchangeInfoAsset(BinanceModel):
    asset: str = ""


class ExchangeInfoSymbolFilter(BinanceModel):
    """심볼 필터"""
    filter_type: str = ""
    min_price: str = ""
    max_price: str = ""
    tick_size: str = ""
    step_size: str = ""
    max_qty: str = ""
    min_qty: str = ""
    limit: int = 0
    min_notional: str = ""
    max_notional: str = ""
    multiplier_down: str = ""
    multiplier_up: str = ""
    bid_multiplier_up: str = ""
    ask_multiplier_up: str = ""
    bid_multiplier_down: str = ""
    ask_multiplier_down: str = ""


class ExchangeInfoSymbol(BinanceModel):
    """거래 심볼 정보"""
    symbol: str = ""
    status: str = ""
    base_asset: str = ""
    quote_asset: str = ""
    price_precision: int = 0
    quantity_precision: int = 0
    base_asset_precision: int = 0
    quote_precision: int = 0
    filters: List[ExchangeInfoSymbolFilter] = Field(default_factory=list)
    order_types: List[str] = Field(default_factory=list)


class ExchangeInfo(BinanceModel):
    """거래소 정보"""
    timezone: str = ""
    assets: List[ExchangeInfoAsset] = Field(default_factory=list)
    symbols: List[ExchangeInfoSymbol] = Field(default_factory=list)


class CommissionFee(BinanceModel):
    """수수료율"""
    buyer_commission: int = 0
    seller_commission: int = 0


class Kline(BinanceModel):
    """캔들 데이터 스키마 (배열 응답을 위치 기반으로 변환)"""
    open_time: int = 0
    open_price: Decimal = Decimal("0")
    high_price: Decimal = Decimal("0")
    low_price: Decimal = Decimal("0")
    close_price: Decimal = Decimal("0")
    volume: Decimal = Decimal("0")
    close_time: int = 0
    quote_asset_volume: Decimal = Decimal("0")
    number_of_trades: int = 0
    taker_buy_base_asset_volume: Decimal = Decimal("0")
    taker_buy_quote_asset_volume: Decimal = Decimal("0")
    ignore: str = ""


class Ticker(BinanceModel):
    """24시간 티커"""
    symbol: str = ""
    price_change: str = ""
    price_change_percent: str = ""
    weighted_avg_price: str = ""
    last_price: str = ""
    last_qty: str = ""
    open_price: str = ""
    high_price: str = ""
    low_price: str = ""
    volume: str = ""
    quote_volume: str = ""
    open_time: int = 0
    close_time: int = 0
    first_id: int = 0
    last_id: int = 0
    count: int = 0


class TickerPrice(BinanceModel):
    """심볼 현재가"""
    symbol: str = ""
    price: str = ""
    time: int = 0


class AggTrade(BaseModel):
    """집계 체결"""
    model_config = ConfigDict(populate_by_name=True)

    agg_trade_id: int = Field(default=0, alias="a")
    price: str = Field(default="", alias="p")
    quantity: str = Field(default="", alias="q")
    first_trade_id: int = Field(default=0, alias="f")
    last_trade_id: int = Field(default=0, alias="l")
    is_buyer_maker: bool = Field(default=False, alias="m")
    transaction_time: int = Field(default=0, alias="T")


class BookTicker(BaseModel):
    """최우선 호가"""
    model_config = ConfigDict(populate_by_name=True)

    update_id: int = Field(default=0, alias="u")
    event_type: str = Field(default="", alias="e")
    symbol: str = Field(default="", alias="s")
    best_bid_price: str = Field(default="", alias="b")
    best_bid_qty: str = Field(default="", alias="B")
    best_ask_price: str = Field(default="", alias="a")
    best_ask_qty: str = Field(default="", alias="A")
    transaction_time: int = Field(default=0, alias="T")
    event_time: int = Field(default=0, alias="E")


class Depth(BinanceModel):
    """호가창"""
    last_update_id: int = 0
    symbol: str = ""
    bids: List[List[str]] = Field(default_factory=list)
    asks: List[List[str]] = Field(default_factory=list)
    t: int = 0
    e: int = 0


# Alpha 거래 스키마
class PlaceOrderResponse(BinanceModel):
    """주문 응답 (status: P 처리중, S 성공, F 실패)"""
    order_id: str
    status: str = ""


class CancelOrderResponse(BinanceModel):
    order_id: str
    order_status: str = ""


class CancelAllOrdersResponse(BinanceModel):
    success: bool = False


class Order(BinanceModel):
    """주문 정보"""
    order_id: str = ""
    symbol: str = ""
    status: str = ""
    client_order_id: str = ""
    price: str = ""
    avg_price: str = ""
    orig_qty: str = ""
    executed_qty: str = ""
    cum_quote: str = ""
    time_in_force: str = ""
    type: str = ""
    side: str = ""
    stop_price: str = ""
    orig_type: str = ""
    time: int = 0
    update_time: int = 0
    order_list_id: str = ""
    page_id: str = ""
    base_asset: str = ""
    quote_asset: str = ""


class Trade(BinanceModel):
    """체결 정보"""
    symbol: str = ""
    id: str = ""
    order_id: str = ""
    trade_id: str = ""
    side: str = ""
    price: str = ""
    qty: str = ""
    quote_qty: str = ""
    commission: str = ""
    commission_asset: str = ""
    time: int = 0
    page_id: str = ""
    buyer: bool = False
    base_asset: str = ""
    quote_asset: str = ""
    order_type: str = ""
    last_trade: bool = False


# Alpha 자산 스키마
class AlphaAsset(BinanceModel):
    """알파 지갑 잔고"""
    chain_id: str = ""
    contract_address: str = ""
    alpha_id: str = ""
    cex_asset_code: str = ""
    free: str = ""
    freeze: str = ""
    locked: str = ""
    withdrawing: str = ""
    amount: str = ""
    valuation: str = ""


class TokenMapping(BinanceModel):
    """알파 토큰 매핑"""
    token_id: str = ""
    chain_id: str = ""
    chain_icon_url: str = ""
    chain_name: str = ""
    contract_address: str = ""
    name: str = ""
    symbol: str = ""
    price: str = ""
    percent_change_24h: str = Field(default="", alias="percentChange24h")
    volume_24h: str = Field(default="", alias="volume24h")
    market_cap: str = ""
    fdv: str = ""
    liquidity: str = ""
    total_supply: str = ""
    circulating_supply: str = ""
    holders: str = ""
    decimals: int = 0
    listing_cex: bool = False
    hot_tag: bool = False
    cex_coin_name: str = ""
    can_transfer: bool = False
    denomination: int = 0
    offline: bool = False
    trade_decimal: int = 0
    alpha_id: str = ""
    offsell: bool = False
    price_high_24h: str = Field(default="", alias="priceHigh24h")
    price_low_24h: str = Field(default="", alias="priceLow24h")
    online_tge: bool = False
    online_airdrop: bool = False


class AlphaWithdrawResponse(BinanceModel):
    id: str


class AlphaWithdrawHistory(BinanceModel):
    """출금 내역"""
    id: str = ""
    network: str = ""
    alpha_id: str = ""
    contract_address: str = ""
    coin_name: str = ""
    address: str = ""
    address_tag: str = ""
    amount: str = ""
    tx_id: str = ""
    apply_time: str = ""
    complete_time: str = ""
    confirm_no: int = 0
    status: int = 0
    transaction_fee: str = ""
    info: str = ""


class AlphaDepositHistory(BinanceModel):
    """입금 내역"""
    id: str = ""
    network: str = ""
    alpha_id: str = ""
    contract_address: str = ""
    coin_name: str = ""
    address: str = ""
    address_tag: str = ""
    amount: str = ""
    tx_id: str = ""
    complete_time: int = 0
    confirmation_no: int = 0
    insert_time: int = 0
    source_address: str = ""
    status: int = 0
    unlock_confirm: int = 0


class AlphaDepositAddress(BinanceModel):
    network: str = ""
    address: str = ""
    tag: str = ""


# Convert 스키마
class ConvertPair(BinanceModel):
    """변환 가능 페어"""
    from_asset: str = ""
    to_asset: str = ""
    from_asset_min_amount: str = ""
    from_asset_max_amount: str = ""
    to_asset_min_amount: str = ""
    to_asset_max_amount: str = ""


class ConvertAssetInfo(BinanceModel):
    asset: str = ""
    fraction: int = 0


class ConvertQuote(BinanceModel):
    """변환 견적"""
    quote_id: str = ""
    ratio: str = ""
    inverse_ratio: str = ""
    valid_timestamp: int = 0
    to_amount: str = ""
    from_amount: str = ""


class ConvertAcceptQuote(BinanceModel):
    order_id: str = ""
    create_time: int = 0
    order_status: str = ""


class ConvertOrderStatus(BinanceModel):
    """변환 주문 상태"""
    order_id: int = 0
    order_status: str = ""
    from_asset: str = ""
    from_amount: str = ""
    to_asset: str = ""
    to_amount: str = ""
    ratio: str = ""
    inverse_ratio: str = ""
    create_time: int = 0


class ConvertTradeHistoryItem(BinanceModel):
    quote_id: str = ""
    order_id: int = 0
    order_status: str = ""
    from_asset: str = ""
    from_amount: str = ""
    to_asset: str = ""
    to_amount: str = ""
    ratio: str = ""
    inverse_ratio: str = ""
    create_time: int = 0


class ConvertTradeHistory(BinanceModel):
    """변환 거래 내역"""
    items: List[ConvertTradeHistoryItem] = Field(default_factory=list, alias="list")
    start_time: int = 0
    end_time: int = 0
    limit: int = 0
    more_data: bool = False


# Sub-account 스키마
class SubAccount(BinanceModel):
    email: str = ""
    is_freeze: bool = False
    create_time: int = 0


class SubAccountList(BinanceModel):
    """서브 계정 목록"""
    sub_accounts: List[SubAccount] = Field(default_factory=list)


class AssetBalance(BinanceModel):
    asset: str = ""
    free: float = 0.0
    locked: float = 0.0


class SubAccountAssets(BinanceModel):
    """서브 계정 자산"""
    balances: List[AssetBalance] = Field(default_factory=list)


class SpotSubUserAssetBtcVo(BinanceModel):
    email: str = ""
    total_asset: str = ""


class SpotSummary(BinanceModel):
    """서브 계정 현물 자산 요약 (BTC 환산)"""
    total_count: int = 0
    master_account_total_asset: str = ""
    spot_sub_user_asset_btc_vo_list: List[SpotSubUserAssetBtcVo] = Field(default_factory=list)


class CreateUniversalTransferResponse(BinanceModel):
    tran_id: int


class UniversalTransfer(BinanceModel):
    """유니버설 이체 기록"""
    tran_id: int = 0
    from_email: str = ""
    to_email: str = ""
    asset: str = ""
    amount: str = ""
    from_account_type: str = ""
    to_account_type: str = ""
    status: str = ""
    create_time_stamp: int = 0


class ListUniversalTransferResponse(BinanceModel):
    result: List[UniversalTransfer] = Field(default_factory=list)


# Futures 스키마
class OpenInterest(BinanceModel):
    """미결제약정"""
    symbol: str = ""
    open_interest: str = ""
    time: int = 0
