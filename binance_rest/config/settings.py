"""설정 관리 모듈"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Base URLs
BINANCE_MAINNET_BASE_URL = "https://api.binance.com"
BINANCE_TESTNET_BASE_URL = "https://testnet.binance.vision"
BINANCE_FUTURES_MAINNET_BASE_URL = "https://fapi.binance.com"
BINANCE_FUTURES_TESTNET_BASE_URL = "https://testnet.binancefuture.com"


class ClientSettings(BaseSettings):
    """클라이언트 설정 (환경 변수 BINANCE_* 또는 .env)"""

    api_key: str = ""
    api_secret: str = ""
    testnet: bool = False
    base_url: Optional[str] = None  # 지정 시 testnet 여부보다 우선
    time_offset: int = 0  # 로컬 시각 - 서버 시각 (밀리초)
    timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="BINANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def resolved_base_url(self) -> str:
        """실제 사용할 기본 URL"""
        if self.base_url:
            return self.base_url
        return BINANCE_TESTNET_BASE_URL if self.testnet else BINANCE_MAINNET_BASE_URL


# 전역 설정 인스턴스
settings = ClientSettings()
