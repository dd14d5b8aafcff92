"""Config 패키지"""
from .settings import (
    ClientSettings,
    settings,
    BINANCE_MAINNET_BASE_URL,
    BINANCE_TESTNET_BASE_URL,
    BINANCE_FUTURES_MAINNET_BASE_URL,
    BINANCE_FUTURES_TESTNET_BASE_URL,
)

__all__ = [
    "ClientSettings",
    "settings",
    "BINANCE_MAINNET_BASE_URL",
    "BINANCE_TESTNET_BASE_URL",
    "BINANCE_FUTURES_MAINNET_BASE_URL",
    "BINANCE_FUTURES_TESTNET_BASE_URL",
]
