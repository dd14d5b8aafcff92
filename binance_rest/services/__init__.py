"""Services 패키지"""
from .binance import BinanceClient, Service, ENDPOINTS, Endpoint

__all__ = ["BinanceClient", "Service", "ENDPOINTS", "Endpoint"]
