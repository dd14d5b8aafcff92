"""Binance 서비스 패키지"""
from .client import BinanceClient
from .service import Service
from .endpoints import ENDPOINTS, Endpoint
from .decoders import parse_klines, decode_response

__all__ = ["BinanceClient", "Service", "ENDPOINTS", "Endpoint", "parse_klines", "decode_response"]
