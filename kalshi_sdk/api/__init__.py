"""ABOUTME: Kalshi REST API: signed transport, endpoint services and domain views"""

from .base.client import BaseAPIClient
from .services import MarketService, TradeService, PortfolioService
from .models import Market, Order, Position, Balance

__all__ = [
    "BaseAPIClient",
    "MarketService",
    "TradeService",
    "PortfolioService",
    "Market",
    "Order",
    "Position",
    "Balance",
]
