"""ABOUTME: Endpoint services (market data, trading, portfolio)"""

from .base import BaseService
from .market import MarketService
from .trade import TradeService
from .portfolio import PortfolioService

__all__ = [
    "BaseService",
    "MarketService",
    "TradeService",
    "PortfolioService",
]
