"""ABOUTME: Domain views and enumerations for Kalshi API payloads"""

from .enums import MarketStatus, OrderSide, OrderAction, OrderType, OrderStatus
from .market import Market
from .order import Order
from .position import Position
from .balance import Balance

__all__ = [
    "MarketStatus",
    "OrderSide",
    "OrderAction",
    "OrderType",
    "OrderStatus",
    "Market",
    "Order",
    "Position",
    "Balance",
]
