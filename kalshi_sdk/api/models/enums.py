"""
ABOUTME: Enumerations for Kalshi markets and orders
"""

from enum import Enum


class MarketStatus(Enum):
    """Market lifecycle status"""
    OPEN = "open"
    CLOSED = "closed"
    SETTLED = "settled"


class OrderSide(Enum):
    """Contract side"""
    YES = "yes"
    NO = "no"


class OrderAction(Enum):
    """Order direction"""
    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    """Order type"""
    LIMIT = "limit"
    MARKET = "market"


class OrderStatus(Enum):
    """Order status"""
    PENDING = "pending"
    FILLED = "filled"
    CANCELED = "canceled"
