"""ABOUTME: Async Python SDK for the Kalshi trading API"""

from .exceptions import (
    ErrorClassification,
    KalshiError,
    AuthenticationError,
    ValidationError,
    NetworkError,
    MalformedResponseError,
    APIError,
    RateLimitError,
    ClientError,
    ServerError,
)
from .auth import KalshiAuthManager, KalshiCredentials, SignedHeaders, SDK_VERSION
from .api.base.client import BaseAPIClient
from .api.models import Market, Order, Position, Balance
from .api.services import MarketService, TradeService, PortfolioService
from .utils.backoff import RetryPolicy, RetryState
from .client import KalshiClient

__version__ = SDK_VERSION

__all__ = [
    # client
    "KalshiClient",

    # pipeline
    "KalshiAuthManager",
    "KalshiCredentials",
    "SignedHeaders",
    "BaseAPIClient",
    "RetryPolicy",
    "RetryState",

    # services
    "MarketService",
    "TradeService",
    "PortfolioService",

    # models
    "Market",
    "Order",
    "Position",
    "Balance",

    # errors
    "ErrorClassification",
    "KalshiError",
    "AuthenticationError",
    "ValidationError",
    "NetworkError",
    "MalformedResponseError",
    "APIError",
    "RateLimitError",
    "ClientError",
    "ServerError",
]
