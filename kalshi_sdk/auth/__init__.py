"""Kalshi authentication: credentials, request signing and endpoint configuration"""

from .config import KalshiAPIConfig, EnvironmentEndpoint, ENDPOINTS, COMMON_HEADERS, SDK_VERSION
from .models import KalshiCredentials, SignedHeaders
from .kalshi_auth import KalshiAuthManager, canonical_message

__all__ = [
    "KalshiAPIConfig",
    "EnvironmentEndpoint",
    "ENDPOINTS",
    "COMMON_HEADERS",
    "SDK_VERSION",
    "KalshiCredentials",
    "SignedHeaders",
    "KalshiAuthManager",
    "canonical_message",
]
