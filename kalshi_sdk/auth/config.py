"""
Kalshi API configuration constants and environment endpoints
"""

from dataclasses import dataclass
from typing import Dict


SDK_VERSION = "1.0.0"


@dataclass(frozen=True)
class KalshiAPIConfig:
    """Kalshi API configuration constants"""

    # Timeouts
    REQUEST_TIMEOUT = 30.0   # per-attempt timeout (seconds)

    # Retry
    MAX_RETRIES = 3
    BASE_DELAY = 1.0         # 1000 ms
    JITTER = 1.0             # up to 1000 ms of random jitter
    MAX_RETRY_AFTER = 60.0   # longest server-requested wait honoured (seconds)

    # Signed timestamps further than this from the server clock are rejected
    MAX_CLOCK_SKEW_MS = 5000

    # API paths
    API_PREFIX = "/trade-api/v2"
    HEADER_PREFIX = "KALSHI-"


@dataclass(frozen=True)
class EnvironmentEndpoint:
    """Immutable connection target for one environment"""
    name: str
    base_url: str
    header_prefix: str = KalshiAPIConfig.HEADER_PREFIX


# Environment targets
ENDPOINTS: Dict[str, EnvironmentEndpoint] = {
    "production": EnvironmentEndpoint(
        name="production",
        base_url="https://trading-api.kalshi.co",
    ),
    "demo": EnvironmentEndpoint(
        name="demo",
        base_url="https://demo-api.kalshi.co",
    ),
}

# HTTP header template
COMMON_HEADERS = {
    "Content-Type": "application/json",
    "User-Agent": f"kalshi-python-sdk/{SDK_VERSION}",
}
