"""
ABOUTME: KalshiClient - single entry point wiring credentials, transport and services
"""

import logging
import os
from typing import Any, Dict, Optional, Union

import aiohttp

from kalshi_sdk.api.base.client import BaseAPIClient
from kalshi_sdk.api.services import MarketService, PortfolioService, TradeService
from kalshi_sdk.auth.config import EnvironmentEndpoint, KalshiAPIConfig, SDK_VERSION
from kalshi_sdk.auth.kalshi_auth import KalshiAuthManager
from kalshi_sdk.auth.models import KalshiCredentials
from kalshi_sdk.exceptions import KalshiError


class KalshiClient:
    """Kalshi API client

    Example::

        async with KalshiClient(api_key_id="...", private_key=pem, environment="demo") as client:
            markets = await client.markets.get_markets(status="open")
            order = await client.trading.place_order({
                "ticker": "EXAMPLE-24-T1",
                "side": "yes",
                "action": "buy",
                "count": 10,
                "price": 0.55,
            })
            balance = await client.portfolio.get_balance()
    """

    def __init__(self,
                 api_key_id: str,
                 private_key: Union[str, bytes],
                 environment: Union[str, EnvironmentEndpoint] = "production",
                 timeout: float = KalshiAPIConfig.REQUEST_TIMEOUT,
                 max_retries: int = KalshiAPIConfig.MAX_RETRIES,
                 base_delay: float = KalshiAPIConfig.BASE_DELAY,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize

        Args:
            api_key_id: Kalshi API key id
            private_key: PEM-encoded RSA private key
            environment: "production" or "demo"
            timeout: per-attempt timeout (seconds)
            max_retries: retries for rate-limited, 5xx and network failures
            base_delay: backoff base (seconds)
            session: optional externally owned aiohttp session

        Raises:
            AuthenticationError: the private key cannot be loaded (before any network call)
            ValidationError: unknown environment
        """
        self.logger = logging.getLogger(self.__class__.__name__)

        self.auth_manager = KalshiAuthManager(api_key_id, private_key)
        self.http = BaseAPIClient(
            self.auth_manager,
            environment=environment,
            timeout=timeout,
            max_retries=max_retries,
            base_delay=base_delay,
            session=session,
        )

        self._markets = MarketService(self.http)
        self._trading = TradeService(self.http)
        self._portfolio = PortfolioService(self.http)

        self.logger.info(f"Kalshi client initialized for {self.environment} environment")

    @classmethod
    def from_env(cls, **kwargs) -> "KalshiClient":
        """Build a client from KALSHI_* environment variables (.env supported)"""
        credentials = KalshiCredentials.from_env()
        kwargs.setdefault("environment", os.getenv("KALSHI_ENV", "production"))
        return cls(credentials.api_key_id, credentials.private_key_pem, **kwargs)

    @property
    def environment(self) -> str:
        return self.http.environment

    @property
    def base_url(self) -> str:
        return self.http.base_url

    @property
    def markets(self) -> MarketService:
        return self._markets

    @property
    def trading(self) -> TradeService:
        return self._trading

    @property
    def portfolio(self) -> PortfolioService:
        return self._portfolio

    async def test_connection(self) -> bool:
        """True if an authenticated balance request succeeds"""
        try:
            await self.portfolio.get_balance()
            return True
        except KalshiError as e:
            self.logger.warning(f"Connection test failed: {e}")
            return False

    def get_api_info(self) -> Dict[str, Any]:
        return {
            "environment": self.environment,
            "base_url": self.base_url,
            "api_key_id": self.auth_manager.api_key_id,
            "sdk_version": SDK_VERSION,
        }

    async def close(self):
        await self.http.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
