"""
ABOUTME: Common plumbing for endpoint services built on the signed transport
"""

import logging
from typing import Any, Dict, Optional

from kalshi_sdk.api.base.client import BaseAPIClient
from kalshi_sdk.auth.config import KalshiAPIConfig


class BaseService:
    """Endpoint group sharing one transport client"""

    def __init__(self, client: BaseAPIClient):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def _path(endpoint: str) -> str:
        return f"{KalshiAPIConfig.API_PREFIX}{endpoint}"

    async def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.client.get(self._path(endpoint), params=params)

    async def _post(self, endpoint: str, body: Optional[Any] = None) -> Any:
        return await self.client.post(self._path(endpoint), body=body)

    async def _put(self, endpoint: str, body: Optional[Any] = None) -> Any:
        return await self.client.put(self._path(endpoint), body=body)

    async def _delete(self, endpoint: str) -> Any:
        return await self.client.delete(self._path(endpoint))

    @staticmethod
    def _field(payload: Any, key: str, default: Any = None) -> Any:
        """Envelope field of a decoded response (tolerates empty bodies)"""
        if isinstance(payload, dict):
            value = payload.get(key)
            return default if value is None else value
        return default
