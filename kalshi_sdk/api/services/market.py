"""
ABOUTME: Market data endpoints
"""

from typing import Any, Dict, List, Optional

from kalshi_sdk.api.models.enums import MarketStatus
from kalshi_sdk.api.models.market import Market
from kalshi_sdk.api.services.base import BaseService
from kalshi_sdk.utils.helpers import validate_ticker


class MarketService(BaseService):
    """Market listing, lookup, order book and history"""

    async def get_markets(self,
                          status: Optional[str] = None,
                          ticker: Optional[str] = None,
                          category: Optional[str] = None,
                          limit: int = 100,
                          cursor: Optional[str] = None) -> List[Market]:
        """
        List markets

        Args:
            status: "open", "closed" or "settled"
            ticker: exact market ticker
            category: market category
            limit: page size
            cursor: pagination cursor from a previous call

        Returns:
            list of Market
        """
        params: Dict[str, Any] = {
            "limit": limit,
            "status": getattr(status, "value", status),
            "ticker": validate_ticker(ticker) if ticker else None,
            "category": category,
            "cursor": cursor,
        }

        response = await self._get("/markets", params)
        return [Market.from_api(item) for item in self._field(response, "markets", [])]

    async def get_market_by_ticker(self, ticker: str) -> Market:
        ticker = validate_ticker(ticker)
        response = await self._get(f"/markets/{ticker}")
        return Market.from_api(self._field(response, "market", {}))

    async def get_order_book(self, ticker: str, depth: int = 10) -> Dict[str, Any]:
        ticker = validate_ticker(ticker)
        response = await self._get(f"/markets/{ticker}/orderbook", {"depth": depth})
        return self._field(response, "orderbook", {})

    async def get_market_history(self,
                                 ticker: str,
                                 limit: int = 100,
                                 cursor: Optional[str] = None) -> Any:
        ticker = validate_ticker(ticker)
        response = await self._get(
            f"/markets/{ticker}/history",
            {"limit": limit, "cursor": cursor},
        )
        return self._field(response, "history", [])

    async def search_markets(self, query: str, limit: int = 50) -> List[Market]:
        response = await self._get("/markets/search", {"query": query, "limit": limit})
        return [Market.from_api(item) for item in self._field(response, "markets", [])]

    async def get_market_categories(self) -> List[str]:
        response = await self._get("/markets/categories")
        return self._field(response, "categories", [])

    async def get_trending_markets(self, limit: int = 20) -> List[Market]:
        response = await self._get("/markets/trending", {"limit": limit})
        return [Market.from_api(item) for item in self._field(response, "markets", [])]

    async def get_markets_by_category(self, category: str, limit: int = 100) -> List[Market]:
        return await self.get_markets(category=category, limit=limit)

    async def get_open_markets(self, limit: int = 100) -> List[Market]:
        return await self.get_markets(status=MarketStatus.OPEN.value, limit=limit)

    async def get_closed_markets(self, limit: int = 100) -> List[Market]:
        return await self.get_markets(status=MarketStatus.CLOSED.value, limit=limit)

    async def get_settled_markets(self, limit: int = 100) -> List[Market]:
        return await self.get_markets(status=MarketStatus.SETTLED.value, limit=limit)
