"""
ABOUTME: Portfolio endpoints (balance, positions, history, reports)
"""

from typing import Any, Dict, List, Optional

from kalshi_sdk.api.models.balance import Balance
from kalshi_sdk.api.models.position import Position
from kalshi_sdk.api.services.base import BaseService
from kalshi_sdk.exceptions import ClientError
from kalshi_sdk.utils.helpers import validate_ticker


class PortfolioService(BaseService):
    """Account balance, positions and portfolio reports"""

    async def get_balance(self) -> Balance:
        response = await self._get("/portfolio/balance")
        return Balance.from_api(self._field(response, "balance", {}))

    async def get_positions(self,
                            ticker: Optional[str] = None,
                            settlement_status: Optional[str] = None,
                            limit: Optional[int] = None,
                            cursor: Optional[str] = None) -> List[Position]:
        params = {
            "ticker": ticker,
            "settlement_status": settlement_status,
            "limit": limit,
            "cursor": cursor,
        }
        response = await self._get("/portfolio/positions", params)
        return [Position.from_api(item) for item in self._field(response, "positions", [])]

    async def get_position_by_ticker(self, ticker: str) -> Optional[Position]:
        """
        Position in one market

        Returns:
            Position, or None when the API answers 404
        """
        ticker = validate_ticker(ticker)
        try:
            response = await self._get(f"/portfolio/positions/{ticker}")
        except ClientError as e:
            if e.status_code == 404:
                return None
            raise
        return Position.from_api(self._field(response, "position", {}))

    async def get_trade_history(self,
                                ticker: Optional[str] = None,
                                limit: Optional[int] = None,
                                cursor: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"ticker": ticker, "limit": limit, "cursor": cursor}
        response = await self._get("/portfolio/trades", params)
        return self._field(response, "trades", [])

    async def get_portfolio_summary(self) -> Dict[str, Any]:
        return await self._get("/portfolio/summary")

    async def get_pnl_summary(self,
                              start_date: Optional[str] = None,
                              end_date: Optional[str] = None) -> Dict[str, Any]:
        params = {"start_date": start_date, "end_date": end_date}
        return await self._get("/portfolio/pnl", params)

    async def get_settlements(self,
                              ticker: Optional[str] = None,
                              limit: Optional[int] = None,
                              cursor: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"ticker": ticker, "limit": limit, "cursor": cursor}
        response = await self._get("/portfolio/settlements", params)
        return self._field(response, "settlements", [])

    async def get_portfolio_performance(self, period: str = "30d") -> Dict[str, Any]:
        return await self._get("/portfolio/performance", {"period": period})

    async def export_portfolio_data(self,
                                    format: str = "csv",
                                    start_date: Optional[str] = None,
                                    end_date: Optional[str] = None) -> Any:
        params = {"format": format, "start_date": start_date, "end_date": end_date}
        return await self._get("/portfolio/export", params)
