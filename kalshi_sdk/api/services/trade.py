"""
ABOUTME: Order placement and management endpoints
"""

from typing import Any, Dict, List, Optional

from kalshi_sdk.api.models.order import Order
from kalshi_sdk.api.services.base import BaseService
from kalshi_sdk.exceptions import ValidationError
from kalshi_sdk.utils.helpers import validate_order_params


def _order_id(order_id: str) -> str:
    if not order_id or not isinstance(order_id, str):
        raise ValidationError("Order id must be a non-empty string")
    return order_id


class TradeService(BaseService):
    """Orders and fills

    Retried attempts of a mutating call are not deduplicated by the pipeline;
    the client_order_id in each order payload is what lets the exchange detect
    a duplicate submission.
    """

    async def place_order(self, params: Dict[str, Any]) -> Order:
        """
        Place an order

        Args:
            params: ticker, side ("yes"/"no"), action ("buy"/"sell"), count,
                type ("limit"/"market", default "limit"), price (cents, or dollars
                when below 1), client_order_id (optional)

        Returns:
            the created Order

        Raises:
            ValidationError: invalid parameters (no request is sent)
        """
        payload = validate_order_params(params)
        self.logger.info(
            f"Placing order {payload['client_order_id']}: {payload['action']} "
            f"{payload['count']} {payload['ticker']} {payload['side']}"
        )
        response = await self._post("/orders", payload)
        return Order.from_api(self._field(response, "order", {}))

    async def cancel_order(self, order_id: str) -> Order:
        response = await self._delete(f"/orders/{_order_id(order_id)}")
        return Order.from_api(self._field(response, "order", {}))

    async def get_orders(self,
                         ticker: Optional[str] = None,
                         status: Optional[str] = None,
                         limit: Optional[int] = None,
                         cursor: Optional[str] = None) -> List[Order]:
        params = {"ticker": ticker, "status": status, "limit": limit, "cursor": cursor}
        response = await self._get("/orders", params)
        return [Order.from_api(item) for item in self._field(response, "orders", [])]

    async def get_order_by_id(self, order_id: str) -> Order:
        response = await self._get(f"/orders/{_order_id(order_id)}")
        return Order.from_api(self._field(response, "order", {}))

    async def modify_order(self, order_id: str, params: Dict[str, Any]) -> Order:
        """Amend an existing order with a partial set of order fields"""
        response = await self._put(f"/orders/{_order_id(order_id)}", params)
        return Order.from_api(self._field(response, "order", {}))

    async def get_fills(self,
                        ticker: Optional[str] = None,
                        limit: Optional[int] = None,
                        cursor: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"ticker": ticker, "limit": limit, "cursor": cursor}
        response = await self._get("/fills", params)
        return self._field(response, "fills", [])

    async def batch_place_orders(self, orders: List[Dict[str, Any]]) -> List[Order]:
        """Validate every order first; nothing is sent if any of them is invalid"""
        payloads = [validate_order_params(order) for order in orders]
        response = await self._post("/orders/batch", {"orders": payloads})
        return [Order.from_api(item) for item in self._field(response, "orders", [])]
