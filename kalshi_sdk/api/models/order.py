"""
ABOUTME: Read-only order view
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from kalshi_sdk.api.models.enums import OrderStatus
from kalshi_sdk.utils.helpers import parse_timestamp


@dataclass(frozen=True)
class Order:
    """Kalshi order"""
    order_id: str
    client_order_id: str = ""
    ticker: str = ""
    side: str = "yes"
    action: str = "buy"
    type: str = "limit"
    status: str = ""
    count: int = 0
    price: Optional[int] = None
    filled_count: int = 0
    remaining_count: int = 0
    created_time: Optional[datetime] = None
    updated_time: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Order":
        return cls(
            order_id=data.get("order_id") or "",
            client_order_id=data.get("client_order_id") or "",
            ticker=data.get("ticker") or "",
            side=data.get("side") or "yes",
            action=data.get("action") or "buy",
            type=data.get("type") or "limit",
            status=data.get("status") or "",
            count=data.get("count") or 0,
            price=data.get("price"),
            filled_count=data.get("filled_count") or 0,
            remaining_count=data.get("remaining_count") or 0,
            created_time=parse_timestamp(data.get("created_time")),
            updated_time=parse_timestamp(data.get("updated_time")),
            raw=data,
        )

    @property
    def is_filled(self) -> bool:
        return self.status == OrderStatus.FILLED.value

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING.value

    @property
    def is_canceled(self) -> bool:
        return self.status == OrderStatus.CANCELED.value

    @property
    def is_partially_filled(self) -> bool:
        return self.filled_count > 0 and self.remaining_count > 0

    @property
    def fill_percentage(self) -> float:
        if self.count == 0:
            return 0.0
        return self.filled_count / self.count * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order_id": self.order_id,
            "client_order_id": self.client_order_id,
            "ticker": self.ticker,
            "side": self.side,
            "action": self.action,
            "type": self.type,
            "status": self.status,
            "count": self.count,
            "price": self.price,
            "filled_count": self.filled_count,
            "remaining_count": self.remaining_count,
            "created_time": self.created_time.isoformat() if self.created_time else None,
            "updated_time": self.updated_time.isoformat() if self.updated_time else None,
            "is_filled": self.is_filled,
            "is_pending": self.is_pending,
            "is_canceled": self.is_canceled,
            "is_partially_filled": self.is_partially_filled,
            "fill_percentage": self.fill_percentage,
        }

    def __str__(self) -> str:
        return f"{self.order_id}: {self.action} {self.count} {self.ticker} @ {self.price}¢ ({self.status})"
