"""
ABOUTME: Read-only market view built from the /markets payload
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from kalshi_sdk.api.models.enums import MarketStatus
from kalshi_sdk.utils.helpers import parse_timestamp


@dataclass(frozen=True)
class Market:
    """Kalshi market"""
    ticker: str
    title: str = ""
    subtitle: str = ""
    status: str = ""
    yes_price: Optional[int] = None
    no_price: Optional[int] = None
    volume: int = 0
    open_interest: int = 0
    close_time: Optional[datetime] = None
    settle_time: Optional[datetime] = None
    category: str = ""
    tags: List[str] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Market":
        return cls(
            ticker=data.get("ticker") or "",
            title=data.get("title") or "",
            subtitle=data.get("subtitle") or "",
            status=data.get("status") or "",
            yes_price=data.get("yes_price"),
            no_price=data.get("no_price"),
            volume=data.get("volume") or 0,
            open_interest=data.get("open_interest") or 0,
            close_time=parse_timestamp(data.get("close_time")),
            settle_time=parse_timestamp(data.get("settle_time")),
            category=data.get("category") or "",
            tags=list(data.get("tags") or []),
            raw=data,
        )

    @property
    def is_open(self) -> bool:
        return self.status == MarketStatus.OPEN.value

    @property
    def is_settled(self) -> bool:
        return self.status == MarketStatus.SETTLED.value

    @property
    def spread(self) -> Optional[int]:
        """|yes_price - no_price| in cents, None if either side is missing"""
        if self.yes_price is None or self.no_price is None:
            return None
        return abs(self.yes_price - self.no_price)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ticker": self.ticker,
            "title": self.title,
            "subtitle": self.subtitle,
            "status": self.status,
            "yes_price": self.yes_price,
            "no_price": self.no_price,
            "volume": self.volume,
            "open_interest": self.open_interest,
            "close_time": self.close_time.isoformat() if self.close_time else None,
            "settle_time": self.settle_time.isoformat() if self.settle_time else None,
            "category": self.category,
            "tags": list(self.tags),
            "is_open": self.is_open,
            "is_settled": self.is_settled,
            "spread": self.spread,
        }

    def __str__(self) -> str:
        return f"{self.ticker}: {self.title} (Status: {self.status})"
