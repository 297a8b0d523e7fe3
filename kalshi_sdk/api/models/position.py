"""
ABOUTME: Read-only portfolio position view
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Position:
    """Position in a single market"""
    ticker: str
    side: str = "yes"
    position: int = 0
    market_value: float = 0
    total_cost: float = 0
    unrealized_pnl: float = 0
    realized_pnl: float = 0
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Position":
        return cls(
            ticker=data.get("ticker") or "",
            side=data.get("side") or "yes",
            position=data.get("position") or 0,
            market_value=data.get("market_value") or 0,
            total_cost=data.get("total_cost") or 0,
            unrealized_pnl=data.get("unrealized_pnl") or 0,
            realized_pnl=data.get("realized_pnl") or 0,
            raw=data,
        )

    @property
    def average_cost(self) -> float:
        """Cost per contract"""
        if self.position == 0:
            return 0.0
        return self.total_cost / abs(self.position)

    @property
    def is_long(self) -> bool:
        return self.position > 0

    @property
    def is_short(self) -> bool:
        return self.position < 0

    @property
    def is_profitable(self) -> bool:
        return self.unrealized_pnl > 0

    @property
    def total_pnl(self) -> float:
        return self.realized_pnl + self.unrealized_pnl

    @property
    def return_percentage(self) -> float:
        if self.total_cost == 0:
            return 0.0
        return self.unrealized_pnl / self.total_cost * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ticker": self.ticker,
            "side": self.side,
            "position": self.position,
            "market_value": self.market_value,
            "total_cost": self.total_cost,
            "unrealized_pnl": self.unrealized_pnl,
            "realized_pnl": self.realized_pnl,
            "average_cost": self.average_cost,
            "is_long": self.is_long,
            "is_short": self.is_short,
            "is_profitable": self.is_profitable,
            "total_pnl": self.total_pnl,
            "return_percentage": self.return_percentage,
        }

    def __str__(self) -> str:
        if self.unrealized_pnl >= 0:
            pnl = f"${self.unrealized_pnl:.2f}"
        else:
            pnl = f"-${abs(self.unrealized_pnl):.2f}"
        return f"{self.ticker} {self.side}: {self.position} contracts, PnL: {pnl}"
