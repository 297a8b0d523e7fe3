"""
ABOUTME: Read-only account balance view (amounts in cents)
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from kalshi_sdk.utils.helpers import cents_to_dollars


@dataclass(frozen=True)
class Balance:
    """Account balance; all amounts are cents"""
    balance: int = 0
    payout: int = 0
    fees: int = 0
    available_balance: int = 0
    pending_balance: int = 0
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Balance":
        return cls(
            balance=data.get("balance") or 0,
            payout=data.get("payout") or 0,
            fees=data.get("fees") or 0,
            available_balance=data.get("available_balance") or 0,
            pending_balance=data.get("pending_balance") or 0,
            raw=data,
        )

    @property
    def balance_dollars(self) -> float:
        return cents_to_dollars(self.balance)

    @property
    def available_balance_dollars(self) -> float:
        return cents_to_dollars(self.available_balance)

    @property
    def pending_balance_dollars(self) -> float:
        return cents_to_dollars(self.pending_balance)

    @property
    def payout_dollars(self) -> float:
        return cents_to_dollars(self.payout)

    @property
    def fees_dollars(self) -> float:
        return cents_to_dollars(self.fees)

    @property
    def available_percentage(self) -> float:
        if self.balance == 0:
            return 0.0
        return self.available_balance / self.balance * 100

    def has_sufficient_balance(self, amount: int) -> bool:
        """amount in cents"""
        return self.available_balance >= amount

    def to_dict(self) -> Dict[str, Any]:
        return {
            "balance": self.balance,
            "payout": self.payout,
            "fees": self.fees,
            "available_balance": self.available_balance,
            "pending_balance": self.pending_balance,
            "balance_dollars": self.balance_dollars,
            "available_balance_dollars": self.available_balance_dollars,
            "pending_balance_dollars": self.pending_balance_dollars,
            "payout_dollars": self.payout_dollars,
            "fees_dollars": self.fees_dollars,
            "available_percentage": self.available_percentage,
        }

    def __str__(self) -> str:
        return (f"Balance: ${self.balance_dollars:.2f} "
                f"(Available: ${self.available_balance_dollars:.2f})")
