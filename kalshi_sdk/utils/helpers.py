"""
Validation and conversion helpers for Kalshi request parameters
"""

import random
import re
import string
import time
from datetime import datetime
from typing import Any, Dict, Optional, Union

from kalshi_sdk.exceptions import ValidationError


_TICKER_PATTERN = re.compile(r"^[A-Z0-9\-]+$")
_ID_ALPHABET = string.ascii_lowercase + string.digits

SIDES = ("yes", "no")
ACTIONS = ("buy", "sell")
ORDER_TYPES = ("limit", "market")


def validate_ticker(ticker: str) -> str:
    """
    Validate and normalize a market ticker

    Args:
        ticker: market ticker (e.g. "kxbtc-24-t1 ")

    Returns:
        upper-cased, stripped ticker

    Raises:
        ValidationError: empty or containing characters other than A-Z, 0-9 and '-'
    """
    if not ticker or not isinstance(ticker, str):
        raise ValidationError("Ticker must be a non-empty string")

    normalized = ticker.strip().upper()
    if not _TICKER_PATTERN.match(normalized):
        raise ValidationError(f"Invalid ticker format: {ticker}")

    return normalized


def format_price(price: Union[int, float]) -> int:
    """
    Convert a price to integer cents (0-100)

    Values strictly between 0 and 1 are read as dollars.
    """
    if price is None:
        raise ValidationError("Price cannot be None")
    if isinstance(price, bool) or not isinstance(price, (int, float)) or price != price:
        raise ValidationError(f"Invalid price format: {price}")

    if 0 < price < 1:
        cents = round(price * 100)
    else:
        cents = round(price)

    if cents < 0 or cents > 100:
        raise ValidationError(f"Price must be between 0 and 100 cents: {cents}")

    return cents


def generate_client_order_id() -> str:
    """Unique client order id: sdk-<epoch ms>-<9 random chars>"""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"sdk-{int(time.time() * 1000)}-{suffix}"


def _choice(value: Any, allowed, label: str) -> str:
    # accepts plain strings or Enum members
    raw = getattr(value, "value", value)
    if raw not in allowed:
        quoted = " or ".join(f"'{v}'" for v in allowed)
        raise ValidationError(f"{label} must be {quoted}, got: {value}")
    return raw


def validate_order_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate order parameters and build the request payload

    Args:
        params: ticker, side, action, count, type (default "limit"),
            price (required for limit orders), client_order_id (generated if absent)

    Returns:
        order payload (price omitted for market orders)

    Raises:
        ValidationError: any field is invalid
    """
    ticker = validate_ticker(params.get("ticker"))
    side = _choice(params.get("side"), SIDES, "Side")
    action = _choice(params.get("action"), ACTIONS, "Action")

    count = params.get("count")
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise ValidationError(f"Count must be a positive integer, got: {count}")

    order_type = _choice(params.get("type", "limit"), ORDER_TYPES, "Order type")

    payload = {
        "ticker": ticker,
        "side": side,
        "action": action,
        "count": count,
        "type": order_type,
        "client_order_id": params.get("client_order_id") or generate_client_order_id(),
    }

    if order_type == "limit":
        if params.get("price") is None:
            raise ValidationError("Price is required for limit orders")
        payload["price"] = format_price(params["price"])

    return payload


def parse_timestamp(timestamp: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp from the API; None if absent or unparseable"""
    if not timestamp:
        return None
    try:
        return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None


def cents_to_dollars(cents: Union[int, float]) -> float:
    return cents / 100


def dollars_to_cents(dollars: Union[int, float]) -> int:
    return round(dollars * 100)


def calculate_percentage_change(old_value: float, new_value: float) -> float:
    if old_value == 0:
        return 0.0
    return (new_value - old_value) / old_value * 100
