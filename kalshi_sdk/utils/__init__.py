"""Retry policy and request helpers"""

from .backoff import RetryPolicy, RetryState, RETRYABLE
from .helpers import (
    validate_ticker,
    format_price,
    validate_order_params,
    generate_client_order_id,
    parse_timestamp,
    cents_to_dollars,
    dollars_to_cents,
    calculate_percentage_change,
)

__all__ = [
    "RetryPolicy",
    "RetryState",
    "RETRYABLE",
    "validate_ticker",
    "format_price",
    "validate_order_params",
    "generate_client_order_id",
    "parse_timestamp",
    "cents_to_dollars",
    "dollars_to_cents",
    "calculate_percentage_change",
]
