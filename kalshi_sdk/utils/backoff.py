"""
Retry policy: which failures are retried and how long to wait between attempts
"""

import math
import random
from dataclasses import dataclass
from typing import Callable, Optional

from kalshi_sdk.auth.config import KalshiAPIConfig
from kalshi_sdk.exceptions import ErrorClassification, KalshiError, RateLimitError


RETRYABLE = frozenset({
    ErrorClassification.RATE_LIMITED,
    ErrorClassification.SERVER_ERROR,
    ErrorClassification.NETWORK,
})


@dataclass
class RetryState:
    """Retry bookkeeping for one logical call"""
    attempt: int = 0
    max_retries: int = KalshiAPIConfig.MAX_RETRIES
    base_delay: float = KalshiAPIConfig.BASE_DELAY  # seconds

    @property
    def exhausted(self) -> bool:
        return self.attempt >= self.max_retries


class RetryPolicy:
    """Exponential backoff with jitter"""

    def __init__(self,
                 jitter: float = KalshiAPIConfig.JITTER,
                 rand: Callable[[float, float], float] = random.uniform,
                 max_retry_after: float = KalshiAPIConfig.MAX_RETRY_AFTER):
        """
        Args:
            jitter: upper bound of the random offset added to each delay (seconds)
            rand: random source, uniform(a, b)
            max_retry_after: cap on a server Retry-After hint (seconds)
        """
        self.jitter = jitter
        self.max_retry_after = max_retry_after
        self._rand = rand

    @staticmethod
    def is_retryable(error: KalshiError) -> bool:
        return error.classification in RETRYABLE

    def calculate_delay(self, state: RetryState) -> float:
        """base_delay * 2^attempt + uniform(0, jitter)"""
        return state.base_delay * (2 ** state.attempt) + self._rand(0, self.jitter)

    def decide(self, error: KalshiError, state: RetryState) -> Optional[float]:
        """
        Decide whether a failed attempt should be retried

        Args:
            error: the classified failure of the current attempt
            state: retry state of the call

        Returns:
            seconds to wait before the next attempt, or None to surface the error
        """
        if not self.is_retryable(error):
            return None
        if state.exhausted:
            return None

        delay = self.calculate_delay(state)

        # a server-supplied Retry-After only ever lengthens the wait
        retry_after = error.retry_after if isinstance(error, RateLimitError) else None
        if retry_after and math.isfinite(retry_after):
            delay = max(delay, min(retry_after, self.max_retry_after))

        return delay
