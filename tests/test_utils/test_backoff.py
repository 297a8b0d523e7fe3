"""
Retry policy tests
"""

import pytest

from kalshi_sdk.auth.config import KalshiAPIConfig
from kalshi_sdk.exceptions import (
    AuthenticationError,
    ClientError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from kalshi_sdk.utils.backoff import RetryPolicy, RetryState


def _no_jitter(a, b):
    return 0.0


def _max_jitter(a, b):
    return b


class TestRetryPolicyDecide:
    """Which classifications are retried"""

    def setup_method(self):
        self.policy = RetryPolicy(rand=_no_jitter)

    @pytest.mark.parametrize("error", [
        AuthenticationError("bad key"),
        AuthenticationError("unauthorized", 401),
        ClientError("not found", 404),
        MalformedResponseError("bad json", 200, "<html>"),
        ValidationError("bad ticker"),
    ])
    def test_terminal_errors_never_retried(self, error):
        # Given - first attempt, plenty of budget
        state = RetryState(attempt=0, max_retries=10)

        # When / Then
        assert self.policy.decide(error, state) is None

    @pytest.mark.parametrize("error", [
        RateLimitError("Rate limit exceeded"),
        ServerError("boom", 500),
        NetworkError("connection reset"),
    ])
    def test_transient_errors_retried_within_budget(self, error):
        state = RetryState(attempt=0, max_retries=3)
        assert self.policy.decide(error, state) == pytest.approx(1.0)

    @pytest.mark.parametrize("error", [
        RateLimitError("Rate limit exceeded"),
        ServerError("boom", 503),
        NetworkError("timeout"),
    ])
    def test_transient_errors_stop_when_exhausted(self, error):
        state = RetryState(attempt=3, max_retries=3)
        assert self.policy.decide(error, state) is None

    def test_zero_retries_never_retries(self):
        state = RetryState(attempt=0, max_retries=0)
        assert self.policy.decide(ServerError("boom", 500), state) is None


class TestRetryPolicyDelay:
    """Exponential backoff with jitter"""

    def test_exponential_growth_without_jitter(self):
        # Given
        policy = RetryPolicy(rand=_no_jitter)

        # When
        delays = [policy.calculate_delay(RetryState(attempt=n, base_delay=1.0)) for n in range(4)]

        # Then
        assert delays == [1.0, 2.0, 4.0, 8.0]

    def test_jitter_bounds(self):
        policy = RetryPolicy(jitter=1.0)
        for attempt in range(4):
            state = RetryState(attempt=attempt, base_delay=0.5)
            floor = 0.5 * 2 ** attempt
            for _ in range(50):
                delay = policy.calculate_delay(state)
                assert floor <= delay <= floor + 1.0

    def test_jitter_passed_to_random_source(self):
        calls = []

        def rand(a, b):
            calls.append((a, b))
            return 0.25

        policy = RetryPolicy(jitter=0.75, rand=rand)
        assert policy.calculate_delay(RetryState(attempt=1, base_delay=1.0)) == pytest.approx(2.25)
        assert calls == [(0, 0.75)]

    def test_delays_never_decrease(self):
        policy = RetryPolicy(rand=_max_jitter)
        low_policy = RetryPolicy(rand=_no_jitter)
        # worst case: max jitter now, no jitter next
        for attempt in range(5):
            current = policy.calculate_delay(RetryState(attempt=attempt))
            following = low_policy.calculate_delay(RetryState(attempt=attempt + 1))
            assert following >= current

    def test_retry_after_lengthens_delay(self):
        policy = RetryPolicy(rand=_no_jitter)
        error = RateLimitError("Rate limit exceeded", retry_after=7.0)
        assert policy.decide(error, RetryState(attempt=0)) == pytest.approx(7.0)

    def test_retry_after_never_shortens_delay(self):
        policy = RetryPolicy(rand=_no_jitter)
        error = RateLimitError("Rate limit exceeded", retry_after=0.1)
        assert policy.decide(error, RetryState(attempt=2)) == pytest.approx(4.0)

    @pytest.mark.parametrize("hint", [float("inf"), float("nan")])
    def test_non_finite_retry_after_ignored(self, hint):
        policy = RetryPolicy(rand=_no_jitter)
        error = RateLimitError("Rate limit exceeded", retry_after=hint)
        assert policy.decide(error, RetryState(attempt=1)) == pytest.approx(2.0)

    def test_oversized_retry_after_capped(self):
        # Given
        policy = RetryPolicy(rand=_no_jitter, max_retry_after=30.0)
        error = RateLimitError("Rate limit exceeded", retry_after=1e308)

        # When / Then
        assert policy.decide(error, RetryState(attempt=0)) == pytest.approx(30.0)

    def test_default_cap(self):
        policy = RetryPolicy(rand=_no_jitter)
        error = RateLimitError("Rate limit exceeded", retry_after=10_000.0)
        assert policy.decide(error, RetryState(attempt=0)) == KalshiAPIConfig.MAX_RETRY_AFTER


class TestRetryState:

    def test_defaults(self):
        state = RetryState()
        assert state.attempt == 0
        assert state.max_retries == 3
        assert state.base_delay == 1.0
        assert not state.exhausted

    def test_exhausted(self):
        assert RetryState(attempt=3, max_retries=3).exhausted
