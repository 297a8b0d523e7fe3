"""
ABOUTME: Signed HTTP transport shared by every Kalshi service (sign -> send -> classify -> retry)
"""

import asyncio
import json
import logging
import math
import time
from dataclasses import dataclass, field
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional, Union
import aiohttp
from yarl import URL

from kalshi_sdk.auth.config import COMMON_HEADERS, ENDPOINTS, EnvironmentEndpoint, KalshiAPIConfig
from kalshi_sdk.auth.kalshi_auth import KalshiAuthManager
from kalshi_sdk.exceptions import (
    AuthenticationError,
    ClientError,
    KalshiError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from kalshi_sdk.utils.backoff import RetryPolicy, RetryState


@dataclass
class RawResponse:
    """Status, headers and undecoded body of one HTTP attempt"""
    status: int
    reason: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())


def resolve_environment(environment: Union[str, EnvironmentEndpoint]) -> EnvironmentEndpoint:
    """Map an environment name ("production" / "demo") to its endpoint"""
    if isinstance(environment, EnvironmentEndpoint):
        return environment
    if environment not in ENDPOINTS:
        raise ValidationError(
            f"Environment must be one of {sorted(ENDPOINTS)}, got: {environment}"
        )
    return ENDPOINTS[environment]


def _normalize_path(path: str) -> str:
    if not path.startswith("/"):
        return f"/{path}"
    return path


def _clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop None values; aiohttp rejects bools, so send them as lowercase strings"""
    if not params:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned or None


def _decode_body(body: bytes) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body.decode("utf-8", errors="replace")


def _error_detail(payload: Any) -> str:
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            return error.get("message") or error.get("code") or ""
        if isinstance(error, str):
            return error
        return payload.get("message", "")
    if isinstance(payload, str):
        return payload[:200]
    return ""


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        try:
            seconds = parsedate_to_datetime(value).timestamp() - time.time()
        except (TypeError, ValueError):
            return None
    if not math.isfinite(seconds):
        return None
    return min(max(0.0, seconds), KalshiAPIConfig.MAX_RETRY_AFTER)


class BaseAPIClient:
    """Kalshi API base client: signs, sends, classifies and retries requests"""

    def __init__(self,
                 auth_manager: KalshiAuthManager,
                 environment: Union[str, EnvironmentEndpoint] = "production",
                 timeout: float = KalshiAPIConfig.REQUEST_TIMEOUT,
                 max_retries: int = KalshiAPIConfig.MAX_RETRIES,
                 base_delay: float = KalshiAPIConfig.BASE_DELAY,
                 retry_policy: Optional[RetryPolicy] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize

        Args:
            auth_manager: signing key holder
            environment: "production", "demo" or an explicit EnvironmentEndpoint
            timeout: per-attempt timeout in seconds
            max_retries: retries after the initial attempt for transient failures
            base_delay: backoff base in seconds
            retry_policy: backoff policy (default: exponential with 1s jitter)
            session: externally owned aiohttp session (not closed by this client)
        """
        if max_retries < 0:
            raise ValidationError(f"max_retries must be >= 0, got: {max_retries}")
        if timeout <= 0:
            raise ValidationError(f"timeout must be positive, got: {timeout}")

        self.auth_manager = auth_manager
        self.endpoint = resolve_environment(environment)
        self.base_url = self.endpoint.base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.retry_policy = retry_policy or RetryPolicy()
        self.logger = logging.getLogger(self.__class__.__name__)

        self._session = session
        self._owns_session = session is None

    @property
    def environment(self) -> str:
        return self.endpoint.name

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP session (created lazily, reused across calls)"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self):
        """Close the session if this client created it"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ---------------------------------------------------------------- pipeline

    def _url(self, path: str) -> URL:
        """Request URL, quoted once; its raw path is both signed and sent"""
        try:
            return URL(f"{self.base_url}{path}")
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid request path: {path!r}") from e

    def _sign(self, method: str, url: URL) -> Dict[str, str]:
        """Base headers merged with a fresh signed header set (signed headers win)"""
        signed = self.auth_manager.build_headers(method, url.raw_path)
        headers = dict(COMMON_HEADERS)
        headers.update(signed.as_dict(self.endpoint.header_prefix))
        return headers

    async def _send(self,
                    method: str,
                    url: URL,
                    headers: Dict[str, str],
                    params: Optional[Dict[str, Any]] = None,
                    body: Optional[Any] = None) -> RawResponse:
        """
        Execute one HTTP attempt

        Raises:
            NetworkError: no response was received (connection error, DNS, timeout)
        """
        session = await self._get_session()

        try:
            async with session.request(
                method,
                url,
                params=params,
                json=body,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                allow_redirects=False,
            ) as response:
                content = await response.read()
                return RawResponse(
                    status=response.status,
                    reason=response.reason or "",
                    headers={k.lower(): v for k, v in response.headers.items()},
                    body=content,
                )
        except asyncio.TimeoutError as e:
            raise NetworkError(f"Request timed out after {self.timeout}s: {method} {url.raw_path}") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Network error: {e}") from e

    def _classify(self, raw: RawResponse) -> Any:
        """
        Turn a response into decoded JSON or a typed error

        Raises:
            RateLimitError, AuthenticationError, ClientError, ServerError,
            MalformedResponseError
        """
        if 200 <= raw.status < 300:
            if not raw.body:
                return None
            try:
                return json.loads(raw.body)
            except ValueError as e:
                raise MalformedResponseError(
                    f"Could not decode response body: {e}",
                    raw.status,
                    raw.body.decode("utf-8", errors="replace"),
                ) from e

        payload = _decode_body(raw.body)
        detail = _error_detail(payload)
        message = f"API request failed: {raw.status} {raw.reason}".rstrip()
        if detail:
            message = f"{message} - {detail}"

        if raw.status == 429:
            raise RateLimitError(
                "Rate limit exceeded",
                raw.status,
                payload,
                retry_after=_parse_retry_after(raw.header("Retry-After")),
            )
        if raw.status in (401, 403):
            skew_ms = self._clock_skew_ms(raw)
            if skew_ms is not None and abs(skew_ms) > KalshiAPIConfig.MAX_CLOCK_SKEW_MS:
                self.logger.warning(f"Local clock differs from server by {skew_ms} ms")
                message = f"{message} (possible clock skew: {skew_ms} ms)"
            raise AuthenticationError(message, raw.status, payload)
        if 500 <= raw.status < 600:
            raise ServerError(message, raw.status, payload)
        raise ClientError(message, raw.status, payload)

    @staticmethod
    def _clock_skew_ms(raw: RawResponse) -> Optional[int]:
        """Server clock minus local clock, from the Date header"""
        date = raw.header("Date")
        if not date:
            return None
        try:
            server_time = parsedate_to_datetime(date).timestamp()
        except (TypeError, ValueError):
            return None
        return int((server_time - time.time()) * 1000)

    async def execute(self,
                      method: str,
                      path: str,
                      params: Optional[Dict[str, Any]] = None,
                      body: Optional[Any] = None) -> Any:
        """
        Execute a signed API call with retry

        Args:
            method: HTTP method
            path: request path (e.g. "/trade-api/v2/markets")
            params: query parameters (None values are dropped)
            body: JSON body

        Returns:
            decoded JSON response (None for an empty body)

        Raises:
            KalshiError: the classified failure of the last attempt
        """
        method = method.upper()
        path = _normalize_path(path)
        params = _clean_params(params)
        url = self._url(path)
        state = RetryState(max_retries=self.max_retries, base_delay=self.base_delay)

        while True:
            self.logger.debug(f"Request: {method} {path} (attempt {state.attempt + 1})")
            try:
                headers = self._sign(method, url)
                raw = await self._send(method, url, headers, params=params, body=body)
                return self._classify(raw)
            except KalshiError as error:
                error.attempts = state.attempt + 1
                delay = self.retry_policy.decide(error, state)
                if delay is None:
                    self.logger.error(
                        f"{method} {path} failed after {error.attempts} attempt(s): "
                        f"{error.classification.value}: {error.message}"
                    )
                    raise
                self.logger.warning(
                    f"{method} {path} {error.classification.value} "
                    f"(attempt {state.attempt + 1}/{state.max_retries + 1}), retrying in {delay:.2f}s"
                )
                await asyncio.sleep(delay)
                state.attempt += 1

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.execute("GET", path, params=params)

    async def post(self, path: str, body: Optional[Any] = None) -> Any:
        return await self.execute("POST", path, body=body)

    async def put(self, path: str, body: Optional[Any] = None) -> Any:
        return await self.execute("PUT", path, body=body)

    async def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.execute("DELETE", path, params=params)
