"""
Kalshi API authentication: private key handling and request signing
"""

import base64
import logging
import math
import time
from datetime import datetime
from typing import Union

from Crypto.Hash import SHA256
from Crypto.PublicKey import RSA
from Crypto.Signature import pss

from .models import KalshiCredentials, SignedHeaders
from kalshi_sdk.exceptions import AuthenticationError, ValidationError


Timestamp = Union[datetime, int, float, None]


def _to_millis(now: Timestamp) -> int:
    """datetime, int epoch milliseconds or float epoch seconds (as from time.time())"""
    if now is None:
        return int(time.time() * 1000)
    if isinstance(now, datetime):
        return int(now.timestamp() * 1000)
    if isinstance(now, bool):
        raise ValidationError(f"Unsupported timestamp: {now!r}")
    if isinstance(now, int):
        return now
    if isinstance(now, float) and math.isfinite(now):
        return int(now * 1000)
    raise ValidationError(f"Unsupported timestamp: {now!r}")


def _strip_query(path: str) -> str:
    path = path.split("?", 1)[0]
    if not path.startswith("/"):
        return f"/{path}"
    return path


def canonical_message(timestamp_ms: int, method: str, path: str) -> str:
    """Message signed for a request: timestamp + METHOD + path (no query string)"""
    return f"{timestamp_ms}{method.upper()}{_strip_query(path)}"


class KalshiAuthManager:
    """Holds the signing key and produces signed request headers"""

    def __init__(self, api_key_id: str, private_key: Union[str, bytes]):
        """
        Initialize

        Args:
            api_key_id: Kalshi API key id (account identifier)
            private_key: PEM-encoded RSA private key

        Raises:
            AuthenticationError: key material is missing or unusable
        """
        self.logger = logging.getLogger(__name__)

        if not api_key_id:
            raise AuthenticationError("API key id must be a non-empty string")

        self._api_key_id = api_key_id
        self._private_key = self._load_private_key(private_key)

        self.logger.debug(f"Kalshi auth manager initialized for key {api_key_id}")

    @classmethod
    def from_credentials(cls, credentials: KalshiCredentials) -> "KalshiAuthManager":
        return cls(credentials.api_key_id, credentials.private_key_pem)

    @staticmethod
    def _load_private_key(private_key: Union[str, bytes]) -> RSA.RsaKey:
        if not private_key:
            raise AuthenticationError("Failed to load private key: no key material supplied")

        try:
            key = RSA.import_key(private_key)
        except (ValueError, IndexError, TypeError) as e:
            raise AuthenticationError(f"Failed to load private key: {e}") from e

        if not key.has_private():
            raise AuthenticationError("Failed to load private key: a public key was supplied")

        return key

    @property
    def api_key_id(self) -> str:
        return self._api_key_id

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message with RSA-PSS / SHA-256 (salt length = digest length)

        The padding is randomized, so signing the same message twice gives
        different bytes; both verify.

        Raises:
            AuthenticationError: signing failed
        """
        try:
            digest = SHA256.new(message)
            return pss.new(self._private_key).sign(digest)
        except (ValueError, TypeError) as e:
            raise AuthenticationError(f"Failed to sign message: {e}") from e

    def build_headers(self, method: str, path: str, now: Timestamp = None) -> SignedHeaders:
        """
        Build the signed header set for one request

        Args:
            method: HTTP method
            path: request path as sent on the wire (query string is ignored)
            now: signing time (datetime, int epoch milliseconds or float epoch
                seconds); defaults to the clock

        Returns:
            SignedHeaders
        """
        timestamp_ms = _to_millis(now)
        message = canonical_message(timestamp_ms, method, path)
        signature = base64.b64encode(self.sign(message.encode("utf-8"))).decode("ascii")

        return SignedHeaders(
            access_key=self._api_key_id,
            timestamp_ms=timestamp_ms,
            signature=signature,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(api_key_id={self._api_key_id!r})"
