"""
Kalshi authentication data models
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from kalshi_sdk.exceptions import AuthenticationError


@dataclass(frozen=True)
class KalshiCredentials:
    """Kalshi API credentials (account id + PEM private key)"""
    api_key_id: str
    private_key_pem: str = field(repr=False)

    @classmethod
    def from_env(cls) -> "KalshiCredentials":
        """Load credentials from environment variables (.env supported)"""
        load_dotenv()

        api_key_id = os.getenv("KALSHI_API_KEY_ID", "")
        private_key_pem = os.getenv("KALSHI_PRIVATE_KEY", "")
        key_path = os.getenv("KALSHI_PRIVATE_KEY_PATH", "")

        if not private_key_pem and key_path:
            try:
                private_key_pem = Path(key_path).expanduser().read_text(encoding="utf-8")
            except OSError as e:
                raise AuthenticationError(f"Failed to read private key file {key_path}: {e}") from e

        if not api_key_id:
            raise AuthenticationError("KALSHI_API_KEY_ID must be set")
        if not private_key_pem:
            raise AuthenticationError("KALSHI_PRIVATE_KEY or KALSHI_PRIVATE_KEY_PATH must be set")

        return cls(api_key_id=api_key_id, private_key_pem=private_key_pem)


@dataclass(frozen=True)
class SignedHeaders:
    """Authentication headers for a single request attempt"""
    access_key: str
    timestamp_ms: int
    signature: str = field(repr=False)

    def as_dict(self, prefix: str = "KALSHI-") -> Dict[str, str]:
        """Header mapping; the three values are always emitted together"""
        return {
            f"{prefix}ACCESS-KEY": self.access_key,
            f"{prefix}ACCESS-SIGNATURE": self.signature,
            f"{prefix}ACCESS-TIMESTAMP": str(self.timestamp_ms),
        }
