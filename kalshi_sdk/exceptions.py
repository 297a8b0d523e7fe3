"""
ABOUTME: Error taxonomy for the Kalshi request pipeline
"""

from enum import Enum
from typing import Any, Optional


class ErrorClassification(Enum):
    """Category attached to every failed call"""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RATE_LIMITED = "rate_limited"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    NETWORK = "network"
    MALFORMED = "malformed"


class KalshiError(Exception):
    """Base class for every error raised by the SDK"""

    classification: Optional[ErrorClassification] = None

    def __init__(self,
                 message: str,
                 status_code: Optional[int] = None,
                 response_body: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        # number of HTTP attempts made before this error surfaced
        self.attempts = 0

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(message={self.message!r}, "
                f"status_code={self.status_code!r})")


class AuthenticationError(KalshiError):
    """Bad key material, signing failure or a 401/403 response"""
    classification = ErrorClassification.AUTHENTICATION


class ValidationError(KalshiError):
    """Invalid input caught before any network call"""
    classification = ErrorClassification.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)


class NetworkError(KalshiError):
    """No response received (connection failure, DNS, timeout)"""
    classification = ErrorClassification.NETWORK

    def __init__(self, message: str):
        super().__init__(message)


class MalformedResponseError(KalshiError):
    """A success response whose body could not be decoded"""
    classification = ErrorClassification.MALFORMED


class APIError(KalshiError):
    """The API answered with a non-success status"""


class RateLimitError(APIError):
    """HTTP 429"""
    classification = ErrorClassification.RATE_LIMITED

    def __init__(self,
                 message: str,
                 status_code: Optional[int] = 429,
                 response_body: Optional[Any] = None,
                 retry_after: Optional[float] = None):
        super().__init__(message, status_code, response_body)
        self.retry_after = retry_after


class ClientError(APIError):
    """4xx other than 429 (and other than 401/403, which are authentication errors)"""
    classification = ErrorClassification.CLIENT_ERROR


class ServerError(APIError):
    """5xx"""
    classification = ErrorClassification.SERVER_ERROR
