"""ABOUTME: Signed transport client shared by all services"""

from .client import BaseAPIClient, RawResponse, resolve_environment

__all__ = [
    "BaseAPIClient",
    "RawResponse",
    "resolve_environment",
]
