"""
Shared test fixtures: RSA keys and a scripted aiohttp session
"""

import json
from typing import Any, Dict, List, Optional, Union

import pytest
from Crypto.PublicKey import RSA


class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside `async with session.request(...)`"""

    def __init__(self,
                 status: int = 200,
                 body: Union[bytes, str, Dict, List, None] = None,
                 headers: Optional[Dict[str, str]] = None,
                 reason: str = "OK"):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.status = status
        self.reason = reason
        self.headers = headers or {}
        self._body = body or b""

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class _Failing:
    def __init__(self, error: BaseException):
        self._error = error

    async def __aenter__(self):
        raise self._error

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Replays scripted responses (or exceptions) and records every request"""

    def __init__(self, responses: List[Any]):
        self._responses = list(responses)
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs):
        self.requests.append({"method": method, "url": str(url), **kwargs})
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            return _Failing(item)
        return item

    async def close(self):
        self.closed = True


@pytest.fixture(scope="session")
def rsa_key():
    return RSA.generate(2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_key) -> str:
    return rsa_key.export_key().decode("utf-8")


@pytest.fixture(scope="session")
def public_key(rsa_key):
    return rsa_key.publickey()


@pytest.fixture
def fake_session():
    """Factory: fake_session(FakeResponse(...), ...)"""
    def _build(*responses) -> FakeSession:
        return FakeSession(list(responses))
    return _build


@pytest.fixture
def response():
    """Factory for FakeResponse"""
    return FakeResponse
