"""
Fixtures for token exchange data.
"""

import asyncio
import json
from typing import Any

import jwt

TOKEN_ENDPOINT = "https://auth.example.test/token"

# Store contents before an exchange
MOCK_CONFIG = {
    "tokenEndpoint": TOKEN_ENDPOINT,
    "refresh_token": "stored_refresh_token",
}

# Minimal successful exchange
MOCK_TOKEN_RESPONSE = {
    "access_token": "A",
    "refresh_token": "B",
}

# Successful exchange carrying a lifetime
MOCK_EXPIRING_TOKEN_RESPONSE = {
    "access_token": "A",
    "refresh_token": "B",
    "expires_in": 10,
}


def make_jwt(claims: dict[str, Any]) -> str:
    """Return a signed JWT carrying ``claims``."""
    return jwt.encode(claims, "test-secret-key-with-enough-length", algorithm="HS256")


class FakeResp:
    def __init__(self, status: int, body: str | dict | None = None, raise_exception: Exception | None = None):
        self.status = status
        self._body = json.dumps(body) if isinstance(body, dict) else (body or "")
        self.raise_exception = raise_exception

    async def __aenter__(self):
        if self.raise_exception:
            raise self.raise_exception
        return self

    async def __aexit__(self, _exc_type, _exc, _tb):
        return False

    async def text(self):
        # Simulate asynchronous boundary
        await asyncio.sleep(0)
        return self._body


class FakeSession:
    def __init__(self, status: int = 200, body: str | dict | None = None, exception: Exception | None = None):
        self.status = status
        self.body = MOCK_TOKEN_RESPONSE if body is None else body
        self.exception = exception
        self.post_calls: list[dict[str, Any]] = []

    def post(self, url, data=None, timeout=None):
        self.post_calls.append({"url": url, "data": data, "timeout": timeout})
        if self.exception:
            raise self.exception
        return FakeResp(self.status, self.body)


class RecordingScheduler:
    """Scheduler double recording requests instead of arming timers."""

    def __init__(self):
        self.scheduled: list[tuple[float, Any]] = []

    def schedule(self, delay_seconds, task):
        self.scheduled.append((delay_seconds, task))
