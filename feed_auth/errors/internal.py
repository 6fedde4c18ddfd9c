"""Centralized internal error hierarchy.

These exceptions give callers semantic categories to branch on. Raw aiohttp /
JSON errors never leave the token exchange boundary; they are wrapped instead.

Classes:
  InternalError        – Base for all internal errors.
  ConfigurationError   – Local setup is unusable (e.g. no token endpoint).
  AuthorizationError   – Credential material is missing; a login is needed.
  ProtocolError        – The server answered but not in the expected shape.
  NetworkError         – Transport failure or timeout of the HTTP exchange.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigurationError(InternalError):
    """Exception raised when the local configuration cannot be used.

    Covers an unloadable configuration or one without a token endpoint.
    """


class AuthorizationError(InternalError):
    """Exception raised when credential material is missing.

    Distinct from ConfigurationError so callers can tell "need to log in"
    apart from "misconfigured".
    """


class ProtocolError(InternalError):
    """Exception raised when the token endpoint returns an unexpected body.

    The offending body is kept as structured data rather than folded into the
    message only, so callers can inspect it.

    Attributes:
        body: Raw response body text.
        status: HTTP status of the response, if known.
    """

    def __init__(
        self,
        message: str = "malformed response body",
        *,
        body: str,
        status: int | None = None,
    ) -> None:
        super().__init__(f"{message}:\n{body}", data={"body": body, "status": status})
        self.body = body
        self.status = status


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    This includes connection failures and timeouts of the token exchange.
    It is propagated to the caller and never retried here.
    """


__all__ = [
    "InternalError",
    "ConfigurationError",
    "AuthorizationError",
    "ProtocolError",
    "NetworkError",
]
