"""Types used by the token exchange."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass

from ..constants import CONFIG_KEY_REFRESH_TOKEN
from ..errors.internal import ProtocolError


@dataclass(frozen=True)
class TokenResponse:
    """Parsed body of a successful token exchange.

    Attributes:
        access_token: Credential returned to the caller.
        refresh_token: Rotated refresh token replacing the stored one.
        expires_in: Lifetime in seconds, when the server reports one.
    """

    access_token: str
    refresh_token: str
    expires_in: float | None = None

    @classmethod
    def parse(cls, raw: str, status: int | None = None) -> TokenResponse:
        """Parse and validate a raw response body.

        Args:
            raw: Response body text.
            status: HTTP status, kept on the error for diagnostics.

        Returns:
            The validated TokenResponse.

        Raises:
            ProtocolError: If the body is not a JSON object or lacks either token.
        """
        try:
            body = json.loads(raw)
        except ValueError as e:
            raise ProtocolError(body=raw, status=status) from e
        if not isinstance(body, dict):
            raise ProtocolError(body=raw, status=status)
        access_token = body.get("access_token")
        refresh_token = body.get(CONFIG_KEY_REFRESH_TOKEN)
        if not _non_empty_str(access_token) or not _non_empty_str(refresh_token):
            raise ProtocolError(body=raw, status=status)
        return cls(access_token, refresh_token, _parse_expires_in(body.get("expires_in")))


def _non_empty_str(value: object) -> bool:
    return isinstance(value, str) and bool(value)


def _parse_expires_in(value: object) -> float | None:
    """Return a positive lifetime in seconds, or None.

    Numeric strings are accepted; zero, negatives, non-finite values and
    non-numbers are not.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(seconds) or seconds <= 0:
        return None
    return seconds
