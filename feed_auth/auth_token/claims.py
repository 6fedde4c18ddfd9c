"""Unverified JWT claim decoding."""

from __future__ import annotations

import logging
from typing import Any

import jwt


def decode_claims(token: str) -> dict[str, Any] | None:
    """Decode the claims of ``token`` without verifying it.

    The signature is not checked; the claims are only read for diagnostics
    and clock skew compensation.

    Returns:
        Claims mapping, or None when the token is not a decodable JWT.
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logging.debug(f"⚠️ Access token claims not decodable type={type(e).__name__}")
        return None
    if not isinstance(claims, dict):
        return None
    return claims
