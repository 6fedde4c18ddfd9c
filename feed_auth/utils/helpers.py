"""General utility helper functions."""

from __future__ import annotations

import math
import sys

__all__ = ["format_duration", "emit_login_instructions"]


def format_duration(total_seconds: int | float | None) -> str:
    """Return a human-friendly Hh Mm Ss string for a duration in seconds.

    Examples:
      65 -> "1m 5s"
      3605 -> "1h 0m 5s" (hours, minutes, seconds)
      59 -> "59s"
    """
    if total_seconds is None:
        return "unknown"
    if not math.isfinite(total_seconds):
        return "unknown"
    seconds = int(total_seconds)
    if seconds < 60:
        return f"{seconds}s"
    minutes, sec = divmod(seconds, 60)
    if minutes < 60:
        return f"{minutes}m {sec}s"
    hours, minutes = divmod(minutes, 60)
    if hours < 24:
        return f"{hours}h {minutes}m {sec}s"
    days, hours = divmod(hours, 24)
    return f"{days}d {hours}h {minutes}m {sec}s"


def emit_login_instructions(config_file: str) -> None:
    """Print guidance for seeding the refresh token after a failed login.

    Goes to stderr; stdout carries only access tokens.
    """
    out = sys.stderr
    print("📘 Instructions", file=out)
    print(f"👉 Open {config_file}", file=out)
    print('👉 Set "tokenEndpoint" to your feed\'s token exchange URL', file=out)
    print('👉 Set "refresh_token" to the token issued by your login page', file=out)
    print("👉 In CI, export SYSTEM_ACCESSTOKEN instead to skip the exchange", file=out, flush=True)
