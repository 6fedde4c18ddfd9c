"""Utility functions package for feed-auth.

Exposed functions:
    format_duration: Formats time durations into human-readable strings.
    emit_login_instructions: Prints setup guidance when no credential is stored.
"""

from .helpers import emit_login_instructions, format_duration

__all__ = ["format_duration", "emit_login_instructions"]
