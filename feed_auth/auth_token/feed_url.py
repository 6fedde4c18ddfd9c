"""Recognition of private package feed URLs."""

from __future__ import annotations

from ..constants import (
    FEED_CURRENT_HOST_PATTERN,
    FEED_LEGACY_HOST_PATTERN,
    FEED_PACKAGING_SEGMENT,
)


def is_feed_url(url: str) -> bool:
    """Return True if ``url`` points at a hosted packaging feed.

    The URL must carry the packaging path segment and one of the legacy or
    current registry host patterns.
    """
    if FEED_PACKAGING_SEGMENT not in url:
        return False
    if FEED_LEGACY_HOST_PATTERN in url:
        return True
    return FEED_CURRENT_HOST_PATTERN in url
