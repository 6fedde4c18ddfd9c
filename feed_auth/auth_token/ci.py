"""Access token provisioned by a CI/build system."""

from __future__ import annotations

import os

from ..constants import CI_ACCESS_TOKEN_ENV


def get_ci_access_token() -> str | None:
    """Return the CI-provided access token, or None when not running in CI."""
    return os.environ.get(CI_ACCESS_TOKEN_ENV) or None
