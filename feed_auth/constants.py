"""
Configuration constants for feed-auth

This module contains all configurable constants used throughout the application.
Each numeric constant can be overridden by setting an environment variable with
the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean flag from an environment variable.

    Accepts 'true', '1', 'yes' (case-insensitive) as true and 'false', '0', 'no'
    as false. Anything else falls back to the default.
    """
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    print(f"Warning: Invalid boolean value for {name}='{value}', using default {default}")
    return default


# Configuration store keys
CONFIG_KEY_TOKEN_ENDPOINT = "tokenEndpoint"
CONFIG_KEY_REFRESH_TOKEN = "refresh_token"

# Environment variable holding a CI-provisioned access token
CI_ACCESS_TOKEN_ENV = "SYSTEM_ACCESSTOKEN"

# Feed URL recognition
FEED_PACKAGING_SEGMENT = "/_packaging/"
FEED_LEGACY_HOST_PATTERN = "pkgs.visualstudio.com/"
FEED_CURRENT_HOST_PATTERN = "pkgs.dev.azure.com/"

# Persisted configuration file
CONFIG_FILE = os.getenv(
    "FEED_AUTH_CONFIG_FILE", os.path.join(os.path.expanduser("~"), ".feed-auth.json")
)

# Network/HTTP constants
HTTP_REQUEST_TIMEOUT_SECONDS = _get_env_int(
    "HTTP_REQUEST_TIMEOUT_SECONDS", 30
)  # Total timeout for the token exchange request

# Keep the process running while a re-authentication is scheduled
KEEP_ALIVE_FOR_REAUTH = _get_env_bool("FEED_AUTH_KEEP_ALIVE", True)
