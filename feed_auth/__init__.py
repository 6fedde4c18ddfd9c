"""Private package feed authentication.

Exchanges a stored refresh token for a short-lived feed access token and keeps
it fresh for package-registry clients.
"""

__version__ = "0.1.0"
