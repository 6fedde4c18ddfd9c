"""Refresh token exchange for feed access tokens."""

from __future__ import annotations

import asyncio
import logging
import math
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any
from urllib.parse import urlencode

import aiohttp

from ..config.store import ConfigStore
from ..constants import (
    CONFIG_KEY_REFRESH_TOKEN,
    CONFIG_KEY_TOKEN_ENDPOINT,
    HTTP_REQUEST_TIMEOUT_SECONDS,
)
from ..errors.internal import AuthorizationError, ConfigurationError, NetworkError
from ..utils import format_duration
from .claims import decode_claims
from .scheduler import AsyncioScheduler, ScheduledTask, Scheduler
from .types import TokenResponse

ClaimsDecoder = Callable[[str], Mapping[str, Any] | None]


def set_refresh_token(store: ConfigStore, token: str) -> None:
    """Seed the refresh token used by the next exchange, e.g. after a login.

    Raises:
        ValueError: If ``token`` is empty.
    """
    if not token:
        raise ValueError("refresh token cannot be empty")
    store.set(CONFIG_KEY_REFRESH_TOKEN, token)
    logging.debug("🔐 Refresh token seeded")


class TokenRefresher:
    """Exchanges the stored refresh token for a fresh access token.

    The refresh token rotates on every exchange: the value stored after a
    successful call is always the one the server returned. Calls against the
    same store must be serialized by the caller.
    """

    def __init__(
        self,
        store: ConfigStore,
        http_session: aiohttp.ClientSession,
        *,
        reauthenticate: ScheduledTask | None = None,
        scheduler: Scheduler | None = None,
        claims_decoder: ClaimsDecoder = decode_claims,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        timeout_seconds: float = HTTP_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the refresher.

        Args:
            store: Configuration store holding the endpoint and refresh token.
            http_session: HTTP session used for the exchange.
            reauthenticate: Entry point of the whole authentication flow, run
                again when the new token is about to expire.
            scheduler: Runs ``reauthenticate`` later; defaults to the event loop.
            claims_decoder: Decodes access token claims.
            clock: Returns the current time in epoch seconds.
            sleep: Suspends for the given number of seconds.
            timeout_seconds: Total timeout of the HTTP exchange.
        """
        if http_session is None:
            raise TypeError("http_session cannot be None")
        self.store = store
        self.session = http_session
        self.reauthenticate = reauthenticate
        self.scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self._decode_claims = claims_decoder
        self._clock = clock
        self._sleep = sleep
        self.timeout_seconds = timeout_seconds

    async def get_user_auth_token(self) -> str:
        """Return a fresh access token, rotating the stored refresh token.

        Returns:
            The access token issued by the token endpoint.

        Raises:
            ConfigurationError: If the configuration is missing or has no endpoint.
            AuthorizationError: If no refresh token is stored.
            ProtocolError: If the response body is malformed.
            NetworkError: If the HTTP exchange fails.
        """
        endpoint, refresh_token = self._read_credentials()
        token = await self._exchange(endpoint, refresh_token)

        if token.expires_in is not None:
            self._schedule_reauthentication(token.expires_in)

        self.store.set(CONFIG_KEY_REFRESH_TOKEN, token.refresh_token)

        claims = self._decode_claims(token.access_token)
        self._log_claims(claims)
        await self._wait_out_clock_skew(claims)
        return token.access_token

    def _read_credentials(self) -> tuple[str, str]:
        config = self.store.load()
        if not config or not config.get(CONFIG_KEY_TOKEN_ENDPOINT):
            raise ConfigurationError("invalid config, missing tokenEndpoint")
        refresh_token = config.get(CONFIG_KEY_REFRESH_TOKEN)
        if not refresh_token:
            raise AuthorizationError(f"missing {CONFIG_KEY_REFRESH_TOKEN}")
        return config[CONFIG_KEY_TOKEN_ENDPOINT], refresh_token

    async def _exchange(self, endpoint: str, refresh_token: str) -> TokenResponse:
        """POST the refresh token to the endpoint and parse the answer.

        Args:
            endpoint: Token exchange URL.
            refresh_token: Stored refresh token, sent as the ``code`` parameter.

        Returns:
            Parsed and validated TokenResponse.

        Raises:
            ProtocolError: If the body is malformed.
            NetworkError: On transport failures or timeout.
        """
        url = f"{endpoint}?{urlencode({'code': refresh_token})}"
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with self.session.post(url, timeout=timeout) as resp:
                raw = await resp.text()
                status = resp.status
        except TimeoutError as e:
            raise NetworkError(
                "Token exchange timeout", data={"endpoint": endpoint}
            ) from e
        except aiohttp.ClientError as e:
            raise NetworkError(
                f"Network error during token exchange: {e}",
                data={"endpoint": endpoint},
            ) from e
        logging.debug(f"🌐 Token exchange answered status={status} bytes={len(raw)}")
        return TokenResponse.parse(raw, status)

    def _schedule_reauthentication(self, expires_in: float) -> None:
        if self.reauthenticate is None:
            logging.debug(
                f"Re-authentication not scheduled (no hook) expires_in={expires_in}"
            )
            return
        reauthenticate = self.reauthenticate

        async def _rerun() -> None:
            logging.info("🔄 Re-authenticating...")
            await reauthenticate()

        self.scheduler.schedule(expires_in, _rerun)
        logging.info(
            f"⏰ Re-authenticate after {format_duration(expires_in)} expires_in={expires_in}"
        )

    def _log_claims(self, claims: Mapping[str, Any] | None) -> None:
        # Only the validity window and scope are ever logged.
        def field(name: str) -> Any:
            if not claims:
                return "unavailable"
            return claims.get(name, "unavailable")

        logging.info(
            f"🔑 New token received nbf={field('nbf')} exp={field('exp')} scope={field('scp')}"
        )

    async def _wait_out_clock_skew(self, claims: Mapping[str, Any] | None) -> None:
        """Sleep until the token's not-before time has passed on our clock.

        Undecodable claims or a missing ``nbf`` proceed without waiting.
        """
        if not claims:
            logging.warning("⚠️ Access token claims unavailable; skipping clock skew check")
            return
        nbf = claims.get("nbf")
        if isinstance(nbf, bool) or not isinstance(nbf, int | float):
            logging.debug("No nbf claim on access token; skipping clock skew check")
            return
        now = math.floor(self._clock())
        if nbf > now:
            wait_seconds = math.floor(nbf - now)
            logging.info(f"⏳ Waiting out clock skew of {wait_seconds} seconds")
            await self._sleep(wait_seconds)
