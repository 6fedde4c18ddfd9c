#!/usr/bin/env python3
"""
Main entry point for feed-auth
"""

import asyncio
import logging
import sys
from collections.abc import Callable

import aiohttp

from .auth_token.ci import get_ci_access_token
from .auth_token.refresher import TokenRefresher
from .auth_token.scheduler import AsyncioScheduler
from .config import ConfigStore, JsonConfigStore
from .constants import CONFIG_FILE, KEEP_ALIVE_FOR_REAUTH
from .errors.internal import AuthorizationError, InternalError
from .logging_config import LoggerConfigurator, log_structured_error
from .utils import emit_login_instructions


class AuthFlow:
    """The whole authentication flow, also used as the re-entry point.

    A CI-provided token short-circuits the refresh exchange. Otherwise the
    stored refresh token is exchanged, and the refresher schedules this same
    flow to run again before the new token expires.
    """

    def __init__(
        self,
        store: ConfigStore,
        http_session: aiohttp.ClientSession,
        scheduler: AsyncioScheduler | None = None,
        on_token: Callable[[str], None] | None = None,
    ) -> None:
        self.scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self.on_token = on_token
        self.refresher = TokenRefresher(
            store,
            http_session,
            reauthenticate=self.run,
            scheduler=self.scheduler,
        )
        self.last_token: str | None = None

    async def run(self) -> str:
        """Resolve an access token.

        Raises:
            InternalError: Any configuration, authorization, protocol or
                network failure of the refresh exchange.
        """
        ci_token = get_ci_access_token()
        if ci_token:
            logging.info("🤖 Using CI-provided access token")
            self._publish(ci_token)
            return ci_token
        try:
            token = await self.refresher.get_user_auth_token()
        except AuthorizationError:
            logging.warning("🔐 No stored refresh token; log in to seed one")
            raise
        logging.info("✅ Feed access token refreshed")
        self._publish(token)
        return token

    def _publish(self, token: str) -> None:
        self.last_token = token
        if self.on_token is not None:
            self.on_token(token)


def _print_token(token: str) -> None:
    print(token, flush=True)


async def main(config_file: str = CONFIG_FILE, keep_alive: bool = KEEP_ALIVE_FOR_REAUTH) -> int:
    """Run the flow once and print the token, then serve scheduled re-runs.

    Returns:
        Process exit code.
    """
    store = JsonConfigStore(config_file)
    async with aiohttp.ClientSession() as session:
        flow = AuthFlow(store, session, on_token=_print_token)
        try:
            await flow.run()
        except AuthorizationError as e:
            log_structured_error("auth", "Authentication required", e, {"config": config_file})
            emit_login_instructions(config_file)
            return 1
        except InternalError as e:
            log_structured_error("token", "Token refresh failed", e, {"config": config_file})
            return 1
        try:
            if keep_alive and flow.scheduler.pending:
                logging.info("⏳ Staying alive for scheduled re-authentication")
                await flow.scheduler.wait_idle()
        finally:
            await flow.scheduler.cancel_all()
    return 0


def run() -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: With the exit code of ``main``.
    """
    LoggerConfigurator().configure()
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        code = 0
    finally:
        logging.info("✅ Shutdown complete")
    sys.exit(code)


if __name__ == "__main__":
    run()
