"""
Session Module

Browser session lifecycle for the operator:
- create a remote session and resolve its live-view URL
- track the sessions this process created
- idempotent release
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from src.core.browser.types import BrowserProviderError, BrowserSession, Viewport

logger = logging.getLogger(__name__)


class BrowserProviderProtocol(Protocol):
    """Remote browser provider interface."""

    async def create_session(self, viewport: Viewport | None = None) -> BrowserSession:
        ...

    async def get_debug_url(self, session_id: str) -> str:
        ...

    async def close_session(self, session_id: str) -> None:
        ...


class SessionManager:
    """
    Manages remote browser sessions created by this server.

    A provider is built through ``provider_factory`` on each call, so
    credentials are read at session-creation time rather than at startup.
    """

    def __init__(self, provider_factory: Callable[[], BrowserProviderProtocol]):
        self._provider_factory = provider_factory
        self._active_sessions: dict[str, BrowserSession] = {}
        self._lock = asyncio.Lock()

    async def create_session(self) -> BrowserSession:
        """
        Create a browser session and fetch its debug URL.

        If the debug URL cannot be fetched the new session is released
        again before the error propagates.

        Raises:
            BrowserProviderError: If the provider cannot create the session.
        """
        provider = self._provider_factory()
        session = await provider.create_session()

        try:
            session.debug_url = await provider.get_debug_url(session.session_id)
        except BrowserProviderError:
            logger.error("Failed to get debug URL for session %s, releasing it", session.session_id)
            await self._release_remote(provider, session.session_id)
            raise

        async with self._lock:
            self._active_sessions[session.session_id] = session
        logger.info("Browser session ready: %s", session.session_id)
        return session

    async def get_debug_url(self, session_id: str) -> str:
        """
        Refresh and return the debug URL of a known session.

        Raises:
            KeyError: If the session was not created by this server.
            BrowserProviderError: If the provider call fails.
        """
        session = self._active_sessions.get(session_id)
        if session is None:
            raise KeyError(session_id)

        url = await self._provider_factory().get_debug_url(session_id)
        session.debug_url = url
        return url

    async def close_session(self, session_id: str) -> bool:
        """
        Release a session and forget it locally.

        Local state is cleared even when the remote release fails, and
        closing an unknown or already closed session is not an error.

        Returns:
            True if the provider acknowledged the release
        """
        async with self._lock:
            known = self._active_sessions.pop(session_id, None) is not None

        if not known:
            logger.debug("Closing session not tracked locally: %s", session_id)

        try:
            provider = self._provider_factory()
        except BrowserProviderError as e:
            logger.warning("Cannot release session %s: %s", session_id, e)
            return False

        return await self._release_remote(provider, session_id)

    async def close_all(self) -> None:
        """Release every tracked session (used on shutdown)."""
        for session_id in self.list_active_sessions():
            await self.close_session(session_id)

    async def _release_remote(self, provider: BrowserProviderProtocol, session_id: str) -> bool:
        try:
            await provider.close_session(session_id)
            return True
        except BrowserProviderError as e:
            logger.warning("Failed to release browser session %s: %s", session_id, e)
            return False

    def get_session(self, session_id: str) -> BrowserSession | None:
        return self._active_sessions.get(session_id)

    def has_session(self, session_id: str) -> bool:
        return session_id in self._active_sessions

    @property
    def active_session_count(self) -> int:
        return len(self._active_sessions)

    def list_active_sessions(self) -> list[str]:
        return list(self._active_sessions.keys())
