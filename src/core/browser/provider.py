"""
BrowserbaseProvider - Client for the Browserbase session API.

Wraps the three remote calls the operator needs: create a session with a
fixed viewport, fetch its live debugger URL, and request its release.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from .types import BrowserProviderConfigError, BrowserProviderError, BrowserSession, Viewport

__all__ = ["BrowserbaseProvider"]

logger = logging.getLogger(__name__)


class BrowserbaseProvider:
    """
    Async client for Browserbase sessions.

    Attributes:
        _base_url: Base URL of the Browserbase REST API
        _project_id: Project the sessions are created in
        _viewport: Viewport (and fingerprint screen size) of new sessions
    """

    DEFAULT_BASE_URL = "https://api.browserbase.com/v1"
    API_KEY_HEADER = "X-BB-API-Key"

    def __init__(
        self,
        api_key: str,
        project_id: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        block_ads: bool = True,
        viewport: Viewport | None = None,
    ) -> None:
        if not api_key:
            raise BrowserProviderConfigError("Browserbase API key is not configured")
        if not project_id:
            raise BrowserProviderConfigError("Browserbase project id is not configured")

        self._api_key = api_key
        self._project_id = project_id
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._block_ads = block_ads
        self._viewport = viewport or Viewport()

    @classmethod
    def from_settings(cls, config: Any) -> BrowserbaseProvider:
        """
        Build a provider from the ``browserbase`` settings section.

        Credentials fall back to BROWSERBASE_API_KEY / BROWSERBASE_PROJECT_ID
        and are read when the provider is built.

        Raises:
            BrowserProviderConfigError: If either credential is missing.
        """
        api_key = config.api_key.get_secret_value() if config.api_key else os.getenv("BROWSERBASE_API_KEY", "")
        project_id = config.project_id or os.getenv("BROWSERBASE_PROJECT_ID", "")
        return cls(
            api_key=api_key,
            project_id=project_id,
            base_url=config.base_url,
            timeout=config.timeout,
            block_ads=config.block_ads,
            viewport=Viewport(width=config.viewport.width, height=config.viewport.height),
        )

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def _session_payload(self, viewport: Viewport) -> dict[str, Any]:
        return {
            "projectId": self._project_id,
            "browserSettings": {
                "fingerprint": {
                    "screen": {
                        "maxHeight": viewport.height,
                        "maxWidth": viewport.width,
                        "minHeight": viewport.height,
                        "minWidth": viewport.width,
                    },
                },
                "viewport": viewport.to_dict(),
                "blockAds": self._block_ads,
            },
        }

    async def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        headers = {
            "Content-Type": "application/json",
            self.API_KEY_HEADER: self._api_key,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(method, url, headers=headers, json=json)
        except httpx.HTTPError as e:
            raise BrowserProviderError(f"Browserbase request {method} {path} failed: {e}") from e

        if response.status_code >= 400:
            raise BrowserProviderError(
                f"Browserbase request {method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise BrowserProviderError(
                f"Browserbase request {method} {path} returned invalid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e
        return data if isinstance(data, dict) else {}

    async def create_session(self, viewport: Viewport | None = None) -> BrowserSession:
        """
        Create a new remote browser session.

        Returns:
            BrowserSession without a debug URL (see get_debug_url)

        Raises:
            BrowserProviderError: If the API call fails or returns no id.
        """
        viewport = viewport or self._viewport
        data = await self._request("POST", "/sessions", json=self._session_payload(viewport))

        session_id = data.get("id")
        if not session_id:
            raise BrowserProviderError("Browserbase did not return a session id")

        logger.info("Created browser session %s (%dx%d)", session_id, viewport.width, viewport.height)
        return BrowserSession(session_id=str(session_id), raw=data)

    async def get_debug_url(self, session_id: str) -> str:
        """Return the fullscreen live-view URL of a session."""
        data = await self._request("GET", f"/sessions/{session_id}/debug")
        url = data.get("debuggerFullscreenUrl") or data.get("debuggerUrl")
        if not url:
            raise BrowserProviderError(f"Browserbase returned no debugger URL for session {session_id}")
        return str(url)

    async def close_session(self, session_id: str) -> None:
        """Request release of a session."""
        await self._request(
            "POST",
            f"/sessions/{session_id}",
            json={"projectId": self._project_id, "status": "REQUEST_RELEASE"},
        )
        logger.info("Requested release of browser session %s", session_id)
