from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

BROWSER_WIDTH = 1440
BROWSER_HEIGHT = 900


@dataclass(frozen=True)
class Viewport:
    width: int = BROWSER_WIDTH
    height: int = BROWSER_HEIGHT

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass
class BrowserSession:
    """A remote browser session created by this server."""

    session_id: str
    debug_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "url": self.debug_url,
            "createdAt": self.created_at.isoformat(),
        }


class BrowserProviderError(RuntimeError):
    """A call to the browser provider failed."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class BrowserProviderConfigError(BrowserProviderError):
    """Provider credentials are missing or invalid."""
