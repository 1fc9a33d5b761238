"""
Browser Module - Remote Browser Sessions

Client for the external headless-browser provider.
"""

from .provider import BrowserbaseProvider
from .types import (
    BROWSER_HEIGHT,
    BROWSER_WIDTH,
    BrowserProviderConfigError,
    BrowserProviderError,
    BrowserSession,
    Viewport,
)

__all__ = [
    "BrowserbaseProvider",
    "BrowserSession",
    "Viewport",
    "BrowserProviderError",
    "BrowserProviderConfigError",
    "BROWSER_WIDTH",
    "BROWSER_HEIGHT",
]
