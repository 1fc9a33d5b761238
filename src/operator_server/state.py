"""
Application State Management

Provides centralized state for the operator web server.
Supports dependency injection and replacement of components in tests.
"""
from typing import Optional

from fastapi import Request

from src.core.browser import BrowserbaseProvider, Viewport
from src.core.chat import ChatRuntime
from src.core.config import settings
from src.core.context import HistoryWindower, WindowConfig
from src.core.llm import ClientFactory
from src.core.system import SessionManager


class AppState:
    """
    Centralized application state container.

    Holds the browser session manager and the chat runtime, both built
    lazily from settings.
    """

    def __init__(self):
        self._session_manager: Optional[SessionManager] = None
        self._chat_runtime: Optional[ChatRuntime] = None

    @property
    def session_manager(self) -> SessionManager:
        if self._session_manager is None:
            self._session_manager = SessionManager(
                provider_factory=lambda: BrowserbaseProvider.from_settings(settings.browserbase)
            )
        return self._session_manager

    @session_manager.setter
    def session_manager(self, value: SessionManager) -> None:
        self._session_manager = value

    @property
    def chat_runtime(self) -> ChatRuntime:
        if self._chat_runtime is None:
            factory = ClientFactory()
            viewport = settings.browserbase.viewport
            self._chat_runtime = ChatRuntime(
                model_factory=lambda: factory.create_chat_client(settings.llm),
                windower=HistoryWindower(WindowConfig.from_settings(settings.chat_history)),
                system_prompt=settings.app.system_prompt,
                viewport=Viewport(width=viewport.width, height=viewport.height),
            )
        return self._chat_runtime

    @chat_runtime.setter
    def chat_runtime(self, value: ChatRuntime) -> None:
        self._chat_runtime = value

    async def shutdown(self) -> None:
        """Release every browser session still open."""
        if self._session_manager is not None:
            await self._session_manager.close_all()


# --- Dependency Injection Helpers ---

def get_app_state(request: Request) -> AppState:
    """
    Get the AppState instance attached to the app.

    Raises:
        AttributeError: If app.state.app_state is not set.
    """
    return request.app.state.app_state
