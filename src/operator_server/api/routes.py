import logging

from fastapi import APIRouter, Depends

from src.core.chat import EXAMPLE_PROMPTS
from src.core.config import settings
from src.operator_server.api.dependencies import AppState, get_app_state

logger = logging.getLogger("operator.server.api")
router = APIRouter()


@router.get("/health")
async def health_check(state: AppState = Depends(get_app_state)):
    return {"status": "ok", "active_sessions": state.session_manager.active_session_count}


@router.get("/api/examples")
async def get_examples():
    """Example tasks for the start screen."""
    return {"examples": EXAMPLE_PROMPTS}


@router.get("/api/viewport")
async def get_viewport():
    """Viewport of the remote browser, for sizing the live view."""
    viewport = settings.browserbase.viewport
    return {"width": viewport.width, "height": viewport.height}
