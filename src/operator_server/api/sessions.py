"""
Sessions API Routes - remote browser session lifecycle.

Create a browser session with its live-view URL, refresh the URL, and
release the session.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.core.browser import BrowserProviderConfigError, BrowserProviderError
from src.operator_server.api.dependencies import AppState, get_api_key, get_app_state

logger = logging.getLogger("operator.server.api.sessions")
router = APIRouter(prefix="/api/sessions", tags=["sessions"], dependencies=[Depends(get_api_key)])


@router.get("")
async def list_sessions(state: AppState = Depends(get_app_state)):
    """List browser sessions created by this server."""
    manager = state.session_manager
    sessions = [manager.get_session(session_id) for session_id in manager.list_active_sessions()]
    return {"sessions": [s.to_dict() for s in sessions if s is not None]}


@router.post("")
async def create_session(state: AppState = Depends(get_app_state)):
    """
    Create a browser session and return its id and debug URL.
    """
    try:
        session = await state.session_manager.create_session()
    except BrowserProviderConfigError as e:
        logger.error(f"Browser provider is not configured: {e}")
        return JSONResponse(status_code=503, content={"error": str(e)})
    except BrowserProviderError as e:
        logger.error(f"Failed to create browser session: {e}", exc_info=True)
        return JSONResponse(status_code=502, content={"error": str(e)})

    return {"sessionId": session.session_id, "url": session.debug_url}


@router.get("/{session_id}/debug-url")
async def get_debug_url(session_id: str, state: AppState = Depends(get_app_state)):
    """
    Refresh the live-view URL of a session.
    """
    try:
        url = await state.session_manager.get_debug_url(session_id)
    except KeyError:
        return JSONResponse(status_code=404, content={"error": "Session not found"})
    except BrowserProviderError as e:
        logger.error(f"Failed to get debug URL for {session_id}: {e}", exc_info=True)
        return JSONResponse(status_code=502, content={"error": str(e)})

    return {"url": url}


@router.delete("/{session_id}")
async def close_session(session_id: str, state: AppState = Depends(get_app_state)):
    """
    Release a session. Always succeeds from the caller's point of view;
    ``released`` reports whether the provider acknowledged it.
    """
    released = await state.session_manager.close_session(session_id)
    return {"success": True, "released": released}
