"""
Chat API Route - streams the assistant reply for a browser session.

The response body is an AI data stream (see src.core.chat.stream).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, ConfigDict, Field

from src.core.chat import ChatMessage, to_langchain_messages
from src.core.chat.stream import DATA_STREAM_HEADER, DATA_STREAM_VERSION
from src.operator_server.api.dependencies import AppState, get_api_key, get_app_state

logger = logging.getLogger("operator.server.api.chat")
router = APIRouter(prefix="/api", tags=["chat"], dependencies=[Depends(get_api_key)])


class ChatRequest(BaseModel):
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    messages: List[ChatMessage] = []

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


@router.post("/chat")
async def chat(body: ChatRequest, state: AppState = Depends(get_app_state)):
    if not body.session_id:
        return JSONResponse(status_code=400, content={"error": "sessionId is required"})

    if not state.session_manager.has_session(body.session_id):
        return JSONResponse(status_code=404, content={"error": "Session not found"})

    if not body.messages:
        return JSONResponse(status_code=400, content={"error": "messages must not be empty"})

    history = to_langchain_messages(body.messages)
    return StreamingResponse(
        state.chat_runtime.stream(body.session_id, history),
        media_type="text/plain; charset=utf-8",
        headers={DATA_STREAM_HEADER: DATA_STREAM_VERSION},
    )
