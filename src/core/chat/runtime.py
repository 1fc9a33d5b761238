"""
Chat Runtime - Streams model replies for a browser session.

Windows the conversation, prepends the operator system prompt and relays
the model's deltas as an AI data stream, with status entries on the data
channel.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Sequence
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, SystemMessage

from src.core.browser.types import Viewport
from src.core.context.window import HistoryWindower

from .stream import data_part, error_part, finish_part, text_part

logger = logging.getLogger(__name__)

STATUS_THINKING = "thinking"
STATUS_COMPLETE = "complete"


class ChatRuntime:
    """
    Relays one exchange between the windowed history and the chat model.

    The model is built through ``model_factory`` per exchange so a missing
    or rotated key surfaces as an in-stream error instead of a startup
    failure.
    """

    def __init__(
        self,
        model_factory: Callable[[], BaseChatModel],
        windower: HistoryWindower,
        system_prompt: str,
        viewport: Viewport | None = None,
    ):
        self._model_factory = model_factory
        self._windower = windower
        self._system_prompt = system_prompt
        self._viewport = viewport or Viewport()

    def build_system_prompt(self, session_id: str) -> str:
        try:
            return self._system_prompt.format(
                session_id=session_id,
                width=self._viewport.width,
                height=self._viewport.height,
            )
        except (KeyError, IndexError, ValueError):
            logger.warning("System prompt has unknown placeholders; sending it unformatted")
            return self._system_prompt

    def build_prompt(self, session_id: str, history: Sequence[BaseMessage]) -> tuple[list[BaseMessage], int]:
        """Return (system prompt + windowed history, estimated window tokens)."""
        windowed, tokens = self._windower.build(history)
        return [SystemMessage(content=self.build_system_prompt(session_id)), *windowed], tokens

    async def stream(self, session_id: str, history: Sequence[BaseMessage]) -> AsyncIterator[str]:
        """
        Yield data stream lines for one assistant reply.

        Errors from the model are reported in-band and end the stream with
        finish reason ``error``.
        """
        prompt, tokens = self.build_prompt(session_id, history)
        sent = len(prompt) - 1

        logger.info(
            "Chat request for session %s: %d/%d messages (~%d tokens)",
            session_id,
            sent,
            len(history),
            tokens,
        )
        yield data_part(self._status(STATUS_THINKING, session_id, messages=sent, estimatedTokens=tokens))

        if sent == 0:
            logger.warning("Nothing fits in the history window for session %s", session_id)
            yield error_part("The latest message is too large to send.")
            yield finish_part("error")
            return

        try:
            model = self._model_factory()
            async for chunk in model.astream(prompt):
                text = self._chunk_text(chunk.content)
                if text:
                    yield text_part(text)
        except Exception as e:
            logger.error("Chat stream failed for session %s: %s", session_id, e, exc_info=True)
            yield error_part(str(e))
            yield finish_part("error")
            return

        yield data_part(self._status(STATUS_COMPLETE, session_id))
        yield finish_part("stop")

    @staticmethod
    def _status(status: str, session_id: str, **extra: Any) -> dict[str, Any]:
        return {"status": status, "sessionId": session_id, **extra}

    @staticmethod
    def _chunk_text(content: Any) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            return "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        return ""
