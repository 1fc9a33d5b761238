"""
History Windower - Bounded Send Window over Chat History

Selects the recent part of a conversation that is sent with each
model request. The window is a contiguous suffix of the history, capped
by message count and by an estimated token budget, with image payloads
redacted and oversized bodies truncated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from langchain_core.messages import BaseMessage

from .content import estimate_tokens, redact_image_data, truncate_content

logger = logging.getLogger(__name__)

DEFAULT_MAX_MESSAGES = 4
DEFAULT_MAX_TOTAL_TOKENS = 50_000
DEFAULT_MAX_MESSAGE_CHARS = 12_000


@dataclass(frozen=True)
class WindowConfig:
    """Limits applied when building a send window."""

    max_messages: int = DEFAULT_MAX_MESSAGES
    max_total_tokens: int = DEFAULT_MAX_TOTAL_TOKENS
    max_message_chars: int = DEFAULT_MAX_MESSAGE_CHARS

    @classmethod
    def from_settings(cls, chat_history_config) -> WindowConfig:
        return cls(
            max_messages=chat_history_config.max_messages,
            max_total_tokens=chat_history_config.max_total_tokens,
            max_message_chars=chat_history_config.max_message_chars,
        )


class HistoryWindower:
    """
    Builds the bounded history window sent to the chat model.

    The input history is never mutated; included messages are copies
    whose content has been redacted and truncated.

    Usage:
        windower = HistoryWindower(WindowConfig(max_messages=4))
        recent = windower.window(full_history)
    """

    def __init__(self, config: WindowConfig | None = None):
        self.config = config or WindowConfig()

    def window(self, full_history: Sequence[BaseMessage]) -> list[BaseMessage]:
        """Return the send window for ``full_history``, oldest first."""
        messages, _ = self.build(full_history)
        return messages

    def build(self, full_history: Sequence[BaseMessage]) -> tuple[list[BaseMessage], int]:
        """
        Build the send window and report its estimated token cost.

        Walks the last ``max_messages`` messages from newest to oldest and
        stops at the first message that would push the running total over
        ``max_total_tokens``. A newest message that alone exceeds the budget
        yields an empty window.

        Args:
            full_history: Complete conversation, oldest first

        Returns:
            Tuple of (windowed messages, total estimated tokens)
        """
        if not full_history:
            return [], 0

        start = max(0, len(full_history) - self.config.max_messages)
        windowed: list[BaseMessage] = []
        total_tokens = 0

        for i in range(len(full_history) - 1, start - 1, -1):
            message = full_history[i]
            content = self._prepare_content(message.content)
            message_tokens = estimate_tokens(content)

            if total_tokens + message_tokens > self.config.max_total_tokens:
                logger.debug(
                    "Token budget reached at message %d (%d + %d > %d)",
                    i,
                    total_tokens,
                    message_tokens,
                    self.config.max_total_tokens,
                )
                break

            total_tokens += message_tokens
            windowed.insert(0, message.model_copy(update={"content": content}))

        if len(windowed) < len(full_history):
            logger.debug(
                "History windowed: %d -> %d messages (~%d tokens)",
                len(full_history),
                len(windowed),
                total_tokens,
            )

        return windowed, total_tokens

    def _prepare_content(self, content):
        return truncate_content(redact_image_data(content), self.config.max_message_chars)
