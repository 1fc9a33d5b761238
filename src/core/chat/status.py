from __future__ import annotations

from typing import Any, Optional, Sequence

from .messages import ChatMessage


def merge_status(messages: Sequence[ChatMessage], data: Optional[Sequence[Any]]) -> list[ChatMessage]:
    """
    Attach the latest status entry to the last assistant message.

    Display only: returns a new list and leaves ``messages`` untouched.
    Nothing is merged when there is no status yet or when the last
    message is not from the assistant.
    """
    if not data or not messages:
        return list(messages)

    last_data = data[-1]
    if not last_data:
        return list(messages)

    last_message = messages[-1]
    if last_message.role != "assistant":
        return list(messages)

    return [*messages[:-1], last_message.model_copy(update={"status": last_data})]
