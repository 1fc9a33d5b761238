"""
Chat Module - Exchange relay between the UI and the chat model.
"""

from .examples import EXAMPLE_PROMPTS
from .messages import ChatMessage, to_langchain_messages
from .runtime import ChatRuntime
from .status import merge_status

__all__ = [
    "ChatMessage",
    "ChatRuntime",
    "EXAMPLE_PROMPTS",
    "merge_status",
    "to_langchain_messages",
]
