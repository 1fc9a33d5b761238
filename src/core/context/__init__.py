"""
Context Module - Chat History Windowing

Manages "What the LLM sees": the bounded, redacted slice of the
conversation sent with each request.
"""

from .content import (
    IMAGE_PLACEHOLDER,
    TRUNCATION_MARKER,
    estimate_tokens,
    redact_image_data,
    truncate_content,
)
from .window import HistoryWindower, WindowConfig

__all__ = [
    "HistoryWindower",
    "WindowConfig",
    "IMAGE_PLACEHOLDER",
    "TRUNCATION_MARKER",
    "estimate_tokens",
    "redact_image_data",
    "truncate_content",
]
