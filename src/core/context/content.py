"""
Message Content Transforms

Pure helpers applied to a message body before it is sent to the model:
image payload redaction, length capping and a rough token estimate.
Each transform takes and returns plain content and can be composed freely.
"""

from __future__ import annotations

import math
import re
from typing import Any

__all__ = [
    "IMAGE_DATA_PATTERN",
    "IMAGE_PLACEHOLDER",
    "TRUNCATION_MARKER",
    "CHARS_PER_TOKEN",
    "redact_image_data",
    "truncate_content",
    "estimate_tokens",
]

# data:image/<subtype>;base64,<payload> up to the next double quote
IMAGE_DATA_PATTERN = re.compile(r'data:image/[^;]+;base64,[^"]+')

IMAGE_PLACEHOLDER = "[image data]"
TRUNCATION_MARKER = "... [truncated]"

CHARS_PER_TOKEN = 4


def redact_image_data(content: Any) -> Any:
    """
    Replace every embedded base64 image data URI with a placeholder.

    Non-string content is returned as-is.
    """
    if not isinstance(content, str):
        return content
    return IMAGE_DATA_PATTERN.sub(IMAGE_PLACEHOLDER, content)


def truncate_content(content: Any, max_chars: int) -> Any:
    """
    Cap content at ``max_chars`` characters, appending a truncation marker.

    Content at or under the limit, and non-string content, is returned as-is.
    """
    if not isinstance(content, str) or len(content) <= max_chars:
        return content
    return content[:max_chars] + TRUNCATION_MARKER


def estimate_tokens(content: Any) -> int:
    """
    Estimate token cost as ``ceil(chars / 4)``.

    Structured (non-string) content is measured by the length of its
    ``str()`` rendering, not by the number of blocks in the list, so a
    single large text block costs what its text costs.
    """
    text = content if isinstance(content, str) else str(content)
    return math.ceil(len(text) / CHARS_PER_TOKEN)
