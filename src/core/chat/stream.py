"""
AI data stream encoding.

Each line is ``<type>:<json>\\n``:
    0  text delta
    2  data (status) entries, always a JSON array
    3  error message
    d  finish message
"""

from __future__ import annotations

import json
from typing import Any

DATA_STREAM_HEADER = "x-vercel-ai-data-stream"
DATA_STREAM_VERSION = "v1"


def text_part(text: str) -> str:
    return f"0:{json.dumps(text)}\n"


def data_part(*values: Any) -> str:
    return f"2:{json.dumps(list(values))}\n"


def error_part(message: str) -> str:
    return f"3:{json.dumps(message)}\n"


def finish_part(finish_reason: str = "stop") -> str:
    return f"d:{json.dumps({'finishReason': finish_reason})}\n"
