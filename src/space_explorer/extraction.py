from __future__ import annotations

import json
import re
from typing import Any

_FENCE_PATTERNS = [
    re.compile(r"```json", re.IGNORECASE),
    re.compile(r"```"),
]


def strip_code_fences(text: str) -> str:
    for pattern in _FENCE_PATTERNS:
        text = pattern.sub("", text)
    return text.strip()


def extract_json(text: str | None) -> dict[str, Any] | None:
    """Best-effort recovery of a JSON object from generated text.

    Only parsing happens here; a parsed object missing expected keys is returned as-is.
    """
    if not text:
        return None

    try:
        parsed = json.loads(strip_code_fences(text))
    except (ValueError, RecursionError):
        return None

    if not isinstance(parsed, dict):
        return None
    return parsed
