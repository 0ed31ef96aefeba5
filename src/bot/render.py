"""Reply rendering.

Every outcome is rendered as a single JSON text message that fits into one Telegram message. Length
is measured the way Telegram measures it, in UTF-16 code units, so astral characters such as emoji
count twice.
Listings that are too long fall back to a compact `{"count", "values"}` summary, then to truncation.
"""

from __future__ import annotations

import json
from typing import Any

from src.analysis.schema import FilteredRecords, NaturalLanguageResult
from src.analysis.service import Failure, Outcome

_ELLIPSIS = "…"


def _dumps(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def _truncate(text: str, max_chars: int) -> str:
    if utf16_len(text) <= max_chars:
        return text

    budget = max_chars - utf16_len(_ELLIPSIS)
    end = 0
    for end, char in enumerate(text):
        budget -= 2 if ord(char) > 0xFFFF else 1
        if budget < 0:
            break
    return text[:end] + _ELLIPSIS


def render_error(kind: str, message: str, field: str | None = None) -> str:
    payload: dict[str, str] = {"error": kind, "message": message}
    if field is not None:
        payload["field"] = field
    return _dumps(payload)


def render_failure(failure: Failure) -> str:
    return render_error(failure.kind.value, failure.message, failure.field)


def render_outcome(outcome: Outcome[Any], *, max_chars: int) -> str:
    """Render a service outcome as one reply of at most `max_chars` UTF-16 code units."""

    if isinstance(outcome, Failure):
        return _truncate(render_failure(outcome), max_chars)

    value = outcome.value
    if value is None:
        return _dumps({"status": "deleted"})

    text = _dumps(value.model_dump(mode="json", exclude_none=True))
    if utf16_len(text) <= max_chars:
        return text

    if isinstance(value, (FilteredRecords, NaturalLanguageResult)):
        text = _dumps({"count": value.count, "values": [r.value for r in value.data]})
    return _truncate(text, max_chars)
