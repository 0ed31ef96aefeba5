"""Text normalization for deterministic query translation."""

from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^\w\s]+")
_MULTISPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Normalize user text for rules-based translation.

    Normalization is intentionally conservative:
        - Lowercase.
        - Replace punctuation (including hyphens and quotes) with spaces.
        - Collapse whitespace.

    "Single-word" therefore becomes "single word" and "letter 'z'." becomes "letter z".
    """

    value = (text or "").strip().lower()
    value = _NON_WORD_RE.sub(" ", value)
    value = _MULTISPACE_RE.sub(" ", value).strip()
    return value
