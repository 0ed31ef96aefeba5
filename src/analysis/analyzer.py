"""Pure string analyzer.

`analyze` is total over Unicode text: any `str` (empty, multi-byte, combining marks) produces a
record. Strings holding lone surrogates are not valid text; callers screen them with
`is_well_formed` before analysis.
"""

from __future__ import annotations

import hashlib
from collections import Counter
from datetime import datetime, timezone

from src.analysis.schema import AnalysisProperties, AnalysisRecord


def compute_sha256(value: str) -> str:
    """Return the lower-hex SHA-256 digest of the UTF-8 encoded value."""

    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def is_well_formed(value: str) -> bool:
    """Whether `value` is encodable Unicode text (no lone surrogates)."""

    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def is_palindrome(value: str) -> bool:
    """Case-insensitive; whitespace and punctuation are significant."""

    lowered = value.lower()
    return lowered == lowered[::-1]


def count_words(value: str) -> int:
    return len(value.split())


def analyze(value: str, *, created_at: datetime | None = None) -> AnalysisRecord:
    """Compute every derived property of `value`.

    Args:
        value: The string to analyze, used as-is.
        created_at: Pin the creation timestamp (defaults to the current UTC time).
    """

    sha256_hash = compute_sha256(value)
    frequency = Counter(value)

    return AnalysisRecord(
        id=sha256_hash,
        value=value,
        created_at=created_at or datetime.now(timezone.utc),
        properties=AnalysisProperties(
            length=len(value),
            is_palindrome=is_palindrome(value),
            unique_characters=len(frequency),
            word_count=count_words(value),
            sha256_hash=sha256_hash,
            character_frequency_map=dict(frequency),
        ),
    )
