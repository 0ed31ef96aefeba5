"""Structured filter engine.

Raw string parameters are parsed into a typed `FilterSet` first; only then are the predicates
applied. Filter keys are strictly allowlisted and every set key contributes exactly one predicate,
combined with AND.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from src.analysis.schema import AnalysisRecord, FilteredRecords, FilterSet

logger = logging.getLogger(__name__)

FILTER_KEYS: tuple[str, ...] = (
    "is_palindrome",
    "min_length",
    "max_length",
    "word_count",
    "contains_character",
)

_INTEGER_KEYS: tuple[str, ...] = ("min_length", "max_length", "word_count")

_INTEGER_RE = re.compile(r"[+-]?\d+")

Predicate = Callable[[AnalysisRecord], bool]


class InvalidFilterValueError(ValueError):
    """Raised when a filter parameter cannot be parsed into its typed value."""

    def __init__(self, key: str, raw: str) -> None:
        super().__init__(f"invalid {key} value: {raw!r}")
        self.key = key
        self.raw = raw


def _parse_int(key: str, raw: str) -> int:
    value = raw.strip()
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidFilterValueError(key, raw)
    return int(value)


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() == "true"


def parse_filter_params(params: Mapping[str, str | None]) -> FilterSet:
    """Parse raw string parameters into a `FilterSet`.

    Unknown keys are ignored and `None` values are treated as absent.

    Raises:
        InvalidFilterValueError: For the first malformed parameter (in `FILTER_KEYS` order).
    """

    unknown = sorted(k for k in params if k not in FILTER_KEYS)
    if unknown:
        logger.debug("ignoring unknown filter params=%s", unknown)

    parsed: dict[str, Any] = {}
    for key in _INTEGER_KEYS:
        raw = params.get(key)
        if raw is not None:
            parsed[key] = _parse_int(key, raw)

    raw_palindrome = params.get("is_palindrome")
    if raw_palindrome is not None:
        parsed["is_palindrome"] = _parse_bool(raw_palindrome)

    raw_char = params.get("contains_character")
    if raw_char is not None:
        if len(raw_char) != 1:
            raise InvalidFilterValueError("contains_character", raw_char)
        parsed["contains_character"] = raw_char

    return FilterSet(**parsed)


def _contains(character: str, *, case_sensitive: bool) -> Predicate:
    if case_sensitive:
        return lambda r: character in r.value
    folded = character.lower()
    return lambda r: folded in r.value.lower()


def build_predicates(filters: FilterSet, *, case_sensitive: bool = True) -> list[Predicate]:
    """Build one predicate per set filter key."""

    predicates: list[Predicate] = []

    if filters.is_palindrome is not None:
        expected = filters.is_palindrome
        predicates.append(lambda r: r.properties.is_palindrome == expected)

    if filters.min_length is not None:
        min_length = filters.min_length
        predicates.append(lambda r: r.properties.length >= min_length)

    if filters.max_length is not None:
        max_length = filters.max_length
        predicates.append(lambda r: r.properties.length <= max_length)

    if filters.word_count is not None:
        word_count = filters.word_count
        predicates.append(lambda r: r.properties.word_count == word_count)

    if filters.contains_character is not None:
        predicates.append(_contains(filters.contains_character, case_sensitive=case_sensitive))

    return predicates


def apply_filters(
        records: Iterable[AnalysisRecord],
        filters: FilterSet,
        *,
        case_sensitive: bool = True,
) -> FilteredRecords:
    """Keep the records matching every predicate of `filters`.

    Args:
        records: Records to filter; never mutated.
        filters: Typed constraints; an empty set keeps everything.
        case_sensitive: Whether `contains_character` matches case-sensitively. Structured listings
            use the default; natural-language listings pass `False`.
    """

    predicates = build_predicates(filters, case_sensitive=case_sensitive)
    matched = [r for r in records if all(p(r) for p in predicates)]
    return FilteredRecords(data=matched, filters_applied=filters)
