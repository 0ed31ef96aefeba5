"""Rules-based natural-language query translator.

This translator is intentionally bounded and deterministic:
    - it only recognizes a small, fixed set of phrase patterns,
    - rules are evaluated independently, in declaration order, and their filters stack,
    - if two rules produce the same key, the earlier rule wins,
    - unrecognized text yields an empty `FilterSet` (no constraints), never an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from src.analysis.schema import FilterSet, InterpretedQuery
from src.nlq.dictionaries import (
    has_palindrome_term,
    has_single_word_phrase,
    number_pattern,
    parse_number,
)
from src.nlq.normalize import normalize_text

logger = logging.getLogger(__name__)

_LONGER_THAN_RE = re.compile(rf"\blonger than (?P<n>{number_pattern()})\b")
_SHORTER_THAN_RE = re.compile(rf"\bshorter than (?P<n>{number_pattern()})\b")
_LETTER_RE = re.compile(r"\bcontain(?:s|ing)?(?: the)? letter (?P<char>[^\W\d_])\b")


@dataclass(frozen=True)
class Rule:
    """A named pattern rule: normalized text -> partial filters (or `None` if it does not apply)."""

    name: str
    extract: Callable[[str], dict[str, Any] | None]


def _single_word_palindrome(text: str) -> dict[str, Any] | None:
    if has_single_word_phrase(text) and has_palindrome_term(text):
        return {"word_count": 1, "is_palindrome": True}
    return None


def _matched_number(pattern: re.Pattern[str], text: str) -> int | None:
    match = pattern.search(text)
    if not match:
        return None
    return parse_number(match.group("n"))


def _longer_than(text: str) -> dict[str, Any] | None:
    # "Longer than N" is exclusive.
    value = _matched_number(_LONGER_THAN_RE, text)
    if value is None:
        return None
    return {"min_length": value + 1}


def _shorter_than(text: str) -> dict[str, Any] | None:
    value = _matched_number(_SHORTER_THAN_RE, text)
    if value is None:
        return None
    return {"max_length": value - 1}


def _containing_letter(text: str) -> dict[str, Any] | None:
    match = _LETTER_RE.search(text)
    if not match:
        return None
    return {"contains_character": match.group("char")}


def _palindrome_only(text: str) -> dict[str, Any] | None:
    if has_palindrome_term(text) and not has_single_word_phrase(text):
        return {"is_palindrome": True}
    return None


RULES: tuple[Rule, ...] = (
    Rule("single_word_palindrome", _single_word_palindrome),
    Rule("longer_than", _longer_than),
    Rule("shorter_than", _shorter_than),
    Rule("containing_letter", _containing_letter),
    Rule("palindrome", _palindrome_only),
)


def translate_text(text: str, rules: tuple[Rule, ...] = RULES) -> tuple[FilterSet, list[str]]:
    """Translate text into filters.

    Returns:
        The parsed `FilterSet` and the names of the rules that contributed to it.
    """

    normalized = normalize_text(text)
    parsed: dict[str, Any] = {}
    matched: list[str] = []

    for rule in rules:
        produced = rule.extract(normalized)
        if not produced:
            continue
        matched.append(rule.name)
        for key, value in produced.items():
            parsed.setdefault(key, value)

    return FilterSet(**parsed), matched


def translate(query: str) -> InterpretedQuery:
    """Translate a free-text query into an `InterpretedQuery`.

    The original text is kept verbatim so callers can echo both what was asked and what was
    understood.
    """

    filters, matched = translate_text(query)
    logger.debug("translated rules=%s filters=%s", matched, filters.applied())
    return InterpretedQuery(original=query, parsed_filters=filters)
