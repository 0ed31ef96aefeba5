"""Tests for the pure string analyzer."""

from __future__ import annotations

import hashlib
from datetime import datetime, timedelta, timezone

import pytest

from src.analysis.analyzer import analyze, compute_sha256, count_words, is_palindrome

PINNED_AT = datetime(2025, 10, 20, 12, 0, tzinfo=timezone.utc)

SAMPLES = [
    "",
    " ",
    "a",
    "level",
    "Racecar",
    "hello world",
    "  spaced   out\ttext\n",
    "h\u00e9llo \U0001F642",
    "e\u0301",
    "A man, a plan, a canal: Panama",
]


@pytest.mark.parametrize("value", SAMPLES)
def test_analyze_is_deterministic(value: str) -> None:
    first = analyze(value, created_at=PINNED_AT)
    second = analyze(value, created_at=PINNED_AT)

    assert first == second
    assert first.id == second.id
    assert first.value == value


@pytest.mark.parametrize("value", SAMPLES)
def test_frequency_map_is_consistent_with_counters(value: str) -> None:
    props = analyze(value).properties

    assert sum(props.character_frequency_map.values()) == props.length
    assert len(props.character_frequency_map) == props.unique_characters


def test_empty_string() -> None:
    props = analyze("").properties

    assert props.length == 0
    assert props.word_count == 0
    assert props.is_palindrome is True
    assert props.unique_characters == 0
    assert props.character_frequency_map == {}


def test_palindrome_is_case_insensitive() -> None:
    assert analyze("Racecar").properties.is_palindrome is True
    assert analyze("Racecars").properties.is_palindrome is False


def test_palindrome_keeps_whitespace_and_punctuation() -> None:
    assert is_palindrome("A man, a plan, a canal: Panama") is False
    assert is_palindrome("never odd or even") is False
    assert is_palindrome("a b a") is True


def test_id_is_sha256_of_value() -> None:
    record = analyze("hello")

    assert record.id == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
    assert record.id == record.properties.sha256_hash
    assert record.id == hashlib.sha256("hello".encode("utf-8")).hexdigest()


def test_hash_of_multibyte_text_uses_utf8() -> None:
    assert compute_sha256("\u00e9") == hashlib.sha256(b"\xc3\xa9").hexdigest()


def test_word_count_trims_and_collapses_whitespace() -> None:
    assert count_words("  spaced   out\ttext\n") == 3
    assert count_words("\t \n") == 0
    assert analyze("one").properties.word_count == 1


def test_counts_are_case_sensitive() -> None:
    props = analyze("Aa").properties

    assert props.unique_characters == 2
    assert props.character_frequency_map == {"A": 1, "a": 1}
    assert props.is_palindrome is True


def test_multibyte_characters_count_as_single_units() -> None:
    props = analyze("h\u00e9llo \U0001F642").properties

    assert props.length == 7
    assert props.unique_characters == 6
    assert props.character_frequency_map["l"] == 2
    assert props.character_frequency_map["\U0001F642"] == 1


def test_combining_marks_count_per_code_point() -> None:
    props = analyze("e\u0301").properties

    assert props.length == 2
    assert props.unique_characters == 2


def test_created_at_defaults_to_aware_utc() -> None:
    created_at = analyze("x").created_at

    assert created_at.tzinfo is not None
    assert created_at.utcoffset() == timedelta(0)
