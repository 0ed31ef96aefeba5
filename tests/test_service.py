"""Tests for the core operation boundary and its typed outcomes."""

from __future__ import annotations

from typing import Any

import pytest

from src.analysis.schema import AnalysisRecord
from src.analysis.service import AnalysisService, ErrorKind, Failure, Success


def _ok(outcome: Any) -> Any:
    assert isinstance(outcome, Success), outcome
    return outcome.value


def _failed(outcome: Any, kind: ErrorKind) -> Failure:
    assert isinstance(outcome, Failure), outcome
    assert outcome.kind == kind
    return outcome


@pytest.fixture
def seeded(service: AnalysisService) -> AnalysisService:
    for value in ("level", "hello", "a b"):
        _ok(service.create_analysis(value))
    return service


def test_create_then_get_round_trip(service: AnalysisService) -> None:
    created: AnalysisRecord = _ok(service.create_analysis("level"))

    assert _ok(service.get_analysis("level")) == created


def test_create_duplicate_is_conflict(service: AnalysisService) -> None:
    _ok(service.create_analysis("level"))

    _failed(service.create_analysis("level"), ErrorKind.conflict)
    assert _ok(service.list_analyses({})).count == 1


@pytest.mark.parametrize("value", [None, 42, ["level"]])
def test_create_rejects_missing_or_non_string(service: AnalysisService, value: object) -> None:
    _failed(service.create_analysis(value), ErrorKind.invalid_input)


def test_rejects_lone_surrogates_in_every_operation(service: AnalysisService) -> None:
    _failed(service.create_analysis("\ud800"), ErrorKind.invalid_input)
    _failed(service.create_analysis("ab\udfffba"), ErrorKind.invalid_input)
    _failed(service.get_analysis("\ud800"), ErrorKind.invalid_input)
    _failed(service.delete_analysis("\ud800"), ErrorKind.invalid_input)
    _failed(service.list_analyses_by_natural_language("\ud800"), ErrorKind.invalid_input)
    assert _ok(service.list_analyses({})).count == 0


def test_create_accepts_empty_string(service: AnalysisService) -> None:
    record: AnalysisRecord = _ok(service.create_analysis(""))

    assert record.properties.length == 0


def test_get_missing_is_not_found(service: AnalysisService) -> None:
    _failed(service.get_analysis("absent"), ErrorKind.not_found)


def test_delete_then_get_and_delete_again(service: AnalysisService) -> None:
    _ok(service.create_analysis("level"))

    assert _ok(service.delete_analysis("level")) is None
    _failed(service.get_analysis("level"), ErrorKind.not_found)
    _failed(service.delete_analysis("level"), ErrorKind.not_found)


def test_list_applies_structured_filters(seeded: AnalysisService) -> None:
    result = _ok(seeded.list_analyses({"min_length": "4"}))

    assert [r.value for r in result.data] == ["level", "hello"]
    assert result.filters_applied.applied() == {"min_length": 4}


def test_list_reports_malformed_filter_key(seeded: AnalysisService) -> None:
    failure = _failed(
        seeded.list_analyses({"min_length": "4", "max_length": "ten"}),
        ErrorKind.invalid_filter_value,
    )

    assert failure.field == "max_length"


def test_natural_language_listing(seeded: AnalysisService) -> None:
    result = _ok(seeded.list_analyses_by_natural_language("single word palindromic strings"))

    assert [r.value for r in result.data] == ["level"]
    assert result.count == 1
    assert result.interpreted_query.original == "single word palindromic strings"
    assert result.interpreted_query.parsed_filters.applied() == {
        "word_count": 1,
        "is_palindrome": True,
    }


def test_unrecognized_natural_language_returns_everything(seeded: AnalysisService) -> None:
    result = _ok(seeded.list_analyses_by_natural_language("banana bread"))

    assert [r.value for r in result.data] == ["level", "hello", "a b"]
    assert result.interpreted_query.parsed_filters.is_empty()


def test_natural_language_containment_ignores_case(service: AnalysisService) -> None:
    _ok(service.create_analysis("Zebra"))
    _ok(service.create_analysis("lazy"))
    _ok(service.create_analysis("cat"))

    nl = _ok(service.list_analyses_by_natural_language("strings containing the letter z"))
    structured = _ok(service.list_analyses({"contains_character": "z"}))

    assert [r.value for r in nl.data] == ["Zebra", "lazy"]
    assert [r.value for r in structured.data] == ["lazy"]


@pytest.mark.parametrize("query", [None, "", "   ", 7])
def test_natural_language_requires_query_text(service: AnalysisService, query: object) -> None:
    _failed(service.list_analyses_by_natural_language(query), ErrorKind.invalid_input)
