"""Core operations exposed to the request-handling surface.

Every operation returns an `Outcome`: either `Success` carrying the result or `Failure` carrying a
typed error kind. Request-shaped failures (bad input, duplicates, misses, malformed filters) never
cross this boundary as exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from src.analysis.analyzer import is_well_formed
from src.analysis.schema import AnalysisRecord, FilteredRecords, NaturalLanguageResult
from src.filters.engine import InvalidFilterValueError, apply_filters, parse_filter_params
from src.nlq.rules import translate
from src.store.memory import AnalysisStore, DuplicateValueError, ValueNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Failure taxonomy reported to callers."""

    invalid_input = "invalid_input"
    conflict = "conflict"
    not_found = "not_found"
    invalid_filter_value = "invalid_filter_value"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    """A request-shaped failure.

    `field` names the offending parameter for `invalid_filter_value`.
    """

    kind: ErrorKind
    message: str
    field: str | None = None


Outcome = Success[T] | Failure


def _require_string(value: object, *, name: str) -> Failure | None:
    if value is None:
        return Failure(ErrorKind.invalid_input, f'missing "{name}" field')
    if not isinstance(value, str):
        return Failure(ErrorKind.invalid_input, f'"{name}" must be a string')
    if not is_well_formed(value):
        return Failure(ErrorKind.invalid_input, f'"{name}" must be valid Unicode text')
    return None


class AnalysisService:
    """Orchestrates the analyzer-backed store, filter engine and NL translator."""

    def __init__(self, store: AnalysisStore) -> None:
        self._store = store

    def create_analysis(self, value: object) -> Outcome[AnalysisRecord]:
        failure = _require_string(value, name="value")
        if failure is not None:
            return failure
        assert isinstance(value, str)

        try:
            record = self._store.insert(value)
        except DuplicateValueError as exc:
            return Failure(ErrorKind.conflict, str(exc))

        logger.info("created id=%s length=%d", record.id[:12], record.properties.length)
        return Success(record)

    def get_analysis(self, value: object) -> Outcome[AnalysisRecord]:
        failure = _require_string(value, name="value")
        if failure is not None:
            return failure
        assert isinstance(value, str)

        try:
            return Success(self._store.get(value))
        except ValueNotFoundError as exc:
            return Failure(ErrorKind.not_found, str(exc))

    def list_analyses(self, params: Mapping[str, str | None]) -> Outcome[FilteredRecords]:
        """List records matching structured filter parameters (case-sensitive containment)."""

        try:
            filters = parse_filter_params(params)
        except InvalidFilterValueError as exc:
            logger.info("invalid filter key=%s", exc.key)
            return Failure(ErrorKind.invalid_filter_value, str(exc), field=exc.key)

        return Success(apply_filters(self._store.list(), filters))

    def list_analyses_by_natural_language(self, query: object) -> Outcome[NaturalLanguageResult]:
        """List records matching a free-text query (case-insensitive containment)."""

        failure = _require_string(query, name="query")
        if failure is not None:
            return failure
        assert isinstance(query, str)
        if not query.strip():
            return Failure(ErrorKind.invalid_input, '"query" must not be blank')

        interpreted = translate(query)
        filtered = apply_filters(
            self._store.list(),
            interpreted.parsed_filters,
            case_sensitive=False,
        )
        return Success(NaturalLanguageResult(data=filtered.data, interpreted_query=interpreted))

    def delete_analysis(self, value: object) -> Outcome[None]:
        failure = _require_string(value, name="value")
        if failure is not None:
            return failure
        assert isinstance(value, str)

        try:
            self._store.delete(value)
        except ValueNotFoundError as exc:
            return Failure(ErrorKind.not_found, str(exc))

        logger.info("deleted value_len=%d", len(value))
        return Success(None)
