"""In-memory analysis store.

Records are keyed by the exact string value they were computed from (not by hash). The map is
guarded by a single lock so a check-then-insert is atomic and listings never observe a partial
mutation, even if the store is shared across threads.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol

from src.analysis.analyzer import analyze
from src.analysis.schema import AnalysisRecord


class StoreError(Exception):
    """Base class for store lookup/uniqueness failures."""


class DuplicateValueError(StoreError, ValueError):
    """Raised when a record already exists for exactly this value."""

    def __init__(self, value: str) -> None:
        super().__init__("string already exists in the system")
        self.value = value


class ValueNotFoundError(StoreError, LookupError):
    """Raised when no record exists for the value."""

    def __init__(self, value: str) -> None:
        super().__init__("string does not exist in the system")
        self.value = value


class AnalysisStore(Protocol):
    """Keyed container of analysis records."""

    def insert(self, value: str) -> AnalysisRecord: ...

    def get(self, value: str) -> AnalysisRecord: ...

    def delete(self, value: str) -> None: ...

    def list(self) -> list[AnalysisRecord]: ...


class InMemoryAnalysisStore:
    """Dict-backed `AnalysisStore` (insertion-ordered, not durable)."""

    def __init__(self, analyzer: Callable[[str], AnalysisRecord] = analyze) -> None:
        self._analyzer = analyzer
        self._records: dict[str, AnalysisRecord] = {}
        self._lock = threading.Lock()

    def insert(self, value: str) -> AnalysisRecord:
        """Analyze and store `value`.

        Raises:
            DuplicateValueError: If `value` is already stored.
        """

        with self._lock:
            if value in self._records:
                raise DuplicateValueError(value)
            record = self._analyzer(value)
            self._records[value] = record
            return record

    def get(self, value: str) -> AnalysisRecord:
        with self._lock:
            try:
                return self._records[value]
            except KeyError:
                raise ValueNotFoundError(value) from None

    def delete(self, value: str) -> None:
        with self._lock:
            if self._records.pop(value, None) is None:
                raise ValueNotFoundError(value)

    def list(self) -> list[AnalysisRecord]:
        """Return a snapshot of all records in insertion order."""

        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._records
