"""Analysis and filter JSON schema (Pydantic models).

These models are the contract between the analyzer, the store, the filter engine and the NL
translator. Records are immutable once created; filter sets are transient and never persisted.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

SHA256_HEX_PATTERN = r"^[0-9a-f]{64}$"


class AnalysisProperties(BaseModel):
    """Derived properties of a single analyzed string."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: int = Field(ge=0)
    is_palindrome: bool
    unique_characters: int = Field(ge=0)
    word_count: int = Field(ge=0)
    sha256_hash: str = Field(pattern=SHA256_HEX_PATTERN)
    character_frequency_map: dict[str, int]

    @model_validator(mode="after")
    def validate_counts(self) -> AnalysisProperties:
        """Keep the counters consistent with the frequency map."""

        if sum(self.character_frequency_map.values()) != self.length:
            raise ValueError("character_frequency_map must sum to length")
        if len(self.character_frequency_map) != self.unique_characters:
            raise ValueError("unique_characters must match character_frequency_map size")
        if self.length == 0 and (not self.is_palindrome or self.word_count != 0):
            raise ValueError("an empty string is a palindrome with no words")
        return self


class AnalysisRecord(BaseModel):
    """A stored analysis, keyed by the exact `value` it was computed from."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(pattern=SHA256_HEX_PATTERN)
    value: str
    properties: AnalysisProperties
    created_at: datetime

    @model_validator(mode="after")
    def validate_id(self) -> AnalysisRecord:
        if self.id != self.properties.sha256_hash:
            raise ValueError("id must equal properties.sha256_hash")
        return self


class FilterSet(BaseModel):
    """Structured constraints combined using logical AND.

    `None` means the key imposes no constraint.
    """

    model_config = ConfigDict(extra="forbid")

    is_palindrome: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    word_count: int | None = None
    contains_character: str | None = Field(default=None, min_length=1, max_length=1)

    def applied(self) -> dict[str, Any]:
        """Return only the keys that are set, with their typed values."""

        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


class InterpretedQuery(BaseModel):
    """What a natural-language query asked for and what the translator understood."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    original: str
    parsed_filters: FilterSet = Field(default_factory=FilterSet)


class FilteredRecords(BaseModel):
    """Records that passed a filter set, plus the filters that were applied."""

    model_config = ConfigDict(extra="forbid")

    data: list[AnalysisRecord] = Field(default_factory=list)
    filters_applied: FilterSet = Field(default_factory=FilterSet)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.data)


class NaturalLanguageResult(BaseModel):
    """Records matching a natural-language query."""

    model_config = ConfigDict(extra="forbid")

    data: list[AnalysisRecord] = Field(default_factory=list)
    interpreted_query: InterpretedQuery

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.data)
