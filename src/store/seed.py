"""Seed the in-memory store from a JSON file at startup.

The file is either a JSON array of strings or an object with a single `"values"` key holding that
array. Values that are already stored, or that are not valid Unicode text, are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from src.analysis.analyzer import is_well_formed
from src.store.memory import AnalysisStore, DuplicateValueError

logger = logging.getLogger(__name__)


def _extract_values(payload: Any) -> list[str]:
    if isinstance(payload, dict):
        payload = payload.get("values")

    if not isinstance(payload, list) or not all(isinstance(v, str) for v in payload):
        raise ValueError(
            "Unexpected seed format: expected a list of strings or an object with key 'values'"
        )
    return payload


def read_seed_values(path: Path) -> list[str]:
    """Read and validate the seed file."""

    payload = json.loads(path.read_text(encoding="utf-8"))
    return _extract_values(payload)


def seed_store(store: AnalysisStore, values: Iterable[str]) -> int:
    """Insert every value, skipping duplicates.

    Returns:
        The number of records actually inserted.
    """

    inserted = 0
    for value in values:
        if not is_well_formed(value):
            logger.warning("seed skipped ill-formed value_len=%d", len(value))
            continue
        try:
            store.insert(value)
        except DuplicateValueError:
            logger.info("seed skipped duplicate value_len=%d", len(value))
            continue
        inserted += 1
    return inserted
