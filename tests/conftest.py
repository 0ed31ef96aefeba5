"""Pytest configuration.

The repository uses a flat `src/` namespace layout. This conftest ensures tests can import from the
`src.*` namespace when running `pytest` without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.analysis.service import AnalysisService  # noqa: E402
from src.store.memory import InMemoryAnalysisStore  # noqa: E402


@pytest.fixture
def store() -> InMemoryAnalysisStore:
    return InMemoryAnalysisStore()


@pytest.fixture
def service(store: InMemoryAnalysisStore) -> AnalysisService:
    return AnalysisService(store)
