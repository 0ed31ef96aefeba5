"""Application composition root.

This module wires together configuration, the in-memory store and the analysis service for the bot
runtime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.analysis.service import AnalysisService
from src.config.settings import Settings
from src.store.memory import InMemoryAnalysisStore
from src.store.seed import read_seed_values, seed_store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    service: AnalysisService


def create_app(settings: Settings) -> App:
    """Create the application container, seeding the store if `SEED_FILE` is configured."""

    store = InMemoryAnalysisStore()
    if settings.seed_file is not None:
        inserted = seed_store(store, read_seed_values(settings.seed_file))
        logger.info("seeded store path=%s inserted=%d", settings.seed_file, inserted)

    return App(settings=settings, service=AnalysisService(store))
