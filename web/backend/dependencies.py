#!/usr/bin/env python3
"""
FastAPI dependencies: one database session per request, and the scorer
settings from config.yaml.

Tests replace these through app.dependency_overrides.
"""

from typing import Generator

from sqlalchemy.orm import Session

from core.config_loader import ScorerConfig, get_config
from database import database


def get_db() -> Generator[Session, None, None]:
    """
    Yield a session that is closed when the request finishes.

    Match and job endpoints only read, so nothing is committed here.
    """
    yield from database.get_db()


def get_scorer_config() -> ScorerConfig:
    return get_config().matching.scorer
