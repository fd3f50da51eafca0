"""Pytest configuration and fixtures."""

import os

import pytest

from app.core.kb_scoring.types import KBDataForScoring
from tests.fixtures_kb import build_complete_kb


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["KB_SCORING_ENV"] = "test"
    os.environ["KB_DEFAULT_VERTICAL"] = "general"


@pytest.fixture
def complete_kb() -> dict:
    """Raw dict snapshot satisfying every field."""
    return build_complete_kb()


@pytest.fixture
def complete_snapshot(complete_kb) -> KBDataForScoring:
    """Model snapshot satisfying every field."""
    return KBDataForScoring.model_validate(complete_kb)


@pytest.fixture
def empty_snapshot() -> KBDataForScoring:
    """Snapshot with every collection empty."""
    return KBDataForScoring()
