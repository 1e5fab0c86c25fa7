"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from loguru import logger

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding sample documents and render settings."""
    return FIXTURES_PATH


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test so later tests never write to a closed stream."""
    yield
    logger.remove()
