"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Extractors and empty results
- Mock settings/configuration
- Sample client messages
"""

import os

import pytest

from reservation_extractor.config import Settings
from reservation_extractor.entity_extraction import EntityExtractor, ExtractionResult
from .fixtures.messages import SAMPLE_MESSAGES


@pytest.fixture
def extractor() -> EntityExtractor:
    """Extractor with the default confidence threshold."""
    return EntityExtractor(confidence_threshold=0.3)


@pytest.fixture
def empty_result() -> ExtractionResult:
    """Fresh result with every field empty."""
    return ExtractionResult()


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        confidence_threshold=0.3,
    )


@pytest.fixture
def labelled_booking() -> str:
    return SAMPLE_MESSAGES["labelled_booking"]


@pytest.fixture
def free_form_request() -> str:
    return SAMPLE_MESSAGES["free_form_request"]


@pytest.fixture
def airport_run() -> str:
    return SAMPLE_MESSAGES["airport_run"]


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI, end-to-end)"
    )
