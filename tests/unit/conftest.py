"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
import structlog

from splits_core.state import CalculatorState
from tests.mocks.mock_factories import make_calculator_state
from tests.mocks.mock_settings import make_settings


@pytest.fixture(autouse=True)
def _structlog_to_stderr() -> Iterator[None]:
    """Route structlog to stderr at WARNING so CLI stdout stays parseable."""
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def calculator_state() -> CalculatorState:
    """Return a state with $100k salary, 20% fee and the closer role."""
    return make_calculator_state()
