"""Shared fixtures for progress engine tests."""

from __future__ import annotations

from datetime import UTC, datetime
import logging

import pytest

from progress_engine import const


@pytest.fixture
def now_utc() -> datetime:
    """Fixed evaluation instant so time-dependent engines are deterministic."""
    return datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def engine_caplog(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG and above from the package logger."""
    caplog.set_level(logging.DEBUG, logger=const.LOGGER.name)
    return caplog
