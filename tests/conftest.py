"""Shared fixtures for all appscanner tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any setup_logging() a test performed.

    The CLI binds structlog's output stream to whatever sys.stderr is at
    setup time, which under CliRunner is a temporary buffer.
    """
    yield
    structlog.reset_defaults()
