# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semver_core tests."""

from __future__ import annotations

import logging
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change CLI behaviour."""
    for name in ("SEMVER_VERBOSE", "SEMVER_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def root_logger() -> Generator[logging.Logger, None, None]:
    """Restore the root logger's handlers and level after a test."""
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
