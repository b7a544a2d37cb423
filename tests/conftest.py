"""Shared pytest fixtures for acctctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from acctctl.services.registry import AccountRegistry


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("acctctl").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> AccountRegistry:
    """A fresh, empty registry per test."""
    return AccountRegistry()


@pytest.fixture
def seeded_registry(registry: AccountRegistry) -> AccountRegistry:
    """Registry holding the ``jastine`` account from the first sign-up."""
    result = registry.create_account("Jastine ", "S3cur3Pa$$")
    assert result.ok, result.error
    return registry


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory so no stray acctctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ACCTCTL_CONFIG", raising=False)
