"""Shared pytest fixtures for limitctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from limitctl.domain.rules import DEFAULT_RULES, PrescriptionRules
from limitctl.services.prescription import PrescriptionService
from limitctl.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules() -> PrescriptionRules:
    """The built-in prescription rules."""
    return DEFAULT_RULES


@pytest.fixture
def service(rules: PrescriptionRules) -> PrescriptionService:
    """Prescription service over the built-in rules."""
    return PrescriptionService(rules)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no limitctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.delenv("LIMITCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by ``-v`` CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    limit_level = logging.getLogger("limitctl").level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("limitctl").setLevel(limit_level)
