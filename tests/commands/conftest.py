"""Fixtures for CLI command tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from timedate.commands._context import AppContext
from timedate.infrastructure.runtime import Runtime


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every command from an empty directory with no config overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TIMEDATE_CONFIG", raising=False)
    monkeypatch.delenv("TIMEDATE_ZONES__LIST_LIMIT", raising=False)


@pytest.fixture
def pin_runtime(monkeypatch: pytest.MonkeyPatch) -> Callable[[Runtime], None]:
    """Make AppContext hand out *runtime* instead of building a live one."""

    def _pin(runtime: Runtime) -> None:
        monkeypatch.setattr(AppContext, "runtime", property(lambda _self: runtime))

    return _pin


@pytest.fixture
def fixed_runtime(pin_runtime: Callable[[Runtime], None], runtime: Runtime) -> Runtime:
    """CLI commands see the shared fixed clock (2024-07-01 12:34:56 UTC, Europe/Paris)."""
    pin_runtime(runtime)
    return runtime
