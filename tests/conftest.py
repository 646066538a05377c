"""Shared pytest fixtures for timedate tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

import pytest
from click.testing import CliRunner

from timedate.config.settings import TimedateSettings
from timedate.infrastructure.environment import MappingEnvironment
from timedate.infrastructure.runtime import Runtime
from timedate.services.telemetry import disable_telemetry
from timedate.services.time_query import TimeService

# 2024-07-01 12:34:56 UTC, inside northern-hemisphere DST.
FIXED_NOW = datetime(2024, 7, 1, 12, 34, 56, tzinfo=UTC)


class FakeClock:
    """Deterministic Clock capability."""

    def __init__(
        self,
        instant: datetime = FIXED_NOW,
        *,
        local_name: str = "Europe/Paris",
    ) -> None:
        self.instant = instant
        self._local_zone = ZoneInfo(local_name)
        self._local_name = local_name

    def now(self) -> datetime:
        return self.instant

    def local_zone(self) -> tzinfo:
        return self._local_zone

    def local_zone_name(self) -> str:
        return self._local_name


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FakeClock:
    """Fixed clock at FIXED_NOW with local zone Europe/Paris."""
    return FakeClock()


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> TimedateSettings:
    """Default settings, isolated from TIMEDATE_* env vars."""
    monkeypatch.delenv("TIMEDATE_ZONES__LIST_LIMIT", raising=False)
    return TimedateSettings()


@pytest.fixture
def make_runtime(settings: TimedateSettings) -> Callable[..., Runtime]:
    """Factory for runtimes with fake capabilities.

    ``make_runtime(now=..., local_name="Asia/Tokyo", env={"LANG": "en_US.UTF-8"})``
    """

    def _make(
        *,
        now: datetime = FIXED_NOW,
        local_name: str = "Europe/Paris",
        env: dict[str, str] | None = None,
        runtime_settings: TimedateSettings | None = None,
    ) -> Runtime:
        return Runtime(
            settings=runtime_settings or settings,
            clock=FakeClock(now, local_name=local_name),
            environment=MappingEnvironment(env or {}),
        )

    return _make


@pytest.fixture
def runtime(make_runtime: Callable[..., Runtime]) -> Runtime:
    """Runtime with a fixed clock (FIXED_NOW, local zone Europe/Paris) and empty env."""
    return make_runtime()


@pytest.fixture
def service(runtime: Runtime) -> TimeService:
    return TimeService(runtime)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """--verbose enables telemetry on the shared context; undo it after each test."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """configure_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
