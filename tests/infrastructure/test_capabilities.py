"""Tests for the clock and environment capabilities and the Runtime bundle."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfoNotFoundError

import pytest
import tzlocal

from timedate.domain.zones import ZoneRegistry
from timedate.infrastructure.clock import SystemClock
from timedate.infrastructure.environment import MappingEnvironment, ProcessEnvironment
from timedate.infrastructure.runtime import Runtime
from timedate.services.time_query import TimeService

# What tzlocal raises for TZ=Foo/Bar and TZ=:/nonexistent respectively.
UNDETECTABLE_ZONE_ERRORS = [
    ZoneInfoNotFoundError("tzlocal() does not support non-zoneinfo timezones like Foo/Bar"),
    ValueError("ZoneInfo keys may not be absolute paths"),
]


def _break_tzlocal(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    def _raise() -> None:
        raise error

    monkeypatch.setattr(tzlocal, "get_localzone", _raise)
    monkeypatch.setattr(tzlocal, "get_localzone_name", _raise)


class TestSystemClock:
    def test_now_is_aware_utc(self) -> None:
        now = SystemClock().now()
        assert now.tzinfo is UTC
        assert abs(datetime.now(UTC) - now) < timedelta(seconds=5)

    def test_local_zone_is_usable(self) -> None:
        clock = SystemClock()
        assert clock.now().astimezone(clock.local_zone()).utcoffset() is not None
        assert clock.local_zone_name()

    @pytest.mark.parametrize("error", UNDETECTABLE_ZONE_ERRORS)
    def test_undetectable_zone_falls_back_to_utc(
        self, monkeypatch: pytest.MonkeyPatch, error: Exception
    ) -> None:
        _break_tzlocal(monkeypatch, error)
        clock = SystemClock()
        assert clock.local_zone() is UTC
        assert clock.local_zone_name() == "UTC"

    def test_zone_without_name_is_utc(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: None)
        assert SystemClock().local_zone_name() == "UTC"

    @pytest.mark.parametrize("error", UNDETECTABLE_ZONE_ERRORS)
    def test_local_queries_succeed_without_zone(
        self, monkeypatch: pytest.MonkeyPatch, settings, error: Exception
    ) -> None:
        _break_tzlocal(monkeypatch, error)
        service = TimeService(Runtime(settings))

        info = service.timezone_info()
        assert info.ok
        assert info.data["name"] == "UTC"
        assert info.data["utc_offset"] == "+0000"
        assert service.format_preference().ok


class TestEnvironment:
    def test_process_environment_reads_live_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        env = ProcessEnvironment()
        monkeypatch.setenv("LC_TIME", "en_US.UTF-8")
        assert env.get("LC_TIME") == "en_US.UTF-8"
        monkeypatch.delenv("LC_TIME")
        assert env.get("LC_TIME") is None

    def test_mapping_environment(self) -> None:
        env = MappingEnvironment({"LANG": "de_DE.UTF-8"})
        assert env.get("LANG") == "de_DE.UTF-8"
        assert env.get("LC_TIME") is None

    def test_mapping_environment_is_a_copy(self) -> None:
        values = {"LANG": "en_US"}
        env = MappingEnvironment(values)
        values["LANG"] = "fr_FR"
        assert env.get("LANG") == "en_US"


class TestRuntime:
    def test_defaults(self, settings) -> None:
        runtime = Runtime(settings)
        assert isinstance(runtime.clock, SystemClock)
        assert isinstance(runtime.environment, ProcessEnvironment)
        assert isinstance(runtime.registry, ZoneRegistry)

    def test_frozen(self, runtime: Runtime) -> None:
        with pytest.raises(AttributeError):
            runtime.clock = SystemClock()  # type: ignore[misc]
