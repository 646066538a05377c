"""Tests for the zones command group."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from timedate.cli import cli
from timedate.domain.zones import zone_catalog


class TestZonesList:
    def test_table_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "list", "kolkata"])
        assert result.exit_code == 0
        assert "list_timezones" in result.output
        assert "Timezone" in result.output
        assert "Asia/Kolkata" in result.output
        assert "count: 1" in result.output

    def test_quiet_is_one_name_per_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zones", "list", "europe"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert 0 < len(lines) <= 50
        assert all("europe" in line.lower() for line in lines)

    def test_unfiltered_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "zones", "list"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["data"]["items"] == list(zone_catalog()[:50])
        assert "filter" not in payload["data"]

    def test_no_match_still_succeeds(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "zones", "list", "phobos"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"] == {"filter": "phobos", "count": 0, "items": []}

    def test_limit_from_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text("[zones]\nlist_limit = 3\n")
        result = cli_runner.invoke(cli, ["-c", str(config), "-q", "zones", "list"])
        assert result.exit_code == 0
        assert result.output.splitlines() == list(zone_catalog()[:3])

    def test_limit_from_discovered_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "timedate.toml").write_text("[zones]\nlist_limit = 2\n")
        result = cli_runner.invoke(cli, ["-q", "zones", "list", "america"])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 2

    def test_limit_from_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "zones", "list"], env={"TIMEDATE_ZONES__LIST_LIMIT": "4"}
        )
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 4

    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "--examples"])
        assert result.exit_code == 0
        assert "timedate zones local" in result.output


class TestZonesLocal:
    def test_local_zone(self, cli_runner: CliRunner, fixed_runtime) -> None:
        result = cli_runner.invoke(cli, ["--json", "zones", "local"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["op"] == "timezone_info"
        assert payload["data"] == {
            "name": "Europe/Paris",
            "current_time": "2024-07-01 14:34:56 CEST",
            "utc_offset": "+0200",
            "is_dst": False,
        }

    def test_quiet_is_name(self, cli_runner: CliRunner, fixed_runtime) -> None:
        result = cli_runner.invoke(cli, ["-q", "zones", "local"])
        assert result.output.strip() == "Europe/Paris"
