"""Tests for the instant parser grammar chain."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from timedate.domain.errors import InvalidTimeFormat, TimeOutOfRange
from timedate.domain.parsing import (
    ALL_GRAMMARS,
    CONVERT_GRAMMARS,
    OFFSET_GRAMMARS,
    TIME_AT_GRAMMARS,
    Grammar,
    InstantParser,
)
from timedate.domain.zones import FIXED_UTC, ZoneRegistry
from timedate.infrastructure.clock import SystemClock


@pytest.fixture
def parser(clock) -> InstantParser:
    return InstantParser(clock)


@pytest.fixture
def new_york():
    return ZoneRegistry().resolve("America/New_York")


class TestGrammarSubsets:
    def test_time_at_accepts_every_grammar(self) -> None:
        assert TIME_AT_GRAMMARS == ALL_GRAMMARS
        assert Grammar.CIVIL_DATE in TIME_AT_GRAMMARS

    def test_offset_and_convert_exclude_bare_date(self) -> None:
        assert Grammar.CIVIL_DATE not in OFFSET_GRAMMARS
        assert Grammar.CIVIL_DATE not in CONVERT_GRAMMARS
        assert Grammar.NOW in OFFSET_GRAMMARS


class TestNow:
    @pytest.mark.parametrize("text", ["now", "NOW", "Now", "nOw"])
    def test_any_case_returns_clock_instant(self, parser: InstantParser, clock, text: str) -> None:
        assert parser.parse(text) == clock.instant

    def test_system_clock_within_tolerance(self) -> None:
        before = datetime.now(UTC)
        instant = InstantParser(SystemClock()).parse("now")
        after = datetime.now(UTC)
        assert before - timedelta(seconds=1) <= instant <= after + timedelta(seconds=1)

    def test_padded_now_is_not_now(self, parser: InstantParser) -> None:
        assert parser.attempt(Grammar.NOW, " now") is None


class TestRfc3339:
    def test_offset_is_honoured(self, parser: InstantParser) -> None:
        instant = parser.parse("2024-01-15T10:30:00+02:00")
        assert instant == datetime(2024, 1, 15, 8, 30, tzinfo=UTC)

    def test_zulu_suffix(self, parser: InstantParser) -> None:
        assert parser.parse("2024-01-15T10:30:00Z") == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_lowercase_separators(self, parser: InstantParser) -> None:
        assert parser.parse("2024-01-15t10:30:00z") == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_fractional_seconds(self, parser: InstantParser) -> None:
        instant = parser.parse("2024-01-15T10:30:00.250-05:00")
        assert instant == datetime(2024, 1, 15, 15, 30, 0, 250000, tzinfo=UTC)

    def test_reference_zone_does_not_change_explicit_offset(
        self, parser: InstantParser, new_york
    ) -> None:
        text = "2024-01-15T10:30:00+02:00"
        assert parser.parse(text, new_york) == parser.parse(text, FIXED_UTC)

    def test_missing_offset_is_not_rfc3339(self, parser: InstantParser) -> None:
        assert parser.attempt(Grammar.RFC3339, "2024-01-15T10:30:00") is None

    def test_result_is_utc_anchored(self, parser: InstantParser) -> None:
        assert parser.parse("2024-01-15T10:30:00+09:00").tzinfo is UTC

    def test_leap_second_clamped(self, parser: InstantParser) -> None:
        instant = parser.parse("2016-12-31T23:59:60Z")
        assert instant == datetime(2016, 12, 31, 23, 59, 59, tzinfo=UTC)

    def test_leap_second_keeps_fraction_and_offset(self, parser: InstantParser) -> None:
        instant = parser.parse("2017-01-01T00:59:60.500+01:00")
        assert instant == datetime(2016, 12, 31, 23, 59, 59, 500000, tzinfo=UTC)

    def test_second_61_rejected(self, parser: InstantParser) -> None:
        assert parser.attempt(Grammar.RFC3339, "2016-12-31T23:59:61Z") is None

    def test_offset_pushing_before_year_1(self, parser: InstantParser) -> None:
        with pytest.raises(TimeOutOfRange):
            parser.parse("0001-01-01T00:00:00+09:00")


class TestCivilDateTime:
    def test_interpreted_in_reference_zone(self, parser: InstantParser, new_york) -> None:
        instant = parser.parse("2024-01-15 10:30:00", new_york)
        assert instant == datetime(2024, 1, 15, 15, 30, tzinfo=UTC)

    def test_uses_offset_at_parsed_time_not_now(self, parser: InstantParser, new_york) -> None:
        # The fixed clock is in July (EDT); a January civil time must use EST.
        winter = parser.parse("2024-01-15 12:00:00", new_york)
        summer = parser.parse("2024-07-15 12:00:00", new_york)
        assert winter.hour == 17
        assert summer.hour == 16

    def test_defaults_to_utc(self, parser: InstantParser) -> None:
        assert parser.parse("2024-01-15 10:30:00") == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_spring_forward_gap_uses_pre_transition_offset(
        self, parser: InstantParser, new_york
    ) -> None:
        # 02:30 does not exist on 2024-03-10 in New York; fold=0 applies EST.
        instant = parser.parse("2024-03-10 02:30:00", new_york)
        assert instant == datetime(2024, 3, 10, 7, 30, tzinfo=UTC)

    def test_fall_back_overlap_uses_first_occurrence(
        self, parser: InstantParser, new_york
    ) -> None:
        instant = parser.parse("2024-11-03 01:30:00", new_york)
        assert instant == datetime(2024, 11, 3, 5, 30, tzinfo=UTC)

    @pytest.mark.parametrize("text", ["2024-02-30 10:00:00", "2024-01-15 25:00:00"])
    def test_impossible_values_rejected(self, parser: InstantParser, text: str) -> None:
        with pytest.raises(InvalidTimeFormat):
            parser.parse(text)


class TestCivilDate:
    def test_midnight_in_reference_zone(self, parser: InstantParser, new_york) -> None:
        instant = parser.parse("2024-07-01", new_york)
        assert instant == datetime(2024, 7, 1, 4, 0, tzinfo=UTC)

    def test_not_available_when_disabled(self, parser: InstantParser) -> None:
        with pytest.raises(InvalidTimeFormat):
            parser.parse("2024-07-01", grammars=OFFSET_GRAMMARS)

    def test_invalid_month(self, parser: InstantParser) -> None:
        with pytest.raises(InvalidTimeFormat):
            parser.parse("2024-13-01")

    def test_first_day_east_of_utc_out_of_range(self, parser: InstantParser) -> None:
        tokyo = ZoneRegistry().resolve("Asia/Tokyo")
        with pytest.raises(TimeOutOfRange, match="0001-01-01"):
            parser.parse("0001-01-01", tokyo)

    def test_last_day_west_of_utc_out_of_range(self, parser: InstantParser, new_york) -> None:
        with pytest.raises(TimeOutOfRange):
            parser.parse("9999-12-31 23:00:00", new_york)


class TestFailure:
    @pytest.mark.parametrize(
        "text",
        ["not-a-date", "", "yesterday", "15/01/2024", "2024-01-15T10:30", "1705314600"],
    )
    def test_unmatched_text_raises_with_text(self, parser: InstantParser, text: str) -> None:
        with pytest.raises(InvalidTimeFormat) as excinfo:
            parser.parse(text)
        assert excinfo.value.text == text

    def test_message_names_offending_text(self, parser: InstantParser) -> None:
        with pytest.raises(InvalidTimeFormat, match="not-a-date"):
            parser.parse("not-a-date")

    def test_precedence_ignores_argument_order(self, parser: InstantParser, clock) -> None:
        reversed_grammars = tuple(reversed(ALL_GRAMMARS))
        assert parser.parse("now", grammars=reversed_grammars) == clock.instant
