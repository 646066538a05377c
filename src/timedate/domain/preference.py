"""12-hour vs 24-hour display preference from locale environment signals.

Heuristic: ``LC_TIME`` containing ``US`` or ``LANG`` starting with
``en_US`` means 12-hour; everything else is 24-hour.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from timedate.domain.civil import clock_12h, clock_24h
from timedate.domain.records import TimeFormatInfo

if TYPE_CHECKING:
    from timedate.infrastructure.environment import Environment

TIME_LOCALE_VAR = "LC_TIME"
LANGUAGE_VAR = "LANG"

TWELVE_HOUR = "12-hour"
TWENTY_FOUR_HOUR = "24-hour"


class FormatPreferenceDetector:
    def __init__(self, environment: Environment) -> None:
        self._environment = environment

    def prefers_12_hour(self) -> bool:
        time_locale = self._environment.get(TIME_LOCALE_VAR) or ""
        language = self._environment.get(LANGUAGE_VAR) or ""
        return "US" in time_locale or language.startswith("en_US")

    def detect(self, now: datetime, local_zone: tzinfo) -> TimeFormatInfo:
        """Detect the preference and render *now* in *local_zone* both ways."""
        is_12_hour = self.prefers_12_hour()
        civil = now.astimezone(local_zone)
        return TimeFormatInfo(
            detected_format=TWELVE_HOUR if is_12_hour else TWENTY_FOUR_HOUR,
            is_12_hour=is_12_hour,
            current_time_12h=clock_12h(civil),
            current_time_24h=clock_24h(civil),
        )
