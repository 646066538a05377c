"""Domain exceptions raised by the time engine.

The service layer converts these into ServiceError codes; nothing above
the services ever sees them.
"""

from __future__ import annotations


class TimedateError(Exception):
    """Base class for all domain-level failures."""


class UnknownTimezone(TimedateError):
    """Identifier does not name an entry in the zone registry."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Invalid timezone: {identifier}")
        self.identifier = identifier


class InvalidTimeFormat(TimedateError):
    """Text matched none of the enabled parser grammars."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date format: {text}")
        self.text = text


class TimeOutOfRange(TimedateError):
    """An instant, or its civil time in some zone, falls outside years 1-9999."""

    def __init__(self, message: str, *, hours: int | None = None) -> None:
        super().__init__(message)
        self.hours = hours
