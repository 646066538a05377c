"""Environment capability — read-only access to locale signals."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol


class Environment(Protocol):
    def get(self, name: str) -> str | None: ...


class ProcessEnvironment:
    """Reads the live process environment on every call."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)


class MappingEnvironment:
    """Environment over a fixed mapping (tests, embedded callers)."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)
