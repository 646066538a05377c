"""BaseService — shared access to the Runtime for service classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timedate.domain.zones import ZoneRegistry
    from timedate.infrastructure.clock import Clock
    from timedate.infrastructure.runtime import Runtime


class BaseService:
    """Holds the Runtime; subclasses read capabilities through it."""

    def __init__(self, runtime: Runtime) -> None:
        self._runtime = runtime

    @property
    def _clock(self) -> Clock:
        return self._runtime.clock

    @property
    def _registry(self) -> ZoneRegistry:
        return self._runtime.registry
