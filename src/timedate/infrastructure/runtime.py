"""Runtime — the single dependency injected into every service.

Bundles settings with the read-only zone registry and the two ambient
capabilities. Nothing here is mutated after construction, so one Runtime
can serve any number of concurrent requests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from timedate.domain.zones import ZoneRegistry
from timedate.infrastructure.clock import Clock, SystemClock
from timedate.infrastructure.environment import Environment, ProcessEnvironment

if TYPE_CHECKING:
    from timedate.config.settings import TimedateSettings


@dataclass(frozen=True)
class Runtime:
    settings: TimedateSettings
    clock: Clock = field(default_factory=SystemClock)
    environment: Environment = field(default_factory=ProcessEnvironment)
    registry: ZoneRegistry = field(default_factory=ZoneRegistry)
