from __future__ import annotations

import random
from dataclasses import dataclass, field

from tint.beacons.registry import BeaconRegistry
from tint.config import TintConfig
from tint.scheduler import TintScheduler
from tint.utils.failure_log import FailureLog


@dataclass
class TintContext:
    """Per-session state shared by the tint systems of one simulation side.

    Everything mutable lives here instead of at module level, so separate
    sessions (and tests) never see each other's beacons or log flags.
    """

    config: TintConfig = field(default_factory=TintConfig)
    rng: random.Random = field(default_factory=random.Random)
    beacons: BeaconRegistry = field(default_factory=BeaconRegistry)
    scheduler: TintScheduler = field(default_factory=TintScheduler)
    failures: FailureLog = field(default_factory=FailureLog)

    @property
    def now_ms(self) -> float:
        return self.scheduler.now_ms

    def reset(self) -> None:
        self.beacons.clear()
        self.failures.reset()
        self.scheduler.clear()
