from __future__ import annotations

from esper import World

from tint.constants import SIDE_SERVER, SWEEP_PERIOD_MS
from tint.context import TintContext
from tint.events.bus import EventBus
from tint.genetics.arctic_guard import enforce_arctic_rule
from tint.systems.tint_assignment_system import assign_missing_tint
from tint.utils import creatures

PERIODIC_NAME = "tint_sweep"


class ReconciliationSystem:
    """Periodic pass that repairs missing tints and re-checks arctic creatures.

    Catches whatever the spawn and load hooks missed, including creatures
    saved before tints existed.
    """

    def __init__(self, world: World, event_bus: EventBus, context: TintContext, *, period_ms: float = SWEEP_PERIOD_MS):
        self.world = world
        self.event_bus = event_bus
        self.context = context
        self.context.scheduler.every(PERIODIC_NAME, period_ms, self.on_period)

    def detach(self) -> None:
        self.context.scheduler.cancel(PERIODIC_NAME)

    def on_period(self, dt: float) -> None:
        if self.context.config.server_disable_all:
            return
        try:
            self.sweep()
        except Exception as exc:
            self.context.failures.report(SIDE_SERVER, "sweep", exc)

    def sweep(self) -> dict[str, int]:
        """Returns how many creatures were tinted and how many arctic ones rerolled."""
        stats = {"assigned": 0, "arctic_rerolled": 0, "failed": 0}
        for entity in creatures.loaded_creatures(self.world):
            if creatures.is_player(self.world, entity):
                continue
            try:
                if assign_missing_tint(self.world, entity, self.context, self.event_bus) is not None:
                    stats["assigned"] += 1
                if enforce_arctic_rule(self.world, entity, self.context.config, self.context.rng, self.event_bus):
                    stats["arctic_rerolled"] += 1
            except Exception as exc:
                stats["failed"] += 1
                self.context.failures.report(SIDE_SERVER, "sweep", exc)
        return stats
