from __future__ import annotations

from esper import World

from tint.constants import BEACON_PERIOD_MS, SIDE_SERVER
from tint.context import TintContext
from tint.events.bus import EVENT_BEACON_RECORDED, EventBus
from tint.utils import creatures

PERIODIC_NAME = "tint_beacons"


class BeaconSystem:
    """Keeps a fresh beacon under every tinted juvenile."""

    def __init__(self, world: World, event_bus: EventBus, context: TintContext, *, period_ms: float = BEACON_PERIOD_MS):
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
            self.refresh()
        except Exception as exc:
            self.context.failures.report(SIDE_SERVER, "beacon refresh", exc)

    def refresh(self) -> int:
        """Drop expired beacons, then record one per tinted juvenile. Returns beacons recorded."""
        now = self.context.now_ms
        self.context.beacons.prune(now)
        recorded = 0
        for entity in creatures.loaded_creatures(self.world):
            try:
                if creatures.is_player(self.world, entity):
                    continue
                if not creatures.is_juvenile(self.world, entity):
                    continue
                tint = creatures.read_tint(self.world, entity)
                if not tint.has:
                    continue
                key = creatures.creature_species_key(self.world, entity)
                self.context.beacons.record(
                    key,
                    creatures.read_position(self.world, entity),
                    tint.style,
                    tint.color,
                    now,
                    source_entity=entity,
                )
            except Exception as exc:
                self.context.failures.report(SIDE_SERVER, "beacon refresh", exc)
                continue
            recorded += 1
            self.event_bus.emit(EVENT_BEACON_RECORDED, species_key=key, source_entity=entity)
        return recorded
