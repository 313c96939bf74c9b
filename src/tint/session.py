"""Session lifecycle: wires the tint systems for one or both simulation sides."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List

from esper import World

from tint.config import TintConfig, load_config
from tint.constants import SIDE_CLIENT, SIDE_SERVER
from tint.context import TintContext
from tint.events.bus import EVENT_SESSION_STARTED, EVENT_SESSION_STOPPED, EVENT_TICK, EventBus
from tint.systems.beacon_system import BeaconSystem
from tint.systems.reconciliation_system import ReconciliationSystem
from tint.systems.tint_assignment_system import TintAssignmentSystem
from tint.systems.tint_render_system import TintRenderSystem

logger = logging.getLogger(__name__)

SIDE_BOTH = "both"
_SIDES = (SIDE_SERVER, SIDE_CLIENT, SIDE_BOTH)


class TintSession:
    """Owns the tint context and systems between ``start()`` and ``stop()``."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        side: str = SIDE_BOTH,
        config: TintConfig | None = None,
        config_path: Path | str | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if side not in _SIDES:
            raise ValueError(f"Unknown side '{side}'")
        self.world = world
        self.event_bus = event_bus
        self.side = side
        self._config = config
        self._config_path = config_path
        self._seed = seed
        self._rng = rng
        self.context: TintContext | None = None
        self.assignment_system: TintAssignmentSystem | None = None
        self.beacon_system: BeaconSystem | None = None
        self.reconciliation_system: ReconciliationSystem | None = None
        self.render_system: TintRenderSystem | None = None

    @property
    def running(self) -> bool:
        return self.context is not None

    @property
    def runs_server(self) -> bool:
        return self.side in (SIDE_SERVER, SIDE_BOTH)

    @property
    def runs_client(self) -> bool:
        return self.side in (SIDE_CLIENT, SIDE_BOTH)

    def start(self) -> TintContext:
        if self.context is not None:
            return self.context
        config = self._config if self._config is not None else load_config(self._config_path)
        rng = self._rng or getattr(self.world, "random", None) or random.Random(self._seed)
        self.context = TintContext(config=config, rng=rng)
        if self.runs_server:
            self.assignment_system = TintAssignmentSystem(self.world, self.event_bus, self.context)
            self.beacon_system = BeaconSystem(self.world, self.event_bus, self.context)
            self.reconciliation_system = ReconciliationSystem(self.world, self.event_bus, self.context)
        if self.runs_client:
            self.render_system = TintRenderSystem(self.world, self.event_bus, self.context)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        logger.debug("Tint session started (side=%s)", self.side)
        self.event_bus.emit(EVENT_SESSION_STARTED, side=self.side, seed=self._seed)
        return self.context

    def stop(self) -> None:
        if self.context is None:
            return
        self.event_bus.unsubscribe(EVENT_TICK, self.on_tick)
        for system in self._systems():
            system.detach()
        self.assignment_system = None
        self.beacon_system = None
        self.reconciliation_system = None
        self.render_system = None
        self.context.reset()
        self.context = None
        logger.debug("Tint session stopped (side=%s)", self.side)
        self.event_bus.emit(EVENT_SESSION_STOPPED, side=self.side)

    def _systems(self) -> List:
        return [
            system
            for system in (
                self.assignment_system,
                self.beacon_system,
                self.reconciliation_system,
                self.render_system,
            )
            if system is not None
        ]

    def on_tick(self, sender, **payload):
        if self.context is None:
            return
        self.context.scheduler.advance(payload.get("dt", 1 / 60))
