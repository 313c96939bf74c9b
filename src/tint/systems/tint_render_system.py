from __future__ import annotations

from esper import World

from tint.components.render_color import RenderColor
from tint.constants import CLIENT_REAPPLY_MS, SIDE_CLIENT
from tint.context import TintContext
from tint.events.bus import (
    EVENT_CREATURE_SPAWNED,
    EVENT_LEVEL_FINALIZED,
    EVENT_TINT_CHANGED,
    EventBus,
)
from tint.utils import creatures

PERIODIC_NAME = "tint_reapply"


class TintRenderSystem:
    """Presentation side: copies replicated tints into each creature's render color.

    Only reads tint state. Re-applies periodically because unrelated systems
    may reset render colors.
    """

    def __init__(self, world: World, event_bus: EventBus, context: TintContext, *, period_ms: float = CLIENT_REAPPLY_MS):
        self.world = world
        self.event_bus = event_bus
        self.context = context
        self.event_bus.subscribe(EVENT_CREATURE_SPAWNED, self.on_creature_spawned)
        self.event_bus.subscribe(EVENT_LEVEL_FINALIZED, self.on_level_finalized)
        self.event_bus.subscribe(EVENT_TINT_CHANGED, self.on_tint_changed)
        self.context.scheduler.every(PERIODIC_NAME, period_ms, self.on_period)

    def detach(self) -> None:
        self.event_bus.unsubscribe(EVENT_CREATURE_SPAWNED, self.on_creature_spawned)
        self.event_bus.unsubscribe(EVENT_LEVEL_FINALIZED, self.on_level_finalized)
        self.event_bus.unsubscribe(EVENT_TINT_CHANGED, self.on_tint_changed)
        self.context.scheduler.cancel(PERIODIC_NAME)

    @property
    def disabled(self) -> bool:
        return self.context.config.client_disable_all

    def on_creature_spawned(self, sender, **payload):
        self._apply_guarded(payload.get("entity"), "spawn")

    def on_tint_changed(self, sender, **payload):
        self._apply_guarded(payload.get("entity"), "tint change")

    def on_level_finalized(self, sender, **payload):
        self._apply_all_guarded("level finalize")

    def on_period(self, dt: float) -> None:
        self._apply_all_guarded("reapply")

    def _apply_guarded(self, entity, label: str) -> None:
        if self.disabled or entity is None:
            return
        try:
            self.apply(entity)
        except Exception as exc:
            self.context.failures.report(SIDE_CLIENT, label, exc)

    def _apply_all_guarded(self, label: str) -> None:
        if self.disabled:
            return
        try:
            self.apply_all()
        except Exception as exc:
            self.context.failures.report(SIDE_CLIENT, label, exc)

    def apply_all(self) -> int:
        applied = 0
        for entity in creatures.loaded_creatures(self.world):
            if self.apply(entity):
                applied += 1
        return applied

    def apply(self, entity: int) -> bool:
        if not self.world.entity_exists(entity) or creatures.is_player(self.world, entity):
            return False
        color = creatures.read_color(self.world, entity)
        if color is None:
            return False
        return self._set_render_color(entity, color)

    def _set_render_color(self, entity: int, color: int) -> bool:
        # Render state belongs to the renderer; a failed write is not ours to report.
        try:
            sink = self.world.try_component(entity, RenderColor)
            if sink is None:
                self.world.add_component(entity, RenderColor(argb=color))
            else:
                sink.argb = color
        except Exception:
            return False
        return True
