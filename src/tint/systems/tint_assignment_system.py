from __future__ import annotations

from typing import Optional

from esper import World

from tint.constants import SIDE_SERVER
from tint.context import TintContext
from tint.events.bus import (
    EVENT_BEACON_CONSUMED,
    EVENT_CREATURE_LOADED,
    EVENT_CREATURE_SPAWNED,
    EventBus,
)
from tint.genetics.arctic_guard import enforce_arctic_rule
from tint.genetics.breeding import try_breeding_inheritance, try_orphan_fallback
from tint.genetics.spawn_assigner import assign_spawn_tint
from tint.utils import creatures

SOURCE_BEACON = "beacon"
SOURCE_INHERITED = "inherited"
SOURCE_FALLBACK = "fallback"
SOURCE_SPAWN = "spawn"


def assign_missing_tint(world: World, entity: int, context: TintContext, event_bus: EventBus | None = None) -> Optional[str]:
    """Run the assignment pipeline for an untinted creature.

    Order: beacon handoff, breeding inheritance (juveniles only), orphan
    fallback, plain spawn roll. Returns which step produced the tint, or
    None when the creature already had one.
    """
    if creatures.has_tint(world, entity):
        return None
    config = context.config
    rng = context.rng

    key = creatures.creature_species_key(world, entity)
    beacon = context.beacons.consume(key, creatures.read_position(world, entity), context.now_ms)
    if beacon is not None:
        creatures.write_tint(world, entity, beacon.style, beacon.color, event_bus)
        if event_bus is not None:
            event_bus.emit(
                EVENT_BEACON_CONSUMED,
                species_key=key,
                entity=entity,
                style=beacon.style,
                color=beacon.color,
            )
        return SOURCE_BEACON

    if creatures.is_juvenile(world, entity):
        inherited = try_breeding_inheritance(world, entity, config, rng)
        if inherited is not None:
            creatures.write_tint(world, entity, inherited[0], inherited[1], event_bus)
            return SOURCE_INHERITED

    fallback = try_orphan_fallback(world, entity, config, rng)
    if fallback is not None:
        creatures.write_tint(world, entity, fallback[0], fallback[1], event_bus)
        return SOURCE_FALLBACK

    style, color = assign_spawn_tint(config, rng, arctic=creatures.is_arctic(world, entity))
    creatures.write_tint(world, entity, style, color, event_bus)
    return SOURCE_SPAWN


class TintAssignmentSystem:
    """Gives spawning and loading creatures a tint on the authoritative side."""

    def __init__(self, world: World, event_bus: EventBus, context: TintContext):
        self.world = world
        self.event_bus = event_bus
        self.context = context
        self.event_bus.subscribe(EVENT_CREATURE_SPAWNED, self.on_creature_spawned)
        self.event_bus.subscribe(EVENT_CREATURE_LOADED, self.on_creature_loaded)

    def detach(self) -> None:
        self.event_bus.unsubscribe(EVENT_CREATURE_SPAWNED, self.on_creature_spawned)
        self.event_bus.unsubscribe(EVENT_CREATURE_LOADED, self.on_creature_loaded)

    def _resolve_entity(self, payload) -> Optional[int]:
        entity = payload.get("entity")
        if entity is None or not self.world.entity_exists(entity):
            return None
        if creatures.is_player(self.world, entity):
            return None
        return entity

    def on_creature_spawned(self, sender, **payload):
        entity = self._resolve_entity(payload)
        if entity is None:
            return
        try:
            if self.context.config.server_disable_all:
                creatures.clear_tint(self.world, entity, self.event_bus)
                return
            self.assign(entity)
        except Exception as exc:
            self.context.failures.report(SIDE_SERVER, "spawn", exc)

    def on_creature_loaded(self, sender, **payload):
        entity = self._resolve_entity(payload)
        if entity is None:
            return
        try:
            if self.context.config.server_disable_all:
                creatures.clear_tint(self.world, entity, self.event_bus)
                return
            self.ensure_loaded(entity)
        except Exception as exc:
            self.context.failures.report(SIDE_SERVER, "load", exc)

    def assign(self, entity: int) -> Optional[str]:
        source = assign_missing_tint(self.world, entity, self.context, self.event_bus)
        self.enforce_arctic(entity)
        return source

    def ensure_loaded(self, entity: int) -> Optional[str]:
        """Restore a saved-only tint, or assign one if the creature has none."""
        if creatures.promote_saved_tint(self.world, entity, self.event_bus):
            self.enforce_arctic(entity)
            return None
        return self.assign(entity)

    def enforce_arctic(self, entity: int) -> bool:
        return enforce_arctic_rule(self.world, entity, self.context.config, self.context.rng, self.event_bus)
