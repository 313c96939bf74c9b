"""Accessors over creature entities: the only surface the tint logic touches.

A creature is a plain esper entity id. Missing components read as empty
strings, ``False`` or the origin, never as errors.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from esper import World

from tint.components.creature_code import CreatureCode
from tint.components.player_agent import PlayerAgent
from tint.components.position import Position
from tint.components.saved_tint import SavedTint
from tint.components.tint_state import Style, TintState
from tint.components.variants import Variants
from tint.constants import OPAQUE_WHITE
from tint.events.bus import EVENT_TINT_CHANGED, EVENT_TINT_CLEARED, EventBus
from tint.utils.species import is_arctic_variant, looks_like_adult, looks_like_juvenile, species_key


def loaded_creatures(world: World) -> List[int]:
    """Snapshot of every creature currently in the world, players included."""
    return [entity for entity, _ in world.get_component(CreatureCode)]


def is_player(world: World, entity: int) -> bool:
    return world.has_component(entity, PlayerAgent)


def read_variant(world: World, entity: int, name: str) -> str:
    variants = world.try_component(entity, Variants)
    if variants is None:
        return ""
    return variants.get(name)


def _variant_values(world: World, entity: int) -> dict:
    variants = world.try_component(entity, Variants)
    return variants.values if variants is not None else {}


def _code_path(world: World, entity: int) -> str:
    code = world.try_component(entity, CreatureCode)
    return code.path if code is not None else ""


def read_position(world: World, entity: int) -> Tuple[float, float, float]:
    position = world.try_component(entity, Position)
    if position is None:
        return (0.0, 0.0, 0.0)
    return position.as_tuple()


def creature_species_key(world: World, entity: int) -> str:
    code = world.try_component(entity, CreatureCode)
    if code is None:
        return species_key("game", "")
    return species_key(code.domain, code.path)


def is_juvenile(world: World, entity: int) -> bool:
    return looks_like_juvenile(_code_path(world, entity), _variant_values(world, entity))


def is_adult(world: World, entity: int) -> bool:
    return looks_like_adult(_code_path(world, entity), _variant_values(world, entity))


def is_arctic(world: World, entity: int) -> bool:
    return is_arctic_variant(read_variant(world, entity, "type"))


def coerce_style(value) -> Style:
    """Legacy or hand-edited saves may hold style numbers outside the enum; those read as SoftHue."""
    try:
        return Style(value)
    except ValueError:
        return Style.SOFT_HUE


def has_tint(world: World, entity: int) -> bool:
    state = world.try_component(entity, TintState)
    if state is not None and state.has:
        return True
    saved = world.try_component(entity, SavedTint)
    return saved is not None and saved.has


def read_tint(world: World, entity: int) -> TintState:
    """Return a detached copy of the tint, preferring the replicated tree."""
    state = world.try_component(entity, TintState)
    if state is not None and state.has:
        return TintState(has=True, style=coerce_style(state.style), color=state.color)
    saved = world.try_component(entity, SavedTint)
    if saved is not None and saved.has:
        return TintState(has=True, style=coerce_style(saved.style), color=saved.color)
    return TintState()


def read_color(world: World, entity: int) -> Optional[int]:
    tint = read_tint(world, entity)
    return tint.color if tint.has else None


def write_tint(
    world: World,
    entity: int,
    style: Style,
    color: int,
    event_bus: EventBus | None = None,
) -> None:
    """Write both tint trees and mark the replicated one dirty."""
    style = Style(style)
    saved = world.try_component(entity, SavedTint)
    if saved is None:
        world.add_component(entity, SavedTint(has=True, style=style, color=color))
    else:
        saved.has = True
        saved.style = style
        saved.color = color

    state = world.try_component(entity, TintState)
    if state is None:
        world.add_component(entity, TintState(has=True, style=style, color=color, dirty=True))
    else:
        state.has = True
        state.style = style
        state.color = color
        state.dirty = True
    if event_bus is not None:
        event_bus.emit(EVENT_TINT_CHANGED, entity=entity, style=style, color=color)


def promote_saved_tint(world: World, entity: int, event_bus: EventBus | None = None) -> bool:
    """Copy a saved-only tint into the replicated tree. Returns True when promoted."""
    state = world.try_component(entity, TintState)
    if state is not None and state.has:
        return False
    saved = world.try_component(entity, SavedTint)
    if saved is None or not saved.has:
        return False
    style = coerce_style(saved.style)
    color = saved.color if saved.color else OPAQUE_WHITE
    if state is None:
        world.add_component(entity, TintState(has=True, style=style, color=color, dirty=True))
    else:
        state.has = True
        state.style = style
        state.color = color
        state.dirty = True
    if event_bus is not None:
        event_bus.emit(EVENT_TINT_CHANGED, entity=entity, style=style, color=color)
    return True


def clear_tint(world: World, entity: int, event_bus: EventBus | None = None) -> None:
    removed = False
    for component_type in (TintState, SavedTint):
        if world.has_component(entity, component_type):
            world.remove_component(entity, component_type)
            removed = True
    if removed and event_bus is not None:
        event_bus.emit(EVENT_TINT_CLEARED, entity=entity)
