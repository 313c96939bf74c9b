from __future__ import annotations

from typing import Mapping, Tuple

from esper import World

from tint.components.creature_code import CreatureCode
from tint.components.player_agent import PlayerAgent
from tint.components.position import Position
from tint.components.saved_tint import SavedTint
from tint.components.tint_state import Style
from tint.components.variants import Variants
from tint.events.bus import EVENT_CREATURE_LOADED, EVENT_CREATURE_SPAWNED, EventBus
from tint.utils.creatures import read_position, read_variant


def create_creature(
    world: World,
    path: str,
    *,
    domain: str = "game",
    variants: Mapping[str, str] | None = None,
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0),
    player: bool = False,
    saved_tint: Tuple[Style, int] | None = None,
) -> int:
    """Create a creature entity without announcing it to any system."""
    x, y, z = position
    components: list = [
        CreatureCode(path=path, domain=domain),
        Variants(values=dict(variants or {})),
        Position(x=x, y=y, z=z),
    ]
    if player:
        components.append(PlayerAgent(name=path))
    if saved_tint is not None:
        style, color = saved_tint
        components.append(SavedTint(has=True, style=Style(style), color=color))
    return world.create_entity(*components)


def spawn_creature(world: World, event_bus: EventBus, path: str, **kwargs) -> int:
    entity = create_creature(world, path, **kwargs)
    event_bus.emit(EVENT_CREATURE_SPAWNED, entity=entity)
    return entity


def load_creature(world: World, event_bus: EventBus, path: str, **kwargs) -> int:
    """Create a creature as if restored from a save and emit the load event."""
    entity = create_creature(world, path, **kwargs)
    event_bus.emit(EVENT_CREATURE_LOADED, entity=entity)
    return entity


def mature_creature(
    world: World,
    event_bus: EventBus,
    juvenile: int,
    adult_path: str,
    *,
    variants: Mapping[str, str] | None = None,
) -> int:
    """Replace a juvenile with a new adult entity on the same spot, as the host does on age-up."""
    position = read_position(world, juvenile)
    code = world.component_for_entity(juvenile, CreatureCode)
    adult_variants = dict(variants) if variants is not None else {"type": read_variant(world, juvenile, "type")}
    adult_variants = {name: value for name, value in adult_variants.items() if value}
    world.delete_entity(juvenile, immediate=True)
    return spawn_creature(
        world,
        event_bus,
        adult_path,
        domain=code.domain,
        variants=adult_variants,
        position=position,
    )
