from __future__ import annotations

import random

from esper import World

from tint.components.tint_state import Style
from tint.config import TintConfig
from tint.events.bus import EventBus
from tint.genetics.spawn_assigner import generate_neutral, pick_arctic_style
from tint.utils import creatures
from tint.utils.color_codec import is_neutral


def enforce_arctic_rule(
    world: World,
    entity: int,
    config: TintConfig,
    rng: random.Random,
    event_bus: EventBus | None = None,
) -> bool:
    """Keep arctic creatures on a neutral palette.

    Colored mutants survive when arctic mutations are allowed; anything else
    that is not already neutral gets a fresh arctic roll. Returns True when
    the tint was rewritten.
    """
    if not creatures.is_arctic(world, entity):
        return False
    tint = creatures.read_tint(world, entity)
    if not tint.has:
        return False
    if tint.style == Style.MUTANT and config.allow_arctic_mutations:
        return False
    if is_neutral(tint.color):
        return False

    style = pick_arctic_style(config, rng)
    creatures.write_tint(world, entity, style, generate_neutral(config, style, rng), event_bus)
    return True
