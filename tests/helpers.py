from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Tuple

from esper import World

from tint.components.tint_state import Style
from tint.config import TintConfig
from tint.factories.creatures import create_creature
from tint.utils.creatures import write_tint


def make_config(**overrides) -> TintConfig:
    """Default configuration with the given fields replaced."""

    return replace(TintConfig(), **overrides)


def tinted_creature(
    world: World,
    path: str,
    style: Style,
    color: int,
    *,
    variants: Mapping[str, str] | None = None,
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> int:
    """Create a creature that already carries a tint, without emitting any event."""

    entity = create_creature(world, path, variants=variants, position=position)
    write_tint(world, entity, style, color)
    return entity
