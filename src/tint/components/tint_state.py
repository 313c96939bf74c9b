"""Replicated tint attached to a creature."""
from dataclasses import dataclass
from enum import IntEnum


class Style(IntEnum):
    """Coarse tint categories; values are what the attribute store persists."""
    SOFT_HUE = 0
    GRAY = 1
    DARK = 2
    WHITE = 3
    MUTANT = 4


NEUTRAL_STYLES = (Style.GRAY, Style.DARK, Style.WHITE)


@dataclass(slots=True)
class TintState:
    """Replicated copy of the tint.

    ``dirty`` is raised on every write so the presentation side knows the
    value changed; whoever replicates it is responsible for lowering it.
    """
    has: bool = False
    style: Style = Style.SOFT_HUE
    color: int = 0
    dirty: bool = False
