from dataclasses import dataclass


@dataclass(slots=True)
class CreatureCode:
    """Type code of a creature, e.g. ``game:chicken-hen``."""
    path: str
    domain: str = "game"

    def __str__(self) -> str:
        return f"{self.domain}:{self.path}"
