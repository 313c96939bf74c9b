from dataclasses import dataclass

from tint.components.tint_state import Style


@dataclass(slots=True)
class Beacon:
    """Juvenile tint left behind for its adult replacement to pick up."""
    species_key: str
    x: float
    y: float
    z: float
    style: Style
    color: int
    expires_ms: float
    source_entity: int | None = None

    def is_expired(self, now_ms: float) -> bool:
        return self.expires_ms <= now_ms
