from dataclasses import dataclass


@dataclass(slots=True)
class PlayerAgent:
    """Marker component for player-controlled creatures. Never tinted."""
    name: str = ""
