from dataclasses import dataclass


@dataclass(slots=True)
class RenderColor:
    """Presentation-side color sink; ``argb`` is what the renderer draws with."""
    argb: int = 0xFFFFFFFF
