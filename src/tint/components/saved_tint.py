from dataclasses import dataclass

from tint.components.tint_state import Style


@dataclass(slots=True)
class SavedTint:
    """Persisted attribute copy of the tint, as restored from a save.

    Older saves may carry only this copy; the load path promotes it into
    the replicated ``TintState``.
    """
    has: bool = False
    style: Style = Style.SOFT_HUE
    color: int = 0
