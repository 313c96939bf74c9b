from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive while subscribed.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                          # payload: dt=float (seconds)
EVENT_SESSION_STARTED = "session_started"    # payload: side=str, seed=int|None
EVENT_SESSION_STOPPED = "session_stopped"    # payload: side=str


# ============================================================================
# CREATURE LIFECYCLE (host simulation)
# ============================================================================
EVENT_CREATURE_SPAWNED = "creature_spawned"  # payload: entity=int
EVENT_CREATURE_LOADED = "creature_loaded"    # payload: entity=int
EVENT_LEVEL_FINALIZED = "level_finalized"    # payload: None


# ============================================================================
# TINT STATE
# ============================================================================
EVENT_TINT_CHANGED = "tint_changed"          # payload: entity=int, style=Style, color=int
EVENT_TINT_CLEARED = "tint_cleared"          # payload: entity=int


# ============================================================================
# BEACONS
# ============================================================================
EVENT_BEACON_RECORDED = "beacon_recorded"    # payload: species_key=str, source_entity=int
EVENT_BEACON_CONSUMED = "beacon_consumed"    # payload: species_key=str, entity=int, style=Style, color=int
