from __future__ import annotations

from typing import Iterable, List, Optional

from tint.components.beacon import Beacon
from tint.components.tint_state import Style
from tint.constants import BEACON_KEEP_MS, BEACON_RADIUS_SQ


class BeaconRegistry:
    """Short-lived, species-keyed record of juvenile tints.

    When the host matures a juvenile it replaces it with a new adult entity,
    so the rolled tint would be lost. The juvenile's beacon lets the adult
    that appears on the same spot shortly after pick it back up.
    """

    def __init__(self, keep_ms: float = BEACON_KEEP_MS, radius_sq: float = BEACON_RADIUS_SQ) -> None:
        self.keep_ms = keep_ms
        self.radius_sq = radius_sq
        self._beacons: List[Beacon] = []

    def __len__(self) -> int:
        return len(self._beacons)

    def all(self) -> Iterable[Beacon]:
        return tuple(self._beacons)

    def prune(self, now_ms: float) -> int:
        before = len(self._beacons)
        self._beacons = [beacon for beacon in self._beacons if not beacon.is_expired(now_ms)]
        return before - len(self._beacons)

    def record(
        self,
        species_key: str,
        position: tuple[float, float, float],
        style: Style,
        color: int,
        now_ms: float,
        *,
        source_entity: int | None = None,
    ) -> Beacon:
        """Add a beacon, replacing the previous one left by the same source entity."""
        if source_entity is not None:
            self._beacons = [b for b in self._beacons if b.source_entity != source_entity]
        x, y, z = position
        beacon = Beacon(
            species_key=species_key,
            x=x,
            y=y,
            z=z,
            style=Style(style),
            color=color,
            expires_ms=now_ms + self.keep_ms,
            source_entity=source_entity,
        )
        self._beacons.append(beacon)
        return beacon

    def consume(
        self,
        species_key: str,
        position: tuple[float, float, float],
        now_ms: float,
        *,
        exclude_source: int | None = None,
    ) -> Optional[Beacon]:
        """Remove and return the newest live beacon of this species within range.

        Scans newest first and takes the first hit, not necessarily the nearest.
        """
        x, y, z = position
        for index in range(len(self._beacons) - 1, -1, -1):
            beacon = self._beacons[index]
            if beacon.species_key != species_key:
                continue
            if beacon.is_expired(now_ms):
                continue
            if exclude_source is not None and beacon.source_entity == exclude_source:
                continue
            dx = beacon.x - x
            dy = beacon.y - y
            dz = beacon.z - z
            if dx * dx + dy * dy + dz * dz > self.radius_sq:
                continue
            del self._beacons[index]
            return beacon
        return None

    def clear(self) -> None:
        self._beacons.clear()
