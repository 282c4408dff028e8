"""Sorted station directory with nearest-distance lookup."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .schemas import StationRecord

DEFAULT_MATCH_RADIUS_M = 50.0


class StationDirectory:
    """Read-only index of stations ordered by cumulative distance.

    Lookups are a binary search over the sorted distances followed by a
    scan of the neighbours inside the match radius. When several stations
    qualify the nearest one wins; exact ties resolve to the entry that came
    first in the source directory.
    """

    def __init__(self, records: Iterable[StationRecord] = ()) -> None:
        self._records: tuple[StationRecord, ...] = tuple(records)
        distances = np.array([r.distance for r in self._records], dtype=float)
        # Stable sort keeps directory order among equal distances.
        self._order = np.argsort(distances, kind="stable")
        self._sorted = distances[self._order]

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    @property
    def records(self) -> Sequence[StationRecord]:
        return self._records

    def nearest(
        self,
        distance: float,
        radius_m: float = DEFAULT_MATCH_RADIUS_M,
    ) -> StationRecord | None:
        """Return the station closest to ``distance`` within ``radius_m``."""

        if not self._records:
            return None

        lo = int(np.searchsorted(self._sorted, distance - radius_m, side="left"))
        hi = int(np.searchsorted(self._sorted, distance + radius_m, side="right"))
        best: tuple[float, int] | None = None
        for pos in range(lo, hi):
            gap = abs(float(self._sorted[pos]) - distance)
            if gap > radius_m:
                continue
            key = (gap, int(self._order[pos]))
            if best is None or key < best:
                best = key
        if best is None:
            return None
        return self._records[best[1]]

    def resolve(self, distance: float, radius_m: float = DEFAULT_MATCH_RADIUS_M) -> str:
        """Return a location label for ``distance``, synthesizing a KM point."""

        match = self.nearest(distance, radius_m)
        if match is not None:
            return match.signal_name
        return f"KM {distance:.2f}"


__all__ = ["DEFAULT_MATCH_RADIUS_M", "StationDirectory"]
