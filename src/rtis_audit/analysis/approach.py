"""Approach speed profiling ahead of each stop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence

from rtis_audit.data.schemas import Sample

# Offset (m before the stop) -> half-width of the match band (m).
APPROACH_TOLERANCES: Mapping[int, float] = {
    2000: 20.0,
    1000: 20.0,
    800: 10.0,
    600: 10.0,
    500: 10.0,
    400: 10.0,
    300: 10.0,
    100: 10.0,
    50: 5.0,
    20: 5.0,
}
APPROACH_OFFSETS: tuple[int, ...] = (*APPROACH_TOLERANCES, 0)
DEFAULT_LOOKBACK_M = 2500.0


@dataclass(slots=True, frozen=True)
class ApproachProfile:
    """Speed (km/h) seen at each fixed offset before a stop; ``None`` = unknown."""

    speeds: tuple[tuple[int, float | None], ...]

    def __getitem__(self, offset: int) -> float | None:
        for key, value in self.speeds:
            if key == offset:
                return value
        raise KeyError(offset)

    def __iter__(self) -> Iterator[int]:
        return (key for key, _ in self.speeds)

    def as_dict(self) -> dict[int, float | None]:
        return dict(self.speeds)


def profile_approach(
    samples: Sequence[Sample],
    stop_index: int,
    *,
    lookback_m: float = DEFAULT_LOOKBACK_M,
) -> ApproachProfile:
    """Sample the speed at fixed distances before ``samples[stop_index]``.

    The scan walks backward from the stop and every sample falling inside an
    offset's band overwrites the value recorded so far, so the sample
    farthest back in time wins. The walk ends once the distance to the stop
    exceeds ``lookback_m``.
    """

    if not 0 <= stop_index < len(samples):
        raise IndexError(f"Stop index {stop_index} outside of {len(samples)} samples")

    d0 = samples[stop_index].distance
    recorded: dict[int, float | None] = {offset: None for offset in APPROACH_TOLERANCES}
    for idx in range(stop_index, -1, -1):
        sample = samples[idx]
        diff = abs(d0 - sample.distance)
        if diff > lookback_m:
            break
        for offset, tolerance in APPROACH_TOLERANCES.items():
            if abs(diff - offset) < tolerance:
                recorded[offset] = sample.speed

    recorded[0] = 0.0
    return ApproachProfile(speeds=tuple((offset, recorded[offset]) for offset in APPROACH_OFFSETS))


__all__ = [
    "APPROACH_OFFSETS",
    "APPROACH_TOLERANCES",
    "DEFAULT_LOOKBACK_M",
    "ApproachProfile",
    "profile_approach",
]
