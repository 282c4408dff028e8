"""Segmentation of a journey into stop episodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rtis_audit.data.schemas import Sample


@dataclass(slots=True, frozen=True)
class StopEpisode:
    """First sample of a maximal run of zero-speed samples."""

    start_index: int
    location: str
    timestamp: str
    distance: float


def segment_stops(samples: Sequence[Sample]) -> tuple[StopEpisode, ...]:
    """Return one episode per moving -> stopped transition, in order.

    A journey that starts at standstill yields an episode at index 0.
    """

    stops: list[StopEpisode] = []
    stopped = False
    for idx, sample in enumerate(samples):
        if sample.speed == 0:
            if not stopped:
                stops.append(
                    StopEpisode(
                        start_index=idx,
                        location=sample.location,
                        timestamp=sample.timestamp,
                        distance=sample.distance,
                    )
                )
                stopped = True
        else:
            stopped = False
    return tuple(stops)


__all__ = ["StopEpisode", "segment_stops"]
