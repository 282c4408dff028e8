"""Distance weighted speed band histogram and journey statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

import numpy as np

from rtis_audit.data.schemas import Sample
from rtis_audit.errors import EmptySequenceError

BAND_LABELS: tuple[str, ...] = (
    "atOrAboveMPS",
    "above80",
    "75to80",
    "60to75",
    "40to60",
    "below40",
)


@dataclass(slots=True, frozen=True)
class SpeedBandSummary:
    bands: Mapping[str, float]
    overspeed_count: int
    max_speed: float
    avg_speed: float
    total_distance: float


def aggregate_speed_bands(samples: Sequence[Sample], mps: float) -> SpeedBandSummary:
    """Accumulate distance per speed band and summary statistics.

    Each consecutive pair contributes its distance delta, unfiltered, to the
    band of the later sample. ``overspeed_count`` counts samples strictly
    above ``mps`` while the top band is inclusive of ``mps``.
    """

    if not samples:
        raise EmptySequenceError()

    speed = np.array([s.speed for s in samples], dtype=float)
    distance = np.array([s.distance for s in samples], dtype=float)

    later = speed[1:]
    deltas = np.diff(distance)
    # np.select takes the first matching condition, so bands are checked top down.
    labels = np.select(
        [later >= mps, later > 80, later >= 75, later >= 60, later >= 40],
        list(BAND_LABELS[:-1]),
        default=BAND_LABELS[-1],
    )
    bands = {label: float(deltas[labels == label].sum()) for label in BAND_LABELS}

    return SpeedBandSummary(
        bands=bands,
        overspeed_count=int((speed > mps).sum()),
        max_speed=float(speed.max()),
        avg_speed=float(speed.mean()),
        total_distance=float(distance[-1] - distance[0]),
    )


__all__ = ["BAND_LABELS", "SpeedBandSummary", "aggregate_speed_bands"]
