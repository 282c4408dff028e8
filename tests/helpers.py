from __future__ import annotations

from typing import Sequence

import pandas as pd

from rtis_audit.data.schemas import Sample


def build_samples(
    speeds: Sequence[float],
    distances: Sequence[float] | None = None,
    *,
    step_s: float = 1.0,
    start: str = "2024-01-01T00:00:00Z",
    with_instants: bool = True,
) -> tuple[Sample, ...]:
    """Build samples at a fixed cadence; distances default to 10 m steps."""

    if distances is None:
        distances = [10.0 * i for i in range(len(speeds))]
    assert len(distances) == len(speeds)
    base = pd.Timestamp(start)
    samples = []
    for i, (speed, distance) in enumerate(zip(speeds, distances)):
        ts = base + pd.to_timedelta(i * step_s, unit="s")
        samples.append(
            Sample(
                timestamp=ts.isoformat(),
                speed=float(speed),
                distance=float(distance),
                location="",
                instant=ts.to_pydatetime() if with_instants else None,
            )
        )
    return tuple(samples)
