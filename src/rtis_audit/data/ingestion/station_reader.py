"""Loading of the signal/station reference directory."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Iterable, Mapping

import pandas as pd

from ..schemas import STATION_DISTANCE_COLUMN, STATION_NAME_COLUMN, StationRecord
from ..stations import StationDirectory


def _records_from_frame(df: pd.DataFrame) -> list[StationRecord]:
    df = df.rename(columns=lambda c: str(c).strip())
    missing = {STATION_NAME_COLUMN, STATION_DISTANCE_COLUMN} - set(df.columns)
    if missing:
        raise ValueError(f"Required station fields missing: {', '.join(sorted(missing))}.")

    distance = pd.to_numeric(df[STATION_DISTANCE_COLUMN], errors="coerce")
    names = df[STATION_NAME_COLUMN].astype(str).str.strip()
    keep = distance.notna() & df[STATION_NAME_COLUMN].notna() & names.ne("")
    return [
        StationRecord(signal_name=name, distance=float(dist))
        for name, dist in zip(names[keep], distance[keep])
    ]


def read_station_csv(text: str) -> StationDirectory:
    """Build a :class:`StationDirectory` from CSV *text*."""

    if not text or not text.strip():
        return StationDirectory()
    return StationDirectory(_records_from_frame(pd.read_csv(io.StringIO(text))))


def load_station_directory(
    source: str | Path | Iterable[Mapping[str, Any]] | None,
) -> StationDirectory:
    """Load the directory from a CSV path or from already parsed row mappings.

    Rows without a name or a numeric distance are skipped. ``None`` yields an
    empty directory, which makes the normalizer fall back to KM labels.
    """

    if source is None:
        return StationDirectory()
    if isinstance(source, (str, Path)):
        return StationDirectory(_records_from_frame(pd.read_csv(source)))
    rows = list(source)
    if not rows:
        return StationDirectory()
    return StationDirectory(_records_from_frame(pd.DataFrame(rows)))


__all__ = ["load_station_directory", "read_station_csv"]
