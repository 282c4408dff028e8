"""Typed records for normalized RTIS journey samples."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

# Source column names as exported by the RTIS portal.
TIME_ALIASES = ("Gps Time", "Time")
SPEED_COLUMN = "Speed"
DISTANCE_COLUMN = "Distance"
LOCATION_COLUMN = "Location"

STATION_NAME_COLUMN = "SIGNAL NAME"
STATION_DISTANCE_COLUMN = "CUMMULATIVE DISTANT(IN Meter)"


@dataclass(slots=True, frozen=True)
class Sample:
    """Single telemetry sample: speed in km/h, cumulative distance in metres."""

    timestamp: str
    speed: float
    distance: float
    location: str
    instant: dt.datetime | None = None


@dataclass(slots=True, frozen=True)
class StationRecord:
    """Signal or station entry of the reference directory."""

    signal_name: str
    distance: float


__all__ = [
    "TIME_ALIASES",
    "SPEED_COLUMN",
    "DISTANCE_COLUMN",
    "LOCATION_COLUMN",
    "STATION_NAME_COLUMN",
    "STATION_DISTANCE_COLUMN",
    "Sample",
    "StationRecord",
]
