"""Data layer: sample records, station directory and normalization."""

from .ingestion import RTISReader, load_station_directory, read_rtis_csv, read_station_csv
from .normalize import NormalizedLog, normalize_rows
from .schemas import Sample, StationRecord
from .stations import DEFAULT_MATCH_RADIUS_M, StationDirectory

__all__ = [
    "Sample",
    "StationRecord",
    "StationDirectory",
    "DEFAULT_MATCH_RADIUS_M",
    "NormalizedLog",
    "normalize_rows",
    "RTISReader",
    "read_rtis_csv",
    "load_station_directory",
    "read_station_csv",
]
