"""Ingestion adapters turning RTIS exports into raw rows."""

from .rtis_reader import RTISReader, read_rtis_csv
from .station_reader import load_station_directory, read_station_csv

__all__ = [
    "RTISReader",
    "read_rtis_csv",
    "load_station_directory",
    "read_station_csv",
]
