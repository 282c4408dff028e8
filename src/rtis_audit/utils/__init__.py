"""Utility helpers for the application."""

from .time import to_utc_series
from .units import conversion_factor, convert_value, normalize_distance, normalize_speed, ureg

__all__ = [
    "to_utc_series",
    "ureg",
    "conversion_factor",
    "convert_value",
    "normalize_speed",
    "normalize_distance",
]
