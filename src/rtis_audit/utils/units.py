"""Unit handling utilities built on top of :mod:`pint`."""

from __future__ import annotations

from functools import lru_cache

import pint

SPEED_UNIT = "km/hour"
DISTANCE_UNIT = "meter"


@lru_cache(maxsize=1)
def ureg() -> pint.UnitRegistry:
    """Return a process-wide :class:`~pint.UnitRegistry` instance."""

    registry = pint.UnitRegistry()
    # Spellings we commonly see in RTIS exports.
    registry.define("kmph = kilometer / hour")
    registry.define("kmh = kilometer / hour")
    return registry


def _clean_unit(unit: str) -> str:
    return unit.strip()


@lru_cache(maxsize=32)
def conversion_factor(src_unit: str, dst_unit: str) -> float:
    """Return the multiplicative factor converting ``src_unit`` to ``dst_unit``."""

    quantity = 1.0 * ureg()(_clean_unit(src_unit))
    return float(quantity.to(_clean_unit(dst_unit)).magnitude)


def convert_value(value: float, src_unit: str, dst_unit: str) -> float:
    """Convert ``value`` from ``src_unit`` to ``dst_unit``."""

    return float(value) * conversion_factor(src_unit, dst_unit)


def normalize_speed(value: float, unit: str, dst: str = SPEED_UNIT) -> float:
    """Normalize a speed reading to kilometres per hour."""

    return convert_value(value, unit, dst)


def normalize_distance(value: float, unit: str, dst: str = DISTANCE_UNIT) -> float:
    """Normalize a distance reading to metres."""

    return convert_value(value, unit, dst)


__all__ = [
    "SPEED_UNIT",
    "DISTANCE_UNIT",
    "ureg",
    "conversion_factor",
    "convert_value",
    "normalize_speed",
    "normalize_distance",
]
