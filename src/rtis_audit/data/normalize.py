"""Normalization of raw RTIS rows into an ordered tuple of samples."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import pandas as pd
import pint

from rtis_audit.errors import NonNumericFieldError, UnitConversionError
from rtis_audit.utils import conversion_factor, to_utc_series
from rtis_audit.utils.units import DISTANCE_UNIT, SPEED_UNIT

from .schemas import (
    DISTANCE_COLUMN,
    LOCATION_COLUMN,
    SPEED_COLUMN,
    TIME_ALIASES,
    Sample,
)
from .stations import DEFAULT_MATCH_RADIUS_M, StationDirectory

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class NormalizedLog:
    """Ordered samples plus the number of rows dropped for lacking a time."""

    samples: tuple[Sample, ...]
    rejected_rows: int = 0


def _blank(series: pd.Series) -> pd.Series:
    return series.isna() | series.astype(str).str.strip().eq("")


def _coerce_numeric(df: pd.DataFrame, column: str) -> pd.Series:
    if column not in df.columns:
        return pd.Series(0.0, index=df.index, dtype="float64")

    raw = df[column]
    numeric = pd.to_numeric(raw, errors="coerce")
    present = ~_blank(raw)
    if present.any() and numeric[present].isna().all():
        examples = [str(v) for v in raw[present].head(3)]
        raise NonNumericFieldError(column, examples)
    return numeric.fillna(0.0).astype("float64")


def _factor(src: str, dst: str) -> float:
    try:
        return conversion_factor(src, dst)
    except (pint.errors.UndefinedUnitError, pint.errors.DimensionalityError) as exc:
        raise UnitConversionError(f"Cannot convert {src!r} to {dst!r}: {exc}") from exc


def _pick_time(df: pd.DataFrame) -> pd.Series:
    picked = pd.Series(pd.NA, index=df.index, dtype="object")
    for alias in reversed(TIME_ALIASES):
        if alias not in df.columns:
            continue
        column = df[alias]
        picked = picked.mask(~_blank(column), column)
    return picked


def normalize_rows(
    rows: pd.DataFrame | Iterable[Mapping[str, Any]],
    stations: StationDirectory | None = None,
    *,
    units: Mapping[str, str] | None = None,
    match_radius_m: float = DEFAULT_MATCH_RADIUS_M,
) -> NormalizedLog:
    """Build the ordered sample sequence from raw tabular rows.

    Parameters
    ----------
    rows:
        Either a DataFrame or an iterable of mappings keyed by the RTIS
        column names (``Gps Time``/``Time``, ``Speed``, ``Distance``,
        ``Location``). Row order is preserved.
    stations:
        Optional reference directory used to label samples whose location
        is blank. Without it blank locations become ``"KM <distance>"``.
    units:
        Optional source units for ``speed`` and ``distance``; values are
        converted to km/h and metres.

    Returns
    -------
    NormalizedLog
        The samples and the count of rows rejected for lacking a time.
    """

    df = rows.copy() if isinstance(rows, pd.DataFrame) else pd.DataFrame(list(rows))
    df = df.reset_index(drop=True)
    if df.empty:
        return NormalizedLog(samples=(), rejected_rows=0)

    time_label = _pick_time(df)
    keep = ~_blank(time_label)
    rejected = int((~keep).sum())
    if rejected:
        logger.info("Dropped %d rows without a time value", rejected)

    df = df.loc[keep].reset_index(drop=True)
    time_label = time_label.loc[keep].reset_index(drop=True)
    if df.empty:
        return NormalizedLog(samples=(), rejected_rows=rejected)

    speed = _coerce_numeric(df, SPEED_COLUMN)
    distance = _coerce_numeric(df, DISTANCE_COLUMN)
    units = units or {}
    if units.get("speed"):
        speed = speed * _factor(units["speed"], SPEED_UNIT)
    if units.get("distance"):
        distance = distance * _factor(units["distance"], DISTANCE_UNIT)
    # Negative readings clamp to stopped.
    speed = speed.clip(lower=0.0)

    if LOCATION_COLUMN in df.columns:
        location = df[LOCATION_COLUMN].where(~_blank(df[LOCATION_COLUMN]), "")
    else:
        location = pd.Series("", index=df.index, dtype="object")

    directory = stations if stations is not None else StationDirectory()
    instants = to_utc_series(time_label)
    if logger.isEnabledFor(logging.DEBUG):
        unparsed = int(instants.isna().sum())
        if unparsed:
            logger.debug("%d time labels could not be parsed to instants", unparsed)

    samples: list[Sample] = []
    for idx in range(len(df)):
        dist = float(distance.iloc[idx])
        loc = str(location.iloc[idx]).strip()
        if not loc:
            loc = directory.resolve(dist, match_radius_m)
        instant = instants.iloc[idx]
        samples.append(
            Sample(
                timestamp=str(time_label.iloc[idx]).strip(),
                speed=float(speed.iloc[idx]),
                distance=dist,
                location=loc,
                instant=None if pd.isna(instant) else instant.to_pydatetime(),
            )
        )

    logger.debug("Normalized %d samples (%d rejected)", len(samples), rejected)
    return NormalizedLog(samples=tuple(samples), rejected_rows=rejected)


__all__ = ["NormalizedLog", "normalize_rows"]
