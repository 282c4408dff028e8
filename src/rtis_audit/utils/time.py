from __future__ import annotations

import datetime as dt
import re
from collections.abc import Iterable

import numpy as np
import pandas as pd

_ISO_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")
# A label must carry a clock time or a calendar date to become an instant.
_TIME_LIKE = re.compile(
    r"\d{1,2}:\d{2}|\d{4}-\d{1,2}-\d{1,2}|\d{1,2}[-/.]\d{1,2}[-/.]\d{2,4}"
)


def to_utc_series(ts: pd.Series | Iterable[object]) -> pd.Series:
    """
    Robustly convert a pandas Series of timestamps to tz-aware UTC datetimes.
    Accepts:
      - ISO strings with or without trailing 'Z'
      - RTIS style 'DD-MM-YYYY HH:MM:SS' and bare 'HH:MM:SS' labels
      - tz-aware datetimes (converted to UTC)
      - naive datetimes (assumed UTC)
    Bare numbers, strings without a date or clock part, unparsable and blank
    elements become NaT.
    """

    if not isinstance(ts, pd.Series):
        ts = pd.Series(list(ts), dtype="object")

    # Fast path: already datetime dtype
    if pd.api.types.is_datetime64_any_dtype(ts):
        if getattr(ts.dt, "tz", None) is None:
            return ts.dt.tz_localize("UTC")
        return ts.dt.tz_convert("UTC")

    def _one(x: object) -> pd.Timestamp:
        if isinstance(x, (dt.datetime, np.datetime64)):
            v = pd.Timestamp(x)
        elif isinstance(x, str) and _TIME_LIKE.search(x):
            dayfirst = _ISO_PREFIX.match(x.strip()) is None
            try:
                v = pd.to_datetime(x.strip(), utc=False, dayfirst=dayfirst)
            except (ValueError, TypeError, OverflowError):
                return pd.NaT
        else:
            return pd.NaT
        if pd.isna(v):
            return pd.NaT
        # localize or convert to UTC
        if getattr(v, "tzinfo", None) is None:
            return v.tz_localize("UTC")
        return v.tz_convert("UTC")

    s = ts.map(_one)
    # Ensure dtype is datetime64[ns, UTC]
    if not isinstance(s.dtype, pd.DatetimeTZDtype):
        s = pd.to_datetime(s, utc=True, errors="coerce")
    return s


__all__ = ["to_utc_series"]
