"""Utilities to read RTIS journey exports into row mappings."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

import pandas as pd


def _frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    df = df.dropna(how="all")
    df.columns = [str(c).strip() for c in df.columns]
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def read_rtis_csv(text: str) -> list[dict[str, Any]]:
    """Return raw RTIS rows parsed from CSV *text*."""

    if not text or not text.strip():
        return []
    df = pd.read_csv(io.StringIO(text), skip_blank_lines=True, dtype=str)
    return _frame_to_rows(df)


class RTISReader:
    """RTIS ingestion: CSV/Excel export -> list of raw row mappings."""

    @staticmethod
    def from_csv(path: str | Path) -> list[dict[str, Any]]:
        """Load a CSV export, keeping every cell as text for the normalizer."""

        df = pd.read_csv(path, skip_blank_lines=True, dtype=str)
        return _frame_to_rows(df)

    @staticmethod
    def from_frame(df: pd.DataFrame) -> list[dict[str, Any]]:
        """Convert an already loaded DataFrame (e.g. from Excel) into rows."""

        return _frame_to_rows(df.copy())


__all__ = ["RTISReader", "read_rtis_csv"]
