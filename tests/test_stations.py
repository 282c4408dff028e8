from __future__ import annotations

from pathlib import Path

import pytest

from rtis_audit.data import StationDirectory, StationRecord, load_station_directory, read_station_csv


def _directory(*entries: tuple[str, float]) -> StationDirectory:
    return StationDirectory(StationRecord(signal_name=n, distance=d) for n, d in entries)


def test_nearest_station_within_radius() -> None:
    directory = _directory(("C", 3000.0), ("A", 1000.0), ("B", 2000.0))

    assert directory.nearest(2030.0).signal_name == "B"
    assert directory.nearest(950.0).signal_name == "A"
    assert directory.nearest(2500.0) is None


def test_radius_is_inclusive() -> None:
    directory = _directory(("A", 1000.0))

    assert directory.nearest(1050.0).signal_name == "A"
    assert directory.nearest(1050.1) is None


def test_nearest_wins_then_directory_order() -> None:
    directory = _directory(("FAR", 1040.0), ("NEAR", 1010.0), ("TWIN", 1010.0))

    assert directory.nearest(1000.0).signal_name == "NEAR"
    assert directory.nearest(1020.0).signal_name == "NEAR"
    # Equidistant from all three: the first directory entry wins.
    assert directory.nearest(1025.0).signal_name == "FAR"


def test_resolve_synthesizes_km_label() -> None:
    directory = _directory(("A", 1000.0))

    assert directory.resolve(1000.0) == "A"
    assert directory.resolve(1234.5) == "KM 1234.50"
    assert StationDirectory().resolve(12.0) == "KM 12.00"
    assert not StationDirectory()


STATIONS_CSV = """SIGNAL NAME,CUMMULATIVE DISTANT(IN Meter)
AGC HOME,1200
,1500
AGC STARTER,n/a
AGC ADV STARTER,1900.5
"""


def test_read_station_csv_skips_incomplete_rows() -> None:
    directory = read_station_csv(STATIONS_CSV)

    assert len(directory) == 2
    assert [r.signal_name for r in directory.records] == ["AGC HOME", "AGC ADV STARTER"]
    assert directory.nearest(1901.0).distance == pytest.approx(1900.5)


def test_load_station_directory_from_path_and_rows(tmp_path: Path) -> None:
    path = tmp_path / "stations.csv"
    path.write_text(STATIONS_CSV, encoding="utf-8")

    assert len(load_station_directory(path)) == 2
    rows = [{"SIGNAL NAME": "X", "CUMMULATIVE DISTANT(IN Meter)": "10"}]
    assert load_station_directory(rows).nearest(0).signal_name == "X"
    assert len(load_station_directory(None)) == 0


def test_missing_station_columns_raise() -> None:
    with pytest.raises(ValueError, match="SIGNAL NAME"):
        read_station_csv("NAME,DIST\nA,1\n")
