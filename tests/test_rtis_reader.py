from __future__ import annotations

from pathlib import Path

from rtis_audit.data import RTISReader, normalize_rows, read_rtis_csv

RTIS_SAMPLE = """Gps Time,Speed,Distance,Location
01-01-2024 08:00:00,0,0,AGRA CANTT

01-01-2024 08:00:01,4.5,1.2,
,5,2.5,
01-01-2024 08:00:03,6,4.1,
"""


def test_read_rtis_csv_returns_text_rows() -> None:
    rows = read_rtis_csv(RTIS_SAMPLE)

    assert len(rows) == 4
    assert rows[0] == {
        "Gps Time": "01-01-2024 08:00:00",
        "Speed": "0",
        "Distance": "0",
        "Location": "AGRA CANTT",
    }
    assert rows[1]["Location"] is None


def test_empty_text_gives_no_rows() -> None:
    assert read_rtis_csv("") == []
    assert read_rtis_csv("   \n") == []


def test_reader_rows_feed_the_normalizer(tmp_path: Path) -> None:
    path = tmp_path / "journey.csv"
    path.write_text(RTIS_SAMPLE, encoding="utf-8")

    log = normalize_rows(RTISReader.from_csv(path))

    assert log.rejected_rows == 1
    assert [s.speed for s in log.samples] == [0.0, 4.5, 6.0]
    assert [s.location for s in log.samples] == ["AGRA CANTT", "KM 1.20", "KM 4.10"]
