from __future__ import annotations

import pytest

from rtis_audit.analysis import (
    AnalysisEngine,
    BrakeTestStatus,
    BrakingVerdict,
    RakeType,
    run_analysis,
)
from rtis_audit.data import StationDirectory, StationRecord
from rtis_audit.errors import EmptySequenceError
from rtis_audit.reporting import TripMetadata

from tests.helpers import build_samples

META = {
    "trainNo": "12345",
    "journeyDate": "2024-01-01",
    "rakeType": "COACHING",
    "mps": 110,
    "trainLoad": "24 coaches",
    "lpId": "LP042",
    "section": "NDLS-AGC",
}


def _approach_rows() -> list[dict]:
    """1 Hz log braking evenly over 2.5 km into a halt, then departing."""

    rows = []
    for i in range(251):
        distance = 10.0 * i
        rows.append(
            {
                "Gps Time": f"2024-01-01T08:{i // 60:02d}:{i % 60:02d}Z",
                "Speed": 0.025 * (2500.0 - distance),
                "Distance": distance,
            }
        )
    for j, (speed, distance) in enumerate([(0.0, 2500.0), (5.0, 2505.0), (10.0, 2515.0)], start=251):
        rows.append(
            {
                "Gps Time": f"2024-01-01T08:{j // 60:02d}:{j % 60:02d}Z",
                "Speed": speed,
                "Distance": distance,
            }
        )
    return rows


def test_run_analysis_builds_full_report() -> None:
    stations = StationDirectory([StationRecord("AGC HOME", 2480.0)])

    result = run_analysis(_approach_rows(), META, stations=stations)
    report = result.report

    assert report.rake_type is RakeType.COACHING
    assert report.sample_count == 254
    assert report.rejected_rows == 0
    assert report.trip_id.startswith("12345_2024-01-01_")

    assert len(report.stops) == 1
    stop = report.stops[0]
    assert stop.s_no == 1
    assert stop.index == 250
    assert stop.location == "AGC HOME"
    assert stop.speeds[2000] == pytest.approx(50.25)
    assert stop.speeds[1000] == pytest.approx(25.25)
    assert stop.speeds[500] == pytest.approx(12.5)
    assert stop.speeds[0] == 0
    assert stop.result is BrakingVerdict.SMOOTH
    assert stop.remark == "OK"

    assert report.bft.status is BrakeTestStatus.PASS
    assert report.bft.window.drop >= 5

    summary = report.summary
    assert summary.total_distance == pytest.approx(2515.0)
    assert sum(summary.bands.values()) == pytest.approx(2515.0)
    assert summary.max_speed == pytest.approx(62.5)
    assert summary.overspeed_count == 0

    assert "# Journey Analysis Summary" in result.summary_md
    assert "| 1 | AGC HOME |" in result.summary_md
    assert "**BFT**: PASS" in result.summary_md


def test_metadata_is_kept_verbatim() -> None:
    report = run_analysis(_approach_rows(), META).report

    dumped = report.meta.model_dump(by_alias=True, exclude_none=True)
    assert dumped == {**META, "mps": 110.0}
    assert report.meta.lp_id == "LP042"


def test_trip_id_is_stable_and_overridable() -> None:
    first = run_analysis(_approach_rows(), META).report
    second = run_analysis(_approach_rows(), META).report
    rerun = run_analysis(_approach_rows(), META, disambiguator="run2").report

    assert first.trip_id == second.trip_id
    assert rerun.trip_id == "12345_2024-01-01_run2"

    other_rows = _approach_rows()[:-1]
    assert run_analysis(other_rows, META).report.trip_id != first.trip_id


def test_sparse_approach_with_unknown_offsets_is_late() -> None:
    samples = build_samples([60, 50, 40, 0, 0], [0, 500, 1000, 2000, 2500])
    meta = TripMetadata(train_no="1", journey_date="d", rake_type="COACHING", mps=100)

    report = AnalysisEngine().analyze(samples, meta).report

    assert [s.index for s in report.stops] == [3]
    stop = report.stops[0]
    assert stop.speeds[2000] == 60
    assert stop.speeds[1000] == 40
    assert stop.speeds[500] is None
    assert stop.result is BrakingVerdict.LATE


def test_empty_log_raises_typed_failure() -> None:
    rows = [{"Speed": 10, "Distance": 0}, {"Speed": 12, "Distance": 5}]

    with pytest.raises(EmptySequenceError) as excinfo:
        run_analysis(rows, META)

    assert excinfo.value.rejected_rows == 2
    with pytest.raises(EmptySequenceError):
        AnalysisEngine().analyze((), META)


def test_summary_without_stops() -> None:
    samples = build_samples([30, 40, 50])

    result = AnalysisEngine().analyze(samples, META)

    assert result.report.stops == ()
    assert "No stops detected." in result.summary_md
    assert result.report.bft.status is BrakeTestStatus.NOT_DONE
