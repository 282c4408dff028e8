"""Assembly of analysis stages into an immutable :class:`Report`."""

from __future__ import annotations

import hashlib
from typing import Sequence

from rtis_audit.analysis.approach import ApproachProfile
from rtis_audit.analysis.brake_test import BrakeTestOutcome, BrakeTestResult
from rtis_audit.analysis.braking import BrakingVerdict
from rtis_audit.analysis.rules import RakeType
from rtis_audit.analysis.speed_bands import SpeedBandSummary
from rtis_audit.analysis.stops import StopEpisode
from rtis_audit.data.schemas import Sample

from .schemas import (
    BrakeTestReport,
    BrakeTestWindowModel,
    Report,
    SpeedSummary,
    StopRow,
    TripMetadata,
)


def journey_digest(samples: Sequence[Sample], length: int = 8) -> str:
    """Return a short stable digest of the analysed samples."""

    h = hashlib.sha1()
    for sample in samples:
        h.update(f"{sample.timestamp}|{sample.speed:.3f}|{sample.distance:.3f}\n".encode("utf-8"))
    return h.hexdigest()[:length]


def make_trip_id(
    meta: TripMetadata,
    samples: Sequence[Sample],
    disambiguator: str | None = None,
) -> str:
    """Build ``<train>_<date>_<disambiguator>``.

    Without an explicit disambiguator the digest of the samples is used, so
    the same log always maps to the same id while a different log for the
    same train and date does not collide.
    """

    suffix = disambiguator if disambiguator else journey_digest(samples)
    return f"{meta.train_no}_{meta.journey_date}_{suffix}"


def _brake_test_report(outcome: BrakeTestOutcome) -> BrakeTestReport:
    window = outcome.window
    if window is None:
        return BrakeTestReport(status=outcome.status)
    return BrakeTestReport(
        status=outcome.status,
        window=BrakeTestWindowModel(
            start_index=window.start_index,
            end_index=window.end_index,
            start_time=window.start_time,
            end_time=window.end_time,
            start_speed=window.start_speed,
            end_speed=window.end_speed,
            drop=window.drop,
        ),
    )


def stop_rows(
    stops: Sequence[StopEpisode],
    profiles: Sequence[ApproachProfile],
    verdicts: Sequence[BrakingVerdict],
) -> tuple[StopRow, ...]:
    if not len(stops) == len(profiles) == len(verdicts):
        raise ValueError("Stops, profiles and verdicts must align one to one")
    return tuple(
        StopRow(
            s_no=number,
            index=stop.start_index,
            location=stop.location,
            timestamp=stop.timestamp,
            distance=stop.distance,
            speeds=profile.as_dict(),
            result=verdict,
            remark=verdict.remark,
        )
        for number, (stop, profile, verdict) in enumerate(zip(stops, profiles, verdicts), start=1)
    )


def assemble_report(
    meta: TripMetadata,
    samples: Sequence[Sample],
    *,
    stops: Sequence[StopRow],
    brake_tests: BrakeTestResult,
    summary: SpeedBandSummary,
    rejected_rows: int = 0,
    disambiguator: str | None = None,
) -> Report:
    """Merge the stage outputs and trip metadata into one report value."""

    return Report(
        trip_id=make_trip_id(meta, samples, disambiguator),
        meta=meta,
        rake_type=RakeType.from_label(meta.rake_type),
        summary=SpeedSummary(
            max_speed=summary.max_speed,
            avg_speed=summary.avg_speed,
            total_distance=summary.total_distance,
            overspeed_count=summary.overspeed_count,
            bands=dict(summary.bands),
        ),
        bft=_brake_test_report(brake_tests.bft),
        bpt=_brake_test_report(brake_tests.bpt),
        stops=tuple(stops),
        sample_count=len(samples),
        rejected_rows=rejected_rows,
    )


__all__ = ["assemble_report", "journey_digest", "make_trip_id", "stop_rows"]
