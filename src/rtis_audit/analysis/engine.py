"""Journey analysis: stops, braking quality, brake tests and speed bands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

from rtis_audit.data.normalize import NormalizedLog, normalize_rows
from rtis_audit.data.schemas import Sample
from rtis_audit.data.stations import StationDirectory
from rtis_audit.errors import EmptySequenceError
from rtis_audit.reporting.assemble import assemble_report, stop_rows
from rtis_audit.reporting.schemas import BrakeTestReport, Report, TripMetadata

from .approach import profile_approach
from .brake_test import BrakeTestDetector
from .braking import classify_braking
from .rules import AnalysisRules, RakeType, default_rules
from .speed_bands import aggregate_speed_bands
from .stops import segment_stops

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    """Container holding the report value and its Markdown summary."""

    report: Report
    summary_md: str


class AnalysisEngine:
    """Apply the rule table to one normalized journey."""

    def __init__(self, rules: AnalysisRules | None = None) -> None:
        self.rules = rules or default_rules()
        self.brake_tests = BrakeTestDetector(self.rules)

    def analyze(
        self,
        journey: NormalizedLog | Sequence[Sample],
        meta: TripMetadata | Mapping[str, Any],
        *,
        disambiguator: str | None = None,
    ) -> AnalysisResult:
        """Run every stage over ``journey`` and assemble the report."""

        if isinstance(journey, NormalizedLog):
            samples, rejected = journey.samples, journey.rejected_rows
        else:
            samples, rejected = tuple(journey), 0
        if not samples:
            raise EmptySequenceError(rejected)

        if not isinstance(meta, TripMetadata):
            meta = TripMetadata.model_validate(meta)
        rake = RakeType.from_label(meta.rake_type)

        stops = segment_stops(samples)
        profiles = [
            profile_approach(samples, stop.start_index, lookback_m=self.rules.approach_lookback_m)
            for stop in stops
        ]
        verdicts = [classify_braking(rake, profile, self.rules) for profile in profiles]
        brake_tests = self.brake_tests.detect(samples, rake)
        summary = aggregate_speed_bands(samples, meta.mps)

        report = assemble_report(
            meta,
            samples,
            stops=stop_rows(stops, profiles, verdicts),
            brake_tests=brake_tests,
            summary=summary,
            rejected_rows=rejected,
            disambiguator=disambiguator,
        )
        logger.info(
            "Analysed %s: %d samples, %d stops, BFT=%s, BPT=%s",
            report.trip_id,
            len(samples),
            len(stops),
            report.bft.status.value,
            report.bpt.status.value,
        )
        return AnalysisResult(report=report, summary_md=build_summary(report))


def run_analysis(
    rows: pd.DataFrame | Iterable[Mapping[str, Any]],
    meta: TripMetadata | Mapping[str, Any],
    *,
    stations: StationDirectory | None = None,
    rules: AnalysisRules | None = None,
    units: Mapping[str, str] | None = None,
    disambiguator: str | None = None,
) -> AnalysisResult:
    """Normalize raw rows and analyse them in one call."""

    engine = AnalysisEngine(rules)
    journey = normalize_rows(
        rows,
        stations,
        units=units,
        match_radius_m=engine.rules.station_match_radius_m,
    )
    return engine.analyze(journey, meta, disambiguator=disambiguator)


def _fmt_speed(value: float | None) -> str:
    return "-" if value is None else f"{value:g}"


def _brake_test_line(name: str, test: BrakeTestReport) -> str:
    if test.window is None:
        return f"- **{name}**: {test.status.value}"
    w = test.window
    return (
        f"- **{name}**: {test.status.value} ({w.start_speed:g} -> {w.end_speed:g} km/h, "
        f"drop {w.drop:g} km/h, {w.start_time} to {w.end_time})"
    )


def build_summary(report: Report) -> str:
    """Render a Markdown overview of ``report``."""

    meta = report.meta
    summary = report.summary
    lines = ["# Journey Analysis Summary", ""]
    lines.append(f"Trip: **{report.trip_id}** ({meta.train_no}, {meta.journey_date})")
    lines.append(f"Rake: **{report.rake_type.value}**, MPS **{meta.mps:g} km/h**")
    lines.append(f"Total distance: **{summary.total_distance:.2f} m**")
    lines.append(
        f"Max speed: **{summary.max_speed:.1f} km/h**, "
        f"average **{summary.avg_speed:.1f} km/h**"
    )
    lines.append(f"Overspeed samples: **{summary.overspeed_count}**")
    if report.rejected_rows:
        lines.append(f"Rejected rows: {report.rejected_rows}")

    lines.append("")
    lines.append("## Brake tests")
    lines.append("")
    lines.append(_brake_test_line("BFT", report.bft))
    lines.append(_brake_test_line("BPT", report.bpt))

    lines.append("")
    lines.append("## Speed bands")
    lines.append("")
    lines.append("| Band | Distance (m) |")
    lines.append("| --- | --- |")
    for label, distance in summary.bands.items():
        lines.append(f"| {label} | {distance:.2f} |")

    lines.append("")
    lines.append("## Stops")
    lines.append("")
    if not report.stops:
        lines.append("No stops detected.")
        return "\n".join(lines)

    offsets = list(report.stops[0].speeds)
    lines.append("| # | Location | Time | " + " | ".join(f"{o} m" for o in offsets) + " | Result | Remark |")
    lines.append("| --- " * (len(offsets) + 5) + "|")
    for row in report.stops:
        speeds = " | ".join(_fmt_speed(row.speeds.get(o)) for o in offsets)
        lines.append(
            f"| {row.s_no} | {row.location} | {row.timestamp} | {speeds} | "
            f"{row.result.value} | {row.remark} |"
        )
    return "\n".join(lines)


__all__ = ["AnalysisEngine", "AnalysisResult", "build_summary", "run_analysis"]
