"""Report models and assembly."""

from .schemas import (
    BrakeTestReport,
    BrakeTestWindowModel,
    Report,
    SpeedSummary,
    StopRow,
    TripMetadata,
)
from .assemble import assemble_report, journey_digest, make_trip_id, stop_rows

__all__ = [
    "BrakeTestReport",
    "BrakeTestWindowModel",
    "Report",
    "SpeedSummary",
    "StopRow",
    "TripMetadata",
    "assemble_report",
    "journey_digest",
    "make_trip_id",
    "stop_rows",
]
