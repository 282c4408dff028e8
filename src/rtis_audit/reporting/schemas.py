"""Typed models for journey compliance report payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from rtis_audit.analysis.brake_test import BrakeTestStatus
from rtis_audit.analysis.braking import BrakingVerdict
from rtis_audit.analysis.rules import RakeType


class TripMetadata(BaseModel):
    """Caller supplied trip details, kept verbatim in the report."""

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    train_no: str = Field(alias="trainNo", min_length=1)
    journey_date: str = Field(alias="journeyDate", min_length=1)
    rake_type: str = Field(alias="rakeType", description="Free-form rake label, e.g. 'GOODS'")
    mps: float = Field(gt=0, description="Maximum permitted speed in km/h")
    train_load: str | None = Field(default=None, alias="trainLoad")
    lp_id: str | None = Field(default=None, alias="lpId", description="Loco pilot")
    alp_id: str | None = Field(default=None, alias="alpId", description="Assistant loco pilot")
    cli_name: str | None = Field(default=None, alias="cliName", description="Analysing inspector")


class StopRow(BaseModel):
    """One detected stop with its approach profile and braking verdict."""

    model_config = ConfigDict(frozen=True)

    s_no: int
    index: int
    location: str
    timestamp: str
    distance: float
    speeds: dict[int, float | None]
    result: BrakingVerdict
    remark: str


class BrakeTestWindowModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_index: int
    end_index: int
    start_time: str
    end_time: str
    start_speed: float
    end_speed: float
    drop: float


class BrakeTestReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: BrakeTestStatus
    window: BrakeTestWindowModel | None = None


class SpeedSummary(BaseModel):
    """Journey statistics; distances in metres, speeds in km/h."""

    model_config = ConfigDict(frozen=True)

    max_speed: float
    avg_speed: float
    total_distance: float
    overspeed_count: int
    bands: dict[str, float]


class Report(BaseModel):
    """Full journey compliance report."""

    model_config = ConfigDict(frozen=True)

    trip_id: str
    meta: TripMetadata
    rake_type: RakeType
    summary: SpeedSummary
    bft: BrakeTestReport
    bpt: BrakeTestReport
    stops: tuple[StopRow, ...]
    sample_count: int
    rejected_rows: int = 0


__all__ = [
    "TripMetadata",
    "StopRow",
    "BrakeTestWindowModel",
    "BrakeTestReport",
    "SpeedSummary",
    "Report",
]
