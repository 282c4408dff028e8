"""Analysis endpoint: raw journey rows in, compliance report out."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from rtis_audit.analysis import run_analysis
from rtis_audit.data import StationDirectory, StationRecord
from rtis_audit.errors import AnalysisError
from rtis_audit.reporting.schemas import Report, TripMetadata

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


class StationIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    signal_name: str = Field(alias="signalName", min_length=1)
    distance: float


class AnalyzeRequest(BaseModel):
    """Body of ``POST /api/analyze``."""

    meta: TripMetadata
    rows: list[dict[str, Any]]
    stations: list[StationIn] = Field(default_factory=list)
    units: dict[str, str] | None = None
    disambiguator: str | None = None


class AnalyzeResponse(BaseModel):
    report: Report
    summary_md: str


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(request: AnalyzeRequest) -> AnalyzeResponse:
    """Analyse one journey log and return the report with a Markdown summary."""

    directory = StationDirectory(
        StationRecord(signal_name=s.signal_name, distance=s.distance) for s in request.stations
    )
    try:
        result = run_analysis(
            request.rows,
            request.meta,
            stations=directory,
            units=request.units,
            disambiguator=request.disambiguator,
        )
    except AnalysisError as exc:
        logger.warning("Analysis rejected for train %s: %s", request.meta.train_no, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return AnalyzeResponse(report=result.report, summary_md=result.summary_md)


__all__ = ["router", "AnalyzeRequest", "AnalyzeResponse"]
