"""Analysis stages deriving stop, braking and brake test findings from a journey."""

from .approach import APPROACH_OFFSETS, ApproachProfile, profile_approach
from .brake_test import (
    BrakeTestDetector,
    BrakeTestOutcome,
    BrakeTestResult,
    BrakeTestStatus,
    BrakeTestWindow,
    detect_brake_tests,
)
from .braking import BrakingVerdict, classify_braking
from .rules import AnalysisRules, BrakeTestRule, RakeRules, RakeType, default_rules, load_rules
from .speed_bands import BAND_LABELS, SpeedBandSummary, aggregate_speed_bands
from .stops import StopEpisode, segment_stops
from .engine import AnalysisEngine, AnalysisResult, build_summary, run_analysis

__all__ = [
    "APPROACH_OFFSETS",
    "ApproachProfile",
    "profile_approach",
    "BrakeTestDetector",
    "BrakeTestOutcome",
    "BrakeTestResult",
    "BrakeTestStatus",
    "BrakeTestWindow",
    "detect_brake_tests",
    "BrakingVerdict",
    "classify_braking",
    "AnalysisRules",
    "BrakeTestRule",
    "RakeRules",
    "RakeType",
    "default_rules",
    "load_rules",
    "BAND_LABELS",
    "SpeedBandSummary",
    "aggregate_speed_bands",
    "StopEpisode",
    "segment_stops",
    "AnalysisEngine",
    "AnalysisResult",
    "build_summary",
    "run_analysis",
]
