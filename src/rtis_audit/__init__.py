"""Compliance analysis for RTIS locomotive journey logs."""

from .analysis import AnalysisEngine, AnalysisResult, load_rules, run_analysis
from .errors import AnalysisError, EmptySequenceError, NonNumericFieldError, RuleConfigError

__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "AnalysisError",
    "EmptySequenceError",
    "NonNumericFieldError",
    "RuleConfigError",
    "load_rules",
    "run_analysis",
]
