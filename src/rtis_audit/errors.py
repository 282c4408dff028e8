"""Typed failures raised by the journey analysis core."""

from __future__ import annotations


class AnalysisError(ValueError):
    """Base class for failures the caller is expected to catch and report."""


class EmptySequenceError(AnalysisError):
    """Raised when no valid samples remain after normalization."""

    def __init__(self, rejected_rows: int = 0) -> None:
        self.rejected_rows = rejected_rows
        message = "Journey log contains no valid samples"
        if rejected_rows:
            message += f" ({rejected_rows} rows rejected for missing time)"
        super().__init__(message)


class NonNumericFieldError(AnalysisError):
    """Raised when a numeric column holds values but none of them are numbers."""

    def __init__(self, field: str, examples: list[str] | None = None) -> None:
        self.field = field
        self.examples = list(examples or [])
        message = f"Column '{field}' contains no numeric values"
        if self.examples:
            message += ": " + ", ".join(repr(v) for v in self.examples[:3])
        super().__init__(message)


class RuleConfigError(AnalysisError):
    """Raised when a rule table cannot be interpreted."""


class UnitConversionError(AnalysisError):
    """Raised when a declared source unit cannot be converted."""


__all__ = [
    "AnalysisError",
    "EmptySequenceError",
    "NonNumericFieldError",
    "RuleConfigError",
    "UnitConversionError",
]
