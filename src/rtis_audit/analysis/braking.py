"""Classification of approach profiles into smooth or late braking."""

from __future__ import annotations

from enum import Enum

from .approach import ApproachProfile
from .rules import AnalysisRules, RakeType, default_rules


class BrakingVerdict(str, Enum):
    SMOOTH = "Smooth Braking"
    LATE = "Late Braking"

    @property
    def remark(self) -> str:
        return "OK" if self is BrakingVerdict.SMOOTH else "CHECK"


def classify_braking(
    rake_type: RakeType | str,
    profile: ApproachProfile,
    rules: AnalysisRules | None = None,
) -> BrakingVerdict:
    """Return SMOOTH only when every limited offset is known and within its limit."""

    limits = (rules or default_rules()).for_rake(rake_type).braking_limits
    for offset, limit in limits:
        speed = profile[offset]
        if speed is None or speed > limit:
            return BrakingVerdict.LATE
    return BrakingVerdict.SMOOTH


__all__ = ["BrakingVerdict", "classify_braking"]
