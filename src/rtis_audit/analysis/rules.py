"""Rule configuration helpers for the journey analysis engine."""

from __future__ import annotations

import json
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from rtis_audit.errors import RuleConfigError

from .approach import APPROACH_OFFSETS


class RakeType(str, Enum):
    """Rolling stock classification selecting the applicable rule set."""

    GOODS = "GOODS"
    COACHING = "COACHING"
    MEMU = "MEMU"
    OTHER = "OTHER"

    @classmethod
    def from_label(cls, label: "str | RakeType | None") -> "RakeType":
        """Map a free-form rake label (``"BOXN GOODS"``, ``"memu"``...) to a type."""

        if isinstance(label, RakeType):
            return label
        text = str(label or "").strip().upper()
        for candidate in (cls.GOODS, cls.COACHING, cls.MEMU):
            if candidate.value in text:
                return candidate
        return cls.OTHER


@dataclass(frozen=True)
class BrakeTestRule:
    """Speed window and required drop for a brake feel/power test.

    Exactly one of ``drop_kmh`` (absolute) or ``drop_fraction`` (share of the
    window start speed) is set.
    """

    min_kmh: float
    max_kmh: float
    drop_kmh: float | None = None
    drop_fraction: float | None = None

    def __post_init__(self) -> None:
        if (self.drop_kmh is None) == (self.drop_fraction is None):
            raise RuleConfigError("Brake test rule needs exactly one of drop_kmh or drop_fraction")
        if self.min_kmh > self.max_kmh:
            raise RuleConfigError(
                f"Brake test range is inverted: {self.min_kmh} > {self.max_kmh}"
            )

    def in_range(self, speed: float) -> bool:
        return self.min_kmh <= speed <= self.max_kmh

    def required_drop(self, start_speed: float) -> float:
        if self.drop_kmh is not None:
            return self.drop_kmh
        return start_speed * float(self.drop_fraction)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "BrakeTestRule":
        try:
            return cls(
                min_kmh=float(config["min_kmh"]),
                max_kmh=float(config["max_kmh"]),
                drop_kmh=_optional_float(config.get("drop_kmh")),
                drop_fraction=_optional_float(config.get("drop_fraction")),
            )
        except RuleConfigError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise RuleConfigError(f"Invalid brake test rule {dict(config)!r}: {exc}") from exc


@dataclass(frozen=True)
class RakeRules:
    """Braking limits and brake test rules for one rake type."""

    braking_limits: tuple[tuple[int, float], ...]
    bft: BrakeTestRule
    bpt: BrakeTestRule


@dataclass(frozen=True)
class AnalysisRules:
    """Container for analysis rules loaded from JSON/YAML configuration."""

    rakes: Mapping[RakeType, RakeRules]
    approach_lookback_m: float = 2500.0
    brake_test_window_s: float = 90.0
    brake_test_window_samples: int = 90
    station_match_radius_m: float = 50.0

    def for_rake(self, rake_type: RakeType | str) -> RakeRules:
        rake = RakeType.from_label(rake_type)
        if rake in self.rakes:
            return self.rakes[rake]
        return self.rakes[RakeType.OTHER]

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "AnalysisRules":
        patch = dict(config)
        if isinstance(patch.get("rake_types"), Mapping):
            patch["rake_types"] = {
                str(label).upper(): value for label, value in patch["rake_types"].items()
            }
        merged = _merge_dict(deepcopy(DEFAULT_RULES), patch)

        rakes: dict[RakeType, RakeRules] = {}
        for label, rake_cfg in (merged.get("rake_types") or {}).items():
            try:
                rake = RakeType(str(label).upper())
            except ValueError as exc:
                raise RuleConfigError(f"Unknown rake type '{label}'") from exc
            rakes[rake] = RakeRules(
                braking_limits=_parse_limits(rake_cfg.get("braking") or {}),
                bft=BrakeTestRule.from_mapping(rake_cfg.get("bft") or {}),
                bpt=BrakeTestRule.from_mapping(rake_cfg.get("bpt") or {}),
            )
        if RakeType.OTHER not in rakes:
            raise RuleConfigError("Rule table must define the OTHER rake type")

        window = merged.get("brake_test_window") or {}
        return cls(
            rakes=rakes,
            approach_lookback_m=float(merged.get("approach_lookback_m", 2500.0)),
            brake_test_window_s=float(window.get("seconds", 90.0)),
            brake_test_window_samples=int(window.get("samples", 90)),
            station_match_radius_m=float(merged.get("station_match_radius_m", 50.0)),
        )


_GOODS_BRAKE_TESTS = {
    "bft": {"min_kmh": 12, "max_kmh": 24, "drop_kmh": 5},
    "bpt": {"min_kmh": 35, "max_kmh": 55, "drop_fraction": 0.4},
}
_PASSENGER_BRAKE_TESTS = {
    "bft": {"min_kmh": 12, "max_kmh": 23, "drop_kmh": 5},
    "bpt": {"min_kmh": 55, "max_kmh": 70, "drop_fraction": 0.4},
}
_PASSENGER_BRAKING = {2000: 100, 1000: 60, 500: 50, 100: 30, 50: 15}

DEFAULT_RULES: dict[str, Any] = {
    "approach_lookback_m": 2500,
    "brake_test_window": {"seconds": 90, "samples": 90},
    "station_match_radius_m": 50,
    "rake_types": {
        "GOODS": {
            "braking": {2000: 55, 1000: 40, 500: 25, 100: 15, 50: 10},
            **_GOODS_BRAKE_TESTS,
        },
        "COACHING": {"braking": dict(_PASSENGER_BRAKING), **_PASSENGER_BRAKE_TESTS},
        "MEMU": {"braking": dict(_PASSENGER_BRAKING), **_PASSENGER_BRAKE_TESTS},
        # Unrecognised rakes are braked like passenger stock but brake tested like goods.
        "OTHER": {"braking": dict(_PASSENGER_BRAKING), **_GOODS_BRAKE_TESTS},
    },
}


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)


def _parse_limits(config: Mapping[Any, Any]) -> tuple[tuple[int, float], ...]:
    limits: list[tuple[int, float]] = []
    for key, value in config.items():
        try:
            offset = int(key)
            limit = float(value)
        except (TypeError, ValueError) as exc:
            raise RuleConfigError(f"Invalid braking limit {key!r}: {value!r}") from exc
        if offset not in APPROACH_OFFSETS:
            raise RuleConfigError(
                f"Braking limit offset {offset} is not one of {list(APPROACH_OFFSETS)}"
            )
        limits.append((offset, limit))
    if not limits:
        raise RuleConfigError("Braking limits must not be empty")
    return tuple(sorted(limits, reverse=True))


def _merge_dict(base: dict[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in patch.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, Mapping):
            # Per-offset limits and drop settings are replaced, not merged.
            if key in {"braking", "bft", "bpt"}:
                base[key] = dict(value)
            else:
                _merge_dict(base[key], value)
        else:
            base[key] = dict(value) if isinstance(value, Mapping) else value
    return base


def _load_mapping_from_file(path: Path) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")

    # JSON is a subset of YAML, so try JSON first for clearer error messages.
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise RuleConfigError(f"Cannot parse rule file {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise RuleConfigError("Rule configuration must evaluate to a mapping")
    return data


@lru_cache(maxsize=1)
def default_rules() -> AnalysisRules:
    """Return the built-in rule table."""

    return AnalysisRules.from_mapping({})


def load_rules(config: str | Path | Mapping[str, Any] | None = None) -> AnalysisRules:
    """Load :class:`AnalysisRules` from a mapping or configuration file.

    Sections missing from ``config`` keep their built-in defaults.
    """

    if config is None:
        mapping: Mapping[str, Any] = {}
    elif isinstance(config, Mapping):
        mapping = config
    else:
        mapping = _load_mapping_from_file(Path(config))

    return AnalysisRules.from_mapping(mapping)


__all__ = [
    "DEFAULT_RULES",
    "AnalysisRules",
    "BrakeTestRule",
    "RakeRules",
    "RakeType",
    "default_rules",
    "load_rules",
]
