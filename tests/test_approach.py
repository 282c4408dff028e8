from __future__ import annotations

import pytest

from rtis_audit.analysis import APPROACH_OFFSETS, profile_approach

from tests.helpers import build_samples


def test_sparse_approach_records_known_offsets_only() -> None:
    samples = build_samples([60, 50, 40, 0, 0], [0, 500, 1000, 2000, 2500])

    profile = profile_approach(samples, 3)

    assert profile[2000] == 60
    assert profile[1000] == 40
    assert profile[500] is None
    assert profile[100] is None
    assert profile[0] == 0
    assert list(profile) == list(APPROACH_OFFSETS)


def test_last_sample_within_tolerance_wins_over_closest() -> None:
    # Both 1985 and 2001 lie within 20 m of the 1000 m mark before 3000 m;
    # the backward scan reaches 1985 last, so its speed is kept.
    samples = build_samples([70, 65, 20, 0], [1985, 2001, 2900, 3000])

    profile = profile_approach(samples, 3)

    assert profile[1000] == 70
    assert profile[100] == 20


def test_scan_stops_once_beyond_lookback() -> None:
    # Index 0 sits 2000 m before the stop again, but index 1 (2700 m away)
    # ends the scan first.
    samples = build_samples([99, 10, 50, 0], [700, 0, 700, 2700])

    profile = profile_approach(samples, 3)

    assert profile[2000] == 50


def test_tolerance_band_is_exclusive() -> None:
    # The second sample sits exactly 1020 m before the stop, on the edge of the
    # +-20 m band around the 1000 m mark.
    samples = build_samples([45, 44, 0], [0, 980, 2000])

    profile = profile_approach(samples, 2)

    assert profile[2000] == 45
    assert profile[1000] is None


def test_only_samples_at_or_before_stop_are_used() -> None:
    samples = build_samples([30, 0, 80], [900, 1000, 1100])

    profile = profile_approach(samples, 1)

    assert profile[100] == 30
    assert all(profile[o] is None for o in APPROACH_OFFSETS if o not in (100, 0))


@pytest.mark.parametrize("speeds", [[0], [10, 0], [25, 12, 3, 0]])
def test_offset_zero_is_always_zero(speeds: list[float]) -> None:
    samples = build_samples(speeds, [5.0 * i for i in range(len(speeds))])

    assert profile_approach(samples, len(samples) - 1)[0] == 0


def test_out_of_range_stop_index_raises() -> None:
    with pytest.raises(IndexError):
        profile_approach(build_samples([1, 0]), 5)
