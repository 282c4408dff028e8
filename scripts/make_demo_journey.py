"""Generate a demo RTIS journey log and station directory."""
from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

START_TIMESTAMP = "2024-01-01T08:00:00"
TIME_FORMAT = "%d-%m-%Y %H:%M:%S"

SAMPLES_DIR = Path(__file__).resolve().parents[1] / "data" / "samples"

rng = np.random.default_rng(seed=42)

# (duration in seconds, speed at the end of the phase in km/h); speed ramps linearly.
PHASES = [
    (60, 0.0),     # dwell at origin
    (40, 20.0),    # start
    (20, 20.0),
    (10, 12.0),    # brake feel test
    (90, 65.0),
    (30, 65.0),
    (20, 35.0),    # brake power test
    (120, 100.0),
    (900, 100.0),  # cruise
    (240, 30.0),   # graduated braking for the halt
    (60, 0.0),
    (120, 0.0),    # halt
    (150, 90.0),
    (600, 90.0),
    (60, 0.0),     # late braking for the terminal halt
    (60, 0.0),
]


def generate_speed_profile() -> np.ndarray:
    """Stitch linear ramps between phase end speeds into a 1 Hz profile."""
    pieces = []
    current = 0.0
    for duration, target in PHASES:
        ramp = np.linspace(current, target, duration + 1)[1:]
        pieces.append(ramp)
        current = target
    speed = np.concatenate(pieces)
    moving = speed > 0
    speed[moving] = np.clip(speed[moving] + rng.normal(0, 0.4, size=moving.sum()), 0.5, None)
    return np.round(speed, 1)


def generate_stations(distance_m: np.ndarray, speed: np.ndarray) -> pd.DataFrame:
    """Place a signal at every halt plus a few intermediate ones."""
    halts = np.flatnonzero((speed == 0) & (np.roll(speed, 1) != 0))
    names = ["ORIGIN", "MIDWAY JN", "TERMINUS"]
    rows = [
        {"SIGNAL NAME": name, "CUMMULATIVE DISTANT(IN Meter)": round(float(distance_m[i]), 1)}
        for name, i in zip(names, [0, *halts[1:]])
    ]
    for n, km in enumerate((5, 15, 25), start=1):
        rows.append({"SIGNAL NAME": f"AUTO SIG {n}", "CUMMULATIVE DISTANT(IN Meter)": km * 1000.0})
    return pd.DataFrame(rows)


def write_demo_data() -> None:
    speed = generate_speed_profile()
    n_samples = speed.size
    index = pd.date_range(start=START_TIMESTAMP, periods=n_samples, freq="s")
    distance_m = np.round(np.cumsum(speed / 3.6), 2)

    df = pd.DataFrame(
        {
            "Gps Time": index.strftime(TIME_FORMAT),
            "Speed": speed,
            "Distance": distance_m,
            "Location": "",
        }
    )
    stations = generate_stations(distance_m, speed)

    SAMPLES_DIR.mkdir(parents=True, exist_ok=True)
    df.to_csv(SAMPLES_DIR / "rtis_demo.csv", index=False)
    stations.to_csv(SAMPLES_DIR / "stations_demo.csv", index=False)

    print(f"Generated {n_samples} samples ({n_samples / 60.0:.1f} min @ 1 Hz)")
    print(f"Distance ~{distance_m[-1] / 1000.0:.1f} km, max {speed.max():.1f} km/h")
    print("Wrote:")
    print(f"  {SAMPLES_DIR / 'rtis_demo.csv'}")
    print(f"  {SAMPLES_DIR / 'stations_demo.csv'}")


def main() -> None:
    write_demo_data()


if __name__ == "__main__":
    main()
