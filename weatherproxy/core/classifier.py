"""Map a Celsius temperature onto a coarse "feel" label."""
from __future__ import annotations

from typing import Tuple

from weatherproxy.core.abstractions import to_float32

# Half-open [lower, upper) intervals, checked in order.
TEMPERATURE_FEELS: Tuple[Tuple[float, float, str], ...] = (
    (-4.0, 0.0, "freezing"),
    (0.0, 4.0, "very cold"),
    (4.0, 8.0, "cold"),
    (8.0, 12.0, "not so cold"),
    (12.0, 16.0, "mild"),
    (16.0, 20.0, "less mild"),
    (20.0, 24.0, "getting hot"),
)

# Also returned below -4 C. Known gap: a -10 C reading reads as "HOT".
DEFAULT_FEEL = "HOT"


def classify_temperature(celsius: float) -> str:
    try:
        value = to_float32(celsius)
    except OverflowError:
        return DEFAULT_FEEL
    for lower, upper, label in TEMPERATURE_FEELS:
        if lower <= value < upper:
            return label
    return DEFAULT_FEEL


__all__ = ["TEMPERATURE_FEELS", "DEFAULT_FEEL", "classify_temperature"]
