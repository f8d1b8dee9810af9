"""Air-quality index bands used to label catalog values."""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class AqiLevel:
    """One AQI band, inclusive upper threshold."""

    threshold: float
    label: str
    color: str


AQI_LEVELS: Tuple[AqiLevel, ...] = (
    AqiLevel(threshold=50, label="Good", color="aqi-good"),
    AqiLevel(threshold=100, label="Moderate", color="aqi-moderate"),
    AqiLevel(threshold=200, label="Unhealthy", color="aqi-unhealthy"),
    AqiLevel(threshold=300, label="Very Unhealthy", color="aqi-very-unhealthy"),
    AqiLevel(threshold=math.inf, label="Hazardous", color="aqi-hazardous"),
)


def get_aqi_level(value: Any) -> AqiLevel:
    """
    Get the AQI band for a value.

    Args:
        value: AQI reading

    Returns:
        First level whose threshold is not below the value. Missing or
        non-finite readings fall back to the first level.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return AQI_LEVELS[0]
    if not math.isfinite(value):
        return AQI_LEVELS[0]

    for level in AQI_LEVELS:
        if value <= level.threshold:
            return level
    return AQI_LEVELS[-1]
