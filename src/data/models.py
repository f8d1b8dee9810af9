"""Data models for monitored cities."""

import math
import numbers
from dataclasses import asdict, dataclass
from typing import Any, Dict

from src.utils.aqi import AqiLevel, get_aqi_level


@dataclass(frozen=True)
class CityRecord:
    """Static attributes of one monitored city."""

    id: str
    name: str
    country: str
    region: str
    lat: float
    lng: float
    aqi: float
    dominant_pollutant: str = "PM2.5"

    def __post_init__(self):
        """Validate city data."""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Invalid city id: {self.id!r}")
        for field_name in ("name", "country", "region", "dominant_pollutant"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"City {self.id}: {field_name} must be non-empty text")
        for field_name in ("lat", "lng", "aqi"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"City {self.id}: {field_name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"City {self.id}: {field_name} must be finite, got {value!r}")
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Invalid longitude: {self.lng}")
        if self.aqi < 0:
            raise ValueError(f"Invalid AQI: {self.aqi}")

    @property
    def aqi_level(self) -> AqiLevel:
        """AQI band of the catalog value."""
        return get_aqi_level(self.aqi)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict view for JSON consumers."""
        payload = asdict(self)
        payload["aqi_label"] = self.aqi_level.label
        return payload
