"""Tests for AQI bands."""

import math

import pytest

from src.utils.aqi import AQI_LEVELS, get_aqi_level


class TestAqiLevels:
    """Tests for AQI level lookup."""

    @pytest.mark.parametrize(
        "value, label",
        [
            (0, "Good"),
            (50, "Good"),
            (51, "Moderate"),
            (100, "Moderate"),
            (150.5, "Unhealthy"),
            (300, "Very Unhealthy"),
            (301, "Hazardous"),
            (999, "Hazardous"),
        ],
    )
    def test_thresholds(self, value, label):
        """Test thresholds are inclusive upper bounds."""
        assert get_aqi_level(value).label == label

    @pytest.mark.parametrize("value", [None, "120", math.nan, math.inf, True])
    def test_non_finite_falls_back(self, value):
        """Test missing or non-numeric values map to the first level."""
        assert get_aqi_level(value) is AQI_LEVELS[0]

    def test_levels_are_ordered(self):
        """Test thresholds increase."""
        thresholds = [level.threshold for level in AQI_LEVELS]
        assert thresholds == sorted(thresholds)
