"""Pytest configuration and fixtures."""

import pytest

from src.data.catalog import CityCatalog
from src.data.models import CityRecord
from src.data.quality import CatalogQualityChecker
from src.utils.cache import MemoryCache


@pytest.fixture
def sample_city():
    """Sample city for testing."""
    return CityRecord(
        id="test-city",
        name="Test City",
        country="Testland",
        region="Europe",
        lat=40.7128,
        lng=-74.0060,
        aqi=42,
    )


@pytest.fixture
def small_records():
    """A handful of valid records."""
    return [
        CityRecord("alpha", "Alpha", "Aland", "Europe", 10.0, 20.0, 30),
        CityRecord("bravo", "Bravo", "Borduria", "Europe", -10.0, 25.0, 75, "NO2"),
        CityRecord("charlie", "Charlie", "Costa Brava", "Latin America", 5.5, -60.0, 120),
        CityRecord("delta", "Delta", "Aland", "Europe", 60.0, 19.9, 12, "O3"),
        CityRecord("echo", "Echo", "Eswatini", "Africa", -26.3, 31.1, 250),
    ]


@pytest.fixture
def small_catalog(small_records):
    """Catalog built from the small record set."""
    return CityCatalog(small_records, default_tracked_ids=["alpha", "delta"], seed=7)


@pytest.fixture
def fresh_cache():
    """Isolated permutation cache."""
    return MemoryCache(maxsize=4)


@pytest.fixture
def quality_checker():
    """Catalog quality checker instance."""
    return CatalogQualityChecker(min_catalog_size=200)
