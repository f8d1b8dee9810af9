"""Tests for the city catalog dataset, index and watch-list."""

import math

import pytest

from src.data.catalog import (
    CatalogIntegrityError,
    CityCatalog,
    build_city_index,
    catalog,
    get_all_cities,
    get_city_by_id,
    get_default_tracked_city_ids,
    resolve_city_ids,
    search_cities,
)
from src.data.cities import CITY_DATASET, DEFAULT_TRACKED_CITY_IDS
from src.data.models import CityRecord


class TestCityDataset:
    """Tests for the bundled dataset."""

    def test_dataset_size_and_unique_ids(self):
        """Test the catalog holds at least 200 unique cities."""
        cities = get_all_cities()
        assert len(cities) >= 200

        ids = [city.id for city in cities]
        assert len(set(ids)) == len(ids)

    def test_records_have_coordinates(self):
        """Test every record has finite numbers and non-empty text."""
        for city in get_all_cities():
            assert math.isfinite(city.lat)
            assert math.isfinite(city.lng)
            assert math.isfinite(city.aqi)
            assert isinstance(city.name, str) and city.name
            assert isinstance(city.country, str) and city.country

    def test_all_cities_is_dataset(self):
        """Test the public read returns the dataset in order."""
        assert get_all_cities() == CITY_DATASET
        assert isinstance(get_all_cities(), tuple)


class TestCityIndex:
    """Tests for id lookup."""

    def test_lookup_round_trip(self):
        """Test every record resolves to itself."""
        for city in get_all_cities():
            assert get_city_by_id(city.id) == city
            assert get_city_by_id(city.id) is city

    @pytest.mark.parametrize("city_id", ["atlantis", "", None, 42, ["delhi"]])
    def test_lookup_absent(self, city_id):
        """Test unknown ids return None instead of raising."""
        assert get_city_by_id(city_id) is None

    def test_index_is_read_only(self):
        """Test the index cannot be mutated by consumers."""
        with pytest.raises(TypeError):
            catalog.index["atlantis"] = catalog.records[0]

    def test_duplicate_ids_rejected(self, small_records):
        """Test building an index with duplicate ids fails."""
        duplicate = CityRecord("alpha", "Other", "Aland", "Europe", 1.0, 1.0, 1)
        with pytest.raises(CatalogIntegrityError):
            build_city_index(small_records + [duplicate])


class TestDefaultTrackedSelection:
    """Tests for the default watch-list."""

    def test_default_ids_resolve(self):
        """Test every default tracked id exists in the catalog."""
        ids = get_default_tracked_city_ids()
        assert len(ids) > 0
        for city_id in ids:
            assert get_city_by_id(city_id) is not None

    def test_default_ids_order(self):
        """Test the watch-list order is preserved."""
        assert get_default_tracked_city_ids() == DEFAULT_TRACKED_CITY_IDS

    def test_resolve_skips_stale_ids(self):
        """Test stale ids are skipped and order is kept."""
        cities = resolve_city_ids(["mumbai", "atlantis", "delhi"])
        assert [city.id for city in cities] == ["mumbai", "delhi"]


class TestSearch:
    """Tests for catalog search."""

    def test_empty_query_returns_head(self):
        """Test an empty query returns the first catalog entries."""
        results = search_cities("")
        assert results == list(get_all_cities()[:25])

    def test_keywords_match_name_country_or_region(self):
        """Test every keyword must match."""
        results = search_cities("india south")
        assert results
        assert all(city.country == "India" for city in results)

        assert [city.id for city in search_cities("San Jose")] == ["san-jose", "san-jose-cr"]
        assert [city.id for city in search_cities("san jose costa")] == ["san-jose-cr"]

    def test_name_and_country_queries(self):
        """Test multi-word city names and country queries."""
        results = search_cities("new delhi")
        assert results
        assert "delhi" in results[0].name.lower()
        assert results[0].id == "delhi"

        country_results = search_cities("canada")
        assert any(city.country == "Canada" for city in country_results)

    def test_case_insensitive(self):
        """Test matching ignores case."""
        assert search_cities("DELHI")[0].id == "delhi"

    def test_limit(self):
        """Test results are capped."""
        assert len(search_cities("europe")) == 50
        assert len(search_cities("europe", limit=3)) == 3

    def test_no_match(self):
        """Test unmatched queries return an empty list."""
        assert search_cities("atlantis") == []


class TestCityCatalog:
    """Tests for a custom catalog instance."""

    def test_custom_catalog(self, small_catalog, small_records):
        """Test a catalog built from explicit records."""
        assert len(small_catalog) == 5
        assert list(small_catalog) == small_records
        assert small_catalog.lookup("bravo") is small_records[1]
        assert small_catalog.default_tracked_ids == ("alpha", "delta")

    def test_records_are_copied(self, small_records):
        """Test mutating the source list does not change the catalog."""
        custom = CityCatalog(small_records)
        small_records.pop()
        assert len(custom) == 5

    def test_to_frame(self, small_catalog):
        """Test the DataFrame view."""
        df = small_catalog.to_frame()

        assert len(df) == 5
        assert list(df["id"]) == ["alpha", "bravo", "charlie", "delta", "echo"]
        assert "dominant_pollutant" in df.columns
