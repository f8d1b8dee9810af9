"""City catalog: dataset, id index, default watch-list and sampler."""

from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from src.config import settings
from src.data.cities import CITY_DATASET, DEFAULT_TRACKED_CITY_IDS
from src.data.models import CityRecord
from src.data.sampling import DeterministicSampler
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class CatalogIntegrityError(ValueError):
    """Catalog data violates an authoring-time invariant."""


def build_city_index(records: Iterable[CityRecord]) -> Mapping[str, CityRecord]:
    """
    Build a read-only id -> record mapping.

    Raises:
        CatalogIntegrityError: If two records share an id
    """
    index = {}
    for record in records:
        if record.id in index:
            raise CatalogIntegrityError(f"Duplicate city id: {record.id}")
        index[record.id] = record
    return MappingProxyType(index)


class CityCatalog:
    """Immutable catalog of monitored cities."""

    def __init__(
        self,
        records: Sequence[CityRecord],
        default_tracked_ids: Sequence[str] = (),
        seed: int = None,
    ):
        """
        Initialize catalog.

        Args:
            records: Ordered city records
            default_tracked_ids: Curated default watch-list
            seed: Sampling seed (default: DEFAULT_SAMPLE_SEED)
        """
        self._records: Tuple[CityRecord, ...] = tuple(records)
        self._index = build_city_index(self._records)
        self._default_tracked_ids: Tuple[str, ...] = tuple(default_tracked_ids)
        self.sampler = DeterministicSampler(self._records, seed=seed)
        logger.debug(
            f"City catalog built with {len(self._records)} cities, "
            f"{len(self._default_tracked_ids)} tracked by default"
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    @property
    def records(self) -> Tuple[CityRecord, ...]:
        return self._records

    @property
    def index(self) -> Mapping[str, CityRecord]:
        return self._index

    @property
    def default_tracked_ids(self) -> Tuple[str, ...]:
        return self._default_tracked_ids

    def lookup(self, city_id: Any) -> Optional[CityRecord]:
        """Get city by id, or None if it is not in the catalog."""
        try:
            return self._index.get(city_id)
        except TypeError:
            # Unhashable ids cannot be present.
            return None

    def sample(self, n) -> List[CityRecord]:
        """Deterministic duplicate-free sample of n cities."""
        return self.sampler.sample(n)

    def resolve(self, city_ids: Iterable[Any]) -> List[CityRecord]:
        """
        Resolve ids to records in order, skipping ids no longer in the catalog.

        Args:
            city_ids: City identifiers, e.g. a stored watch-list

        Returns:
            Records for the ids that resolve
        """
        cities = []
        for city_id in city_ids:
            city = self.lookup(city_id)
            if city is None:
                logger.warning(f"Skipping unknown city id: {city_id!r}")
                continue
            cities.append(city)
        return cities

    def search(self, query: Optional[str], limit: Optional[int] = None) -> List[CityRecord]:
        """
        Search cities by name, country or region.

        Every whitespace-separated keyword must match one of the three fields,
        case-insensitively.

        Args:
            query: Free-text query; empty returns the head of the catalog
            limit: Maximum number of results

        Returns:
            Matching cities in catalog order
        """
        keywords = (query or "").lower().split()
        if not keywords:
            return list(self._records[: settings.search_default_limit if limit is None else limit])

        matches = [
            city
            for city in self._records
            if all(
                keyword in city.name.lower()
                or keyword in city.country.lower()
                or keyword in city.region.lower()
                for keyword in keywords
            )
        ]
        return matches[: settings.search_max_results if limit is None else limit]

    def to_frame(self) -> pd.DataFrame:
        """Catalog as a DataFrame, one row per city in catalog order."""
        columns = ["id", "name", "country", "region", "lat", "lng", "aqi", "dominant_pollutant"]
        return pd.DataFrame(
            [[getattr(city, col) for col in columns] for city in self._records],
            columns=columns,
        )


# Built once at import; read-only afterwards.
catalog = CityCatalog(CITY_DATASET, DEFAULT_TRACKED_CITY_IDS)


def get_all_cities() -> Tuple[CityRecord, ...]:
    """All catalog cities in catalog order."""
    return catalog.records


def get_city_by_id(city_id: Any) -> Optional[CityRecord]:
    """Get city by id, or None if absent."""
    return catalog.lookup(city_id)


def get_default_tracked_city_ids() -> Tuple[str, ...]:
    """Default watch-list ids."""
    return catalog.default_tracked_ids


def get_random_city_sample(n) -> List[CityRecord]:
    """Deterministic sample of n distinct cities."""
    return catalog.sample(n)


def search_cities(query: Optional[str], limit: Optional[int] = None) -> List[CityRecord]:
    """Search the catalog by name, country or region."""
    return catalog.search(query, limit=limit)


def resolve_city_ids(city_ids: Iterable[Any]) -> List[CityRecord]:
    """Resolve ids to cities, skipping unknown ones."""
    return catalog.resolve(city_ids)
