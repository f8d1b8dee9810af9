"""Data quality checks for the city catalog."""

from typing import Any, Dict, List

import numpy as np
import pandas as pd
from src.config import settings
from src.data.catalog import CityCatalog
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

TEXT_COLUMNS = ["id", "name", "country", "region"]
NUMERIC_RANGES = {
    "lat": (-90, 90),
    "lng": (-180, 180),
    "aqi": (0, np.inf),
}


class CatalogQualityChecker:
    """Check catalog integrity and generate reports."""

    def __init__(self, min_catalog_size: int = None):
        """
        Initialize catalog quality checker.

        Args:
            min_catalog_size: Minimum number of cities the catalog must hold
        """
        self.min_catalog_size = min_catalog_size or settings.min_catalog_size

    def check_duplicate_ids(self, df: pd.DataFrame) -> List[str]:
        """
        Find ids used by more than one city.

        Returns:
            Sorted list of duplicated ids
        """
        if "id" not in df.columns:
            return []
        duplicated = df.loc[df["id"].duplicated(keep=False), "id"]
        return sorted(duplicated.unique().tolist())

    def check_value_ranges(
        self, df: pd.DataFrame, column: str, min_val: float, max_val: float
    ) -> int:
        """
        Check that values are finite and within expected range.

        Returns:
            Number of violations
        """
        if column not in df.columns:
            return 0

        values = pd.to_numeric(df[column], errors="coerce")
        invalid = ~np.isfinite(values) | (values < min_val) | (values > max_val)
        return int(invalid.sum())

    def check_empty_text(self, df: pd.DataFrame, column: str) -> int:
        """
        Count blank or missing text values.

        Returns:
            Number of violations
        """
        if column not in df.columns:
            return 0
        text = df[column].fillna("").astype(str).str.strip()
        return int((text == "").sum())

    def check_unresolved_ids(self, catalog: CityCatalog, city_ids) -> List[str]:
        """
        Find ids that do not resolve in the catalog index.

        Returns:
            Unresolved ids in input order
        """
        return [city_id for city_id in city_ids if catalog.lookup(city_id) is None]

    def check_duplicate_names(self, df: pd.DataFrame) -> List[str]:
        """
        Find cities listed twice under the same name and country.

        Returns:
            "name, country" labels of the duplicates
        """
        if df.empty:
            return []
        duplicated = df[df.duplicated(subset=["name", "country"], keep="first")]
        return [f"{row.name}, {row.country}" for row in duplicated.itertuples(index=False)]

    def validate_catalog(self, catalog: CityCatalog) -> Dict[str, Any]:
        """
        Comprehensive validation of a city catalog.

        Returns:
            Validation report dictionary
        """
        report = {
            "valid": True,
            "checks": {},
            "warnings": [],
            "errors": [],
        }

        df = catalog.to_frame()
        report["checks"]["size"] = len(df)

        if len(df) < self.min_catalog_size:
            report["errors"].append(
                f"Catalog has {len(df)} cities (minimum: {self.min_catalog_size})"
            )

        duplicate_ids = self.check_duplicate_ids(df)
        report["checks"]["duplicate_ids"] = duplicate_ids
        if duplicate_ids:
            report["errors"].append(f"Duplicate city ids: {', '.join(duplicate_ids)}")

        range_violations = {}
        for column, (min_val, max_val) in NUMERIC_RANGES.items():
            violations = self.check_value_ranges(df, column, min_val, max_val)
            range_violations[column] = violations
            if violations > 0:
                report["errors"].append(
                    f"Column {column} has {violations} values outside range [{min_val}, {max_val}]"
                )
        report["checks"]["range_violations"] = range_violations

        for column in TEXT_COLUMNS:
            empty = self.check_empty_text(df, column)
            if empty > 0:
                report["errors"].append(f"Column {column} has {empty} empty values")

        unresolved = self.check_unresolved_ids(catalog, catalog.default_tracked_ids)
        report["checks"]["unresolved_tracked_ids"] = unresolved
        if unresolved:
            report["errors"].append(
                f"Default tracked ids not in catalog: {', '.join(map(str, unresolved))}"
            )

        duplicate_names = self.check_duplicate_names(df)
        if duplicate_names:
            report["warnings"].append(
                f"Cities listed more than once: {'; '.join(duplicate_names)}"
            )

        if report["errors"]:
            report["valid"] = False
            logger.error(f"Catalog validation failed: {report['errors']}")
        else:
            logger.info(f"Catalog validation passed for {len(df)} cities")

        return report
