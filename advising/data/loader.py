"""
Data loading and caching.

This module handles loading the curriculum data files with caching so the
catalog is read once per process and shared by every analysis run.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import CATALOG_FILE, EQUIVALENCY_FILE, TOTAL_CREDITS
from ..models import Catalog, CatalogCourse, CourseCategory

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Loads and caches the curriculum reference data.

    WHY LAZY LOADING: Properties only load files when first accessed, and
    the assembled Catalog is built once. Since the Catalog is immutable, the
    same instance is safe to hand to any number of concurrent runs.

    DATA SOURCES:
    - catalog.json: Courses of the new curriculum (code, name, credits,
      term, category, prerequisites) and the fixed credit total
    - equivalencies.json: Legacy code -> new code table (agreement 038),
      including the many-to-one elective slot mappings

    Usage:
        loader = CatalogLoader()
        catalog = loader.catalog
        catalog.resolve("401302")  # -> "517022"
    """

    def __init__(self, catalog_path: Optional[Path] = None,
                 equivalency_path: Optional[Path] = None):
        self.catalog_path = Path(catalog_path or CATALOG_FILE)
        self.equivalency_path = Path(equivalency_path or EQUIVALENCY_FILE)
        # Private cache variables - None means "not loaded yet"
        self._catalog_data = None
        self._equivalency_data = None
        self._catalog = None

    @staticmethod
    def _read_json(path: Path) -> dict:
        if not path.exists():
            raise FileNotFoundError(f"Curriculum data file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    @property
    def catalog_data(self) -> dict:
        """Raw contents of catalog.json."""
        if self._catalog_data is None:
            self._catalog_data = self._read_json(self.catalog_path)
        return self._catalog_data

    @property
    def equivalency_data(self) -> dict:
        """Raw contents of equivalencies.json."""
        if self._equivalency_data is None:
            self._equivalency_data = self._read_json(self.equivalency_path)
        return self._equivalency_data

    @property
    def catalog(self) -> Catalog:
        """
        The assembled, read-only Catalog.

        Dangling references (a prerequisite or equivalency target that is not
        a catalog code) are logged but not rejected: the engines treat them
        as never satisfied.
        """
        if self._catalog is None:
            courses = tuple(
                self._parse_course(entry)
                for entry in self.catalog_data.get("courses", [])
            )
            equivalencies = {
                str(legacy): str(target)
                for legacy, target in self.equivalency_data.get("equivalencies", {}).items()
            }
            total = int(self.catalog_data.get("total_credits", TOTAL_CREDITS))

            self._catalog = Catalog(
                courses=courses,
                equivalencies=equivalencies,
                total_credits=total,
            )
            self._check_references(self._catalog)
            logger.info(
                "Loaded catalog with %d courses and %d equivalencies",
                len(courses), len(equivalencies),
            )
        return self._catalog

    def _parse_course(self, entry: dict) -> CatalogCourse:
        """Build a CatalogCourse from one catalog.json entry."""
        code = str(entry.get("code", "")).strip()
        if not code:
            raise ValueError(f"Catalog entry without a code: {entry!r}")

        category_value = entry.get("category", CourseCategory.MANDATORY.value)
        try:
            category = CourseCategory(category_value)
        except ValueError:
            raise ValueError(
                f"Unknown category {category_value!r} for catalog course {code}"
            ) from None

        return CatalogCourse(
            code=code,
            name=entry.get("name", ""),
            credits=int(entry.get("credits", 0)),
            term=int(entry.get("term", 0)),
            category=category,
            prerequisites=tuple(str(p) for p in entry.get("prerequisites", []) or []),
        )

    @staticmethod
    def _check_references(catalog: Catalog):
        for course in catalog:
            for prereq in course.prerequisites:
                if prereq not in catalog:
                    logger.warning(
                        "Course %s requires %s, which is not in the catalog; "
                        "it will never be recommended", course.code, prereq,
                    )
        for legacy, target in catalog.equivalencies.items():
            if target not in catalog:
                logger.warning(
                    "Equivalency %s -> %s points outside the catalog", legacy, target
                )
