"""
Curriculum catalog model.

Contains the Catalog dataclass: the new curriculum's courses plus the
equivalency table that maps legacy course codes onto them.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import TOTAL_CREDITS
from .course import CatalogCourse


@dataclass(frozen=True)
class Catalog:
    """
    Read-only reference data for one curriculum transition.

    A single Catalog is loaded once per process and shared by every analysis
    run; nothing in the engines writes to it.

    CODE RESOLUTION:
    ----------------
    Historical records may carry either a legacy code or a code that already
    belongs to the new curriculum. `resolve` tries, in order:
    1. The equivalency table (legacy code -> catalog or elective slot code)
    2. The catalog itself (the record's code IS a catalog code)
    Anything else resolves to None and does not count toward progress.

    Attributes:
        courses: CatalogCourse entries in curriculum order
        equivalencies: {legacy_code: catalog_code}
        total_credits: Fixed credit total of the curriculum
    """
    courses: tuple
    equivalencies: dict = field(default_factory=dict)
    total_credits: int = TOTAL_CREDITS

    def __post_init__(self):
        # Frozen dataclass: build the lookup through object.__setattr__
        object.__setattr__(self, "_by_code", {c.code: c for c in self.courses})

    def __iter__(self):
        return iter(self.courses)

    def __len__(self) -> int:
        return len(self.courses)

    def __contains__(self, code: str) -> bool:
        return code in self._by_code

    def get(self, code: str) -> Optional[CatalogCourse]:
        """Look up a catalog course by code."""
        return self._by_code.get(code)

    def resolve(self, code: str) -> Optional[str]:
        """
        Resolve a transcript code to a catalog code.

        Returns:
            The catalog (or elective slot) code, or None if the course is
            outside the new curriculum.
        """
        mapped = self.equivalencies.get(code)
        if mapped:
            return mapped
        if code in self._by_code:
            return code
        return None
