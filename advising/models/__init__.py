"""
Data models for the advising system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import CourseRecord, CourseState, CourseCategory, CatalogCourse
from .catalog import Catalog
from .recommendation import (
    Priority,
    Suggestion,
    ProgressSummary,
    AnalysisResult,
)

__all__ = [
    # Course models
    "CourseRecord",
    "CourseState",
    "CourseCategory",
    "CatalogCourse",
    # Catalog
    "Catalog",
    # Recommendation and result models
    "Priority",
    "Suggestion",
    "ProgressSummary",
    "AnalysisResult",
]
