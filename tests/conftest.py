"""
Shared fixtures for the advising tests.
"""

import pytest

from advising.models import (
    Catalog,
    CatalogCourse,
    CourseCategory,
    CourseRecord,
    CourseState,
)


def record(code, state, grade=None, period="VIGENCIA 2024-1", name=""):
    """Shorthand for a CourseRecord; grade defaults from the state."""
    if grade is None:
        grade = 4.0 if state is CourseState.APPROVED else 0.0
    return CourseRecord(code=code, name=name or f"Course {code}", grade=grade,
                        state=state, period=period)


@pytest.fixture
def make_record():
    return record


@pytest.fixture
def two_course_catalog():
    """A (3 cr, term 1) and B (3 cr, term 2, requires A)."""
    return Catalog(
        courses=(
            CatalogCourse("A", "Course A", 3, 1),
            CatalogCourse("B", "Course B", 3, 2, prerequisites=("A",)),
        ),
        equivalencies={},
        total_credits=6,
    )


@pytest.fixture
def transition_catalog():
    """
    Small transition catalog with legacy codes and an elective slot.

    Legacy 100 -> N1, 101 -> N2, 200/201 -> ELECTIVE_SLOT.
    """
    return Catalog(
        courses=(
            CatalogCourse("N1", "Foundations", 3, 1),
            CatalogCourse("N2", "Research I", 3, 2),
            CatalogCourse("N3", "Research II", 4, 3, prerequisites=("N2",)),
            CatalogCourse("N4", "Practicum", 2, 3, prerequisites=("N1", "N2")),
            CatalogCourse("N5", "Seminar", 3, 4, prerequisites=("MISSING",)),
            CatalogCourse("ELECTIVE_SLOT", "Elective 1", 3, 2,
                          category=CourseCategory.ELECTIVE_A),
        ),
        equivalencies={
            "100": "N1",
            "101": "N2",
            "200": "ELECTIVE_SLOT",
            "201": "ELECTIVE_SLOT",
        },
        total_credits=18,
    )


@pytest.fixture
def ten_course_catalog():
    """Ten independent 3-credit courses, declared in reverse term order."""
    courses = tuple(
        CatalogCourse(f"C{term:02d}", f"Course {term}", 3, term)
        for term in range(10, 0, -1)
    )
    return Catalog(courses=courses, equivalencies={}, total_credits=30)
