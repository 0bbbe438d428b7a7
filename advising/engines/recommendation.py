"""
Course Recommendation Engine.

This module selects the courses a student is eligible to take next term,
ranks them, and packs them into credit-bounded bundles.
"""

from ..config import FULL_LOAD_CAP, SUBSIDY_CAP
from ..models import Catalog, CatalogCourse, CourseState, Priority, Suggestion

# A prerequisite counts as met when it is passed or currently being taken
MET_STATES = (CourseState.APPROVED, CourseState.IN_PROGRESS)

FAILED_JUSTIFICATION = "previously failed course"
CONTINUITY_JUSTIFICATION = "continuity: prerequisite in progress"


class CourseRecommendationEngine:
    """
    Generates next-term course suggestions from a reconciled state.

    PURPOSE:
    --------
    1. Filters the catalog down to eligible candidates
    2. Assigns each candidate a priority and a justification
    3. Orders candidates by priority, then by curriculum term
    4. Greedily fills the full load (18 credits by default)
    5. Greedily fills the subsidy bundle (14 credits) from the full load

    PRIORITY RULES (first match wins):
    ----------------------------------
    - Failed before                 -> HIGH   "previously failed course"
    - A prerequisite is in progress -> HIGH   "continuity: prerequisite in progress"
    - Otherwise                     -> MEDIUM "pending from term N"
    LOW is never assigned by this policy.

    PACKING:
    --------
    Single pass, accept-if-it-fits. A course that does not fit is skipped
    and the pass continues, so capacity can be left unused. Priority order
    is never traded for a tighter fit.

    Nothing here raises on bad data: a prerequisite code that is missing
    from the reconciled state reads as "not attempted", which keeps the
    course blocked.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    @staticmethod
    def prerequisites_met(course: CatalogCourse, reconciled: dict) -> bool:
        """True if every prerequisite is approved or in progress."""
        return all(reconciled.get(code) in MET_STATES for code in course.prerequisites)

    @staticmethod
    def has_prerequisite_in_progress(course: CatalogCourse, reconciled: dict) -> bool:
        return any(
            reconciled.get(code) is CourseState.IN_PROGRESS
            for code in course.prerequisites
        )

    def is_candidate(self, course: CatalogCourse, reconciled: dict) -> bool:
        """
        A course is a candidate if it is neither done nor being taken, and
        its prerequisites are met.
        """
        if reconciled.get(course.code) in MET_STATES:
            return False
        return self.prerequisites_met(course, reconciled)

    def assign_priority(self, course: CatalogCourse, reconciled: dict) -> Suggestion:
        """Wrap a candidate in a Suggestion with its priority and reason."""
        if reconciled.get(course.code) is CourseState.FAILED:
            return Suggestion(Priority.HIGH, course, FAILED_JUSTIFICATION)
        if self.has_prerequisite_in_progress(course, reconciled):
            return Suggestion(Priority.HIGH, course, CONTINUITY_JUSTIFICATION)
        return Suggestion(Priority.MEDIUM, course, f"pending from term {course.term}")

    def candidates(self, reconciled: dict) -> list:
        """
        All eligible courses as Suggestions, ordered by priority then term.

        sorted() is stable, so ties keep curriculum order.
        """
        suggestions = [
            self.assign_priority(course, reconciled)
            for course in self.catalog
            if self.is_candidate(course, reconciled)
        ]
        return sorted(suggestions, key=lambda s: (s.priority.rank, s.course.term))

    @staticmethod
    def pack(suggestions: list, cap: int) -> list:
        """
        Greedy single-pass selection under a credit cap.

        Keeps the input order; a suggestion is taken only if it still fits.
        """
        selected = []
        load = 0
        for suggestion in suggestions:
            credits = suggestion.course.credits
            if load + credits <= cap:
                selected.append(suggestion)
                load += credits
        return selected

    def recommend(self, reconciled: dict, full_load_cap: int = FULL_LOAD_CAP,
                  subsidy_cap: int = SUBSIDY_CAP) -> tuple:
        """
        Build both bundles.

        The subsidy bundle is packed from the full load, not from the
        candidate list, so it never contains a course the full load lacks.

        Returns:
            (full_load, subsidy_bundle) - lists of Suggestion
        """
        full_load = self.pack(self.candidates(reconciled), full_load_cap)
        subsidy_bundle = self.pack(full_load, subsidy_cap)
        return full_load, subsidy_bundle
