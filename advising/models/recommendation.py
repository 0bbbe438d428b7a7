"""
Recommendation and result data models.

Contains dataclasses for course suggestions, the student's progress summary,
and the combined analysis result handed to the presentation layer.
"""

from dataclasses import dataclass, field
from enum import Enum

from .course import CatalogCourse


class Priority(Enum):
    """
    Priority of a suggested course.

    LOW is part of the domain but the default policy never assigns it;
    it stays available for external overrides.
    """
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank: lower comes first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}


@dataclass(frozen=True)
class Suggestion:
    """
    A course the student should enroll in next term, with the reason why.
    """
    priority: Priority
    course: CatalogCourse
    justification: str

    def to_dict(self) -> dict:
        return {
            "priority": self.priority.value,
            "code": self.course.code,
            "name": self.course.name,
            "credits": self.course.credits,
            "term": self.course.term,
            "justification": self.justification,
        }


@dataclass
class ProgressSummary:
    """
    Aggregated progress of a student against the new curriculum.

    Example for a student halfway through:
        total_credits: 156
        earned_credits: 78
        pending_credits: 78
        percentage: 50.0
    """
    total_credits: int
    earned_credits: int
    pending_credits: int
    percentage: float
    history: list = field(default_factory=list)      # CourseRecord objects, as given
    reconciled: dict = field(default_factory=dict)   # {catalog_code: CourseState}
    student_name: str = ""
    student_id: str = ""


@dataclass
class AnalysisResult:
    """
    Complete output of one analysis run.

    Contains:
    - progress: ProgressSummary
    - suggestions: Suggestions for the full term load, in priority order
    - subsidy_bundle: Subset of `suggestions` that fits the subsidy cap
    """
    progress: ProgressSummary
    suggestions: list
    subsidy_bundle: list

    @property
    def suggested_credits(self) -> int:
        return sum(s.course.credits for s in self.suggestions)

    @property
    def subsidy_credits(self) -> int:
        return sum(s.course.credits for s in self.subsidy_bundle)

    def to_dict(self) -> dict:
        """Convert to plain data (for JSON output or an API response)."""
        progress = self.progress
        return {
            "student": {
                "name": progress.student_name,
                "id": progress.student_id,
            },
            "progress": {
                "total_credits": progress.total_credits,
                "earned_credits": progress.earned_credits,
                "pending_credits": progress.pending_credits,
                "percentage": round(progress.percentage, 2),
                "courses": {
                    code: state.value for code, state in progress.reconciled.items()
                },
            },
            "history": [
                {
                    "code": r.code,
                    "name": r.name,
                    "grade": r.grade,
                    "state": r.state.value,
                    "period": r.period,
                }
                for r in progress.history
            ],
            "suggestions": [s.to_dict() for s in self.suggestions],
            "suggested_credits": self.suggested_credits,
            "subsidy_bundle": [s.to_dict() for s in self.subsidy_bundle],
            "subsidy_credits": self.subsidy_credits,
        }
