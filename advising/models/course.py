"""
Course data models.

Contains the CourseRecord dataclass and CourseState enum that represent
a student's academic history, plus the CatalogCourse entries of the new
curriculum.
"""

from dataclasses import dataclass, field
from enum import Enum


class CourseState(Enum):
    """
    Possible states for a course on a student's record.

    APPROVED: Student passed the course (numeric or qualitative approval)
    IN_PROGRESS: Student is enrolled in the current term
    FAILED: Student attempted and did not pass
    PENDING: Course has never been attempted (only used for display; the
             reconciled state represents it by absence)
    """
    APPROVED = "approved"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    PENDING = "pending"


class CourseCategory(Enum):
    """
    Category of a course in the new curriculum.

    The three elective groups follow the curriculum document:
    ELECTIVE_A = institutional basic core (IBC)
    ELECTIVE_B = disciplinary (DE)
    ELECTIVE_C = complementary training (FC)
    """
    MANDATORY = "mandatory"
    ELECTIVE_A = "elective_a"
    ELECTIVE_B = "elective_b"
    ELECTIVE_C = "elective_c"


@dataclass(frozen=True)
class CourseRecord:
    """
    Represents a single row from the student's transcript.

    Records come from the external extractor (or TranscriptParser) and are
    never modified afterwards. A course that was retaken appears once per
    attempt; reconciling those attempts is the StateReconciler's job.

    Attributes:
        code: Course code as it appears on the transcript (may be a legacy code)
        name: Course name as printed on the transcript
        grade: Final numeric grade on the 0.0 - 5.0 scale
        state: CourseState of this attempt
        period: Period header the row appeared under (e.g., "VIGENCIA 2025-2")
    """
    code: str
    name: str
    grade: float
    state: CourseState
    period: str = ""


@dataclass(frozen=True)
class CatalogCourse:
    """
    A course of the new curriculum.

    Elective slots (e.g., "ELECTIVO_IBC_1") are ordinary catalog entries;
    legacy electives are mapped onto them by the equivalency table.
    """
    code: str                              # Unique key in the new curriculum
    name: str                              # Course title
    credits: int                           # Credit weight (0 for social service)
    term: int                              # Suggested term, 1..9
    category: CourseCategory = CourseCategory.MANDATORY
    prerequisites: tuple = field(default_factory=tuple)  # Catalog codes, in order
