"""
Transcript parsing.

This module turns the rows produced by the external transcript extractor
into CourseRecord objects.
"""

import logging
import re

from ..config import (
    CURRENT_TERM_MARKERS,
    CURRENT_TERM_YEAR,
    DEFAULT_PERIOD_LABEL,
    DEFAULT_STUDENT_NAME,
    MIN_CODE_LENGTH,
    PASSING_GRADE,
    QUALITATIVE_PASS_GRADE,
    REJECTED_ROW_MARKER,
    SOCIAL_SERVICE_CODE,
    SOCIAL_SERVICE_PASS_GRADE,
)
from ..models import CourseRecord, CourseState

logger = logging.getLogger(__name__)

_GRADE_PATTERN = re.compile(r"(\d\.\d)")
_NON_DIGITS = re.compile(r"[^0-9]")


class TranscriptParser:
    """
    Parses extractor output into CourseRecord objects.

    KEY RESPONSIBILITY: Decide the CourseState of every transcript row.
    The extractor copies the transcript columns verbatim, so the grade may
    be a number ("4.5"), a word ("Aprobado") or empty.

    STATE DETERMINATION LOGIC:
    1. Social service (700004) is pass/fail: failed only if the text says so
    2. Row under a current-term header = IN_PROGRESS (no final grade yet)
    3. Numeric grade >= 3.0 = APPROVED
    4. "Aprobado" without a "no" (homologations) = APPROVED
    5. Anything else = FAILED (safe default, don't assume passing)

    DUPLICATES ARE KEPT: A retaken course yields one record per attempt.
    Choosing the outcome that counts is the StateReconciler's job.

    Input shape:
        {
            "studentName": "...",
            "studentId": "...",
            "courses": [
                {"code", "name", "grade", "observation", "periodHeader"}, ...
            ]
        }
    """

    def parse(self, transcript_data: dict) -> dict:
        """
        Parse extractor output.

        A payload that is not a dict, or has no course list, produces an
        empty history rather than an error: a failed extraction reaches the
        engines as an empty input.

        Returns:
            {
                "student_name": str,
                "student_id": str,
                "courses": [CourseRecord, ...],   # transcript order
            }
        """
        if not isinstance(transcript_data, dict):
            logger.warning("Transcript payload is not an object; treating as empty")
            transcript_data = {}

        rows = transcript_data.get("courses")
        if not isinstance(rows, list):
            rows = []

        courses = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            record = self.parse_row(row)
            if record is not None:
                courses.append(record)

        return {
            "student_name": str(transcript_data.get("studentName") or DEFAULT_STUDENT_NAME),
            "student_id": str(transcript_data.get("studentId") or ""),
            "courses": courses,
        }

    def parse_row(self, row: dict):
        """
        Parse a single transcript row.

        Returns None for rows that are not real course attempts (codes that
        are too short, denied homologation requests).
        """
        raw_code = str(row.get("code") or "").strip()
        name = str(row.get("name") or "").strip()

        if len(raw_code) < MIN_CODE_LENGTH:
            logger.debug("Skipping row with unusable code %r", raw_code)
            return None
        if REJECTED_ROW_MARKER in name.lower():
            logger.debug("Skipping denied request %s (%s)", raw_code, name)
            return None

        code = self.normalize_code(raw_code)
        grade_text = str(row.get("grade") or "").strip().lower()
        observation = str(row.get("observation") or "").strip().lower()
        period = str(row.get("periodHeader") or "").strip().upper()

        explicit = self._explicit_state(row.get("state"))
        if explicit is not None:
            grade = self._numeric_grade(grade_text)
            state = explicit
        elif code == SOCIAL_SERVICE_CODE:
            grade, state = self._social_service(grade_text, observation)
        else:
            grade, state = self._graded_course(grade_text, observation, period)

        return CourseRecord(
            code=code,
            name=name,
            grade=grade,
            state=state,
            period=period or DEFAULT_PERIOD_LABEL,
        )

    @staticmethod
    def normalize_code(code: str) -> str:
        """Keep digits only ("514-003 " -> "514003")."""
        return _NON_DIGITS.sub("", code)

    @staticmethod
    def is_current_term(period: str) -> bool:
        """True for headers like "VIGENCIA 2025-2" or "2025 II PERIODO 16-04"."""
        period = period.upper()
        if CURRENT_TERM_YEAR not in period:
            return False
        return any(marker in period for marker in CURRENT_TERM_MARKERS)

    @staticmethod
    def _explicit_state(value):
        if isinstance(value, CourseState):
            return value
        if not value:
            return None
        try:
            state = CourseState(str(value).strip().lower())
        except ValueError:
            return None
        # PENDING is not something a transcript row can say
        return None if state is CourseState.PENDING else state

    @staticmethod
    def _numeric_grade(grade_text: str) -> float:
        match = _GRADE_PATTERN.search(grade_text)
        return float(match.group(1)) if match else 0.0

    @staticmethod
    def _social_service(grade_text: str, observation: str) -> tuple:
        text = f"{grade_text} {observation}"
        if "no aprobado" in text or "reprobado" in text:
            return 0.0, CourseState.FAILED
        # Present on the transcript and not failed = completed
        return SOCIAL_SERVICE_PASS_GRADE, CourseState.APPROVED

    def _graded_course(self, grade_text: str, observation: str, period: str) -> tuple:
        grade = self._numeric_grade(grade_text)

        if self.is_current_term(period):
            return grade, CourseState.IN_PROGRESS
        if grade >= PASSING_GRADE:
            return grade, CourseState.APPROVED

        approved_word = "aprobado" in grade_text or "aprobado" in observation
        negated = "no" in grade_text or "no" in observation
        if approved_word and not negated:
            return (grade or QUALITATIVE_PASS_GRADE), CourseState.APPROVED

        return grade, CourseState.FAILED
