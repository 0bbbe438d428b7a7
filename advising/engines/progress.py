"""
Progress Calculation Engine.

This module turns a reconciled state into credit totals.
"""

from ..models import Catalog, CourseState, ProgressSummary


class ProgressCalculator:
    """
    Aggregates reconciled course states into credit totals.

    The curriculum total is a fixed number (Catalog.total_credits), not the
    sum of the catalog. Elective slots and legacy overlaps can push the
    earned sum past it, so earned credits and the percentage are clamped
    to the total.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def earned_credits(self, reconciled: dict) -> int:
        """Credits of every catalog course in state APPROVED."""
        return sum(
            course.credits
            for course in self.catalog
            if reconciled.get(course.code) is CourseState.APPROVED
        )

    def summarize(self, reconciled: dict, history=(), student_name: str = "",
                  student_id: str = "") -> ProgressSummary:
        """
        Build the ProgressSummary for one student.

        Args:
            reconciled: Output of StateReconciler.reconcile
            history: The CourseRecord list the state was built from
            student_name: Student name as extracted from the transcript
            student_id: Student identifier as extracted from the transcript
        """
        total = self.catalog.total_credits
        earned = min(self.earned_credits(reconciled), total)

        if total > 0:
            percentage = min(100.0, earned / total * 100)
        else:
            percentage = 0.0

        return ProgressSummary(
            total_credits=total,
            earned_credits=earned,
            pending_credits=total - earned,
            percentage=percentage,
            history=list(history),
            reconciled=dict(reconciled),
            student_name=student_name,
            student_id=student_id,
        )
