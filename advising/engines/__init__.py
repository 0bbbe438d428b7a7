"""
Reconciliation, progress, and recommendation engines.

This package contains the engines that perform the core business logic of
the advising system. None of them print or touch files.
"""

from .reconciler import StateReconciler, merge_state, STATE_RANK
from .progress import ProgressCalculator
from .recommendation import CourseRecommendationEngine

__all__ = [
    "StateReconciler",
    "merge_state",
    "STATE_RANK",
    "ProgressCalculator",
    "CourseRecommendationEngine",
]
