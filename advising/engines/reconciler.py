"""
State Reconciliation Engine.

This module folds a student's course history into one state per
new-curriculum course.
"""

import logging
from typing import Optional

from ..models import Catalog, CourseState

logger = logging.getLogger(__name__)


# Total order over record states. Merging two states keeps the higher one:
#   APPROVED > IN_PROGRESS > FAILED
STATE_RANK = {
    CourseState.PENDING: 0,
    CourseState.FAILED: 1,
    CourseState.IN_PROGRESS: 2,
    CourseState.APPROVED: 3,
}


def merge_state(existing: Optional[CourseState], incoming: CourseState) -> CourseState:
    """
    Combine the state recorded so far with a later attempt.

    - APPROVED is absorbing: a pass from any attempt counts forever
    - IN_PROGRESS replaces a prior failure
    - FAILED never replaces an IN_PROGRESS mark
    """
    if existing is None:
        return incoming
    return max(existing, incoming, key=STATE_RANK.__getitem__)


class StateReconciler:
    """
    Resolves transcript records to catalog codes and reconciles retakes.

    RESOLUTION:
    -----------
    Each record's code goes through Catalog.resolve (equivalency table
    first, then the catalog itself). Records that resolve to nothing are
    courses outside the new curriculum and are dropped.

    DUPLICATE HANDLING:
    -------------------
    Students retake courses, and several legacy codes can collapse onto the
    same catalog code. All records for one catalog code are merged in
    transcript order with merge_state, so the best outcome wins:
    - If approved, keep approved (ignore later attempts)
    - If in progress, keep in progress over failed
    This prevents a failed retake from hiding a passing grade.

    The result maps catalog code -> CourseState. A code with no entry has
    never been attempted (PENDING).
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def reconcile(self, history) -> dict:
        """
        Build the reconciled state for a history.

        Args:
            history: Iterable of CourseRecord objects (not modified)

        Returns:
            {catalog_code: CourseState}
        """
        reconciled = {}

        for record in history:
            if record.state is CourseState.PENDING:
                continue

            code = self.catalog.resolve(record.code)
            if code is None:
                logger.debug("Dropping %s (%s): not part of the new curriculum",
                             record.code, record.name)
                continue

            reconciled[code] = merge_state(reconciled.get(code), record.state)

        return reconciled
