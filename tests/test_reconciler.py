"""
Tests for code resolution and state reconciliation.
Run with: pytest tests/test_reconciler.py -v
"""

import pytest

from advising.models import CourseState
from advising.engines import StateReconciler, merge_state


class TestMergeState:
    """Test the state merge used by the reconciler fold."""

    def test_first_attempt_is_taken_as_is(self):
        """Test that with no prior state the incoming state wins."""
        assert merge_state(None, CourseState.FAILED) is CourseState.FAILED

    @pytest.mark.parametrize("incoming", [
        CourseState.FAILED, CourseState.IN_PROGRESS, CourseState.APPROVED,
    ])
    def test_approved_is_absorbing(self, incoming):
        """Test that nothing replaces APPROVED."""
        assert merge_state(CourseState.APPROVED, incoming) is CourseState.APPROVED

    def test_in_progress_overrides_failed(self):
        assert merge_state(CourseState.FAILED, CourseState.IN_PROGRESS) is CourseState.IN_PROGRESS

    def test_failed_does_not_override_in_progress(self):
        assert merge_state(CourseState.IN_PROGRESS, CourseState.FAILED) is CourseState.IN_PROGRESS

    def test_approved_overrides_everything_below(self):
        assert merge_state(CourseState.FAILED, CourseState.APPROVED) is CourseState.APPROVED
        assert merge_state(CourseState.IN_PROGRESS, CourseState.APPROVED) is CourseState.APPROVED


class TestCodeResolution:
    """Test the two-stage legacy/new code resolution."""

    def test_equivalency_table_first(self, transition_catalog):
        assert transition_catalog.resolve("100") == "N1"

    def test_self_identity_fallback(self, transition_catalog):
        """Test that a code already in the new curriculum maps to itself."""
        assert transition_catalog.resolve("N3") == "N3"

    def test_unknown_code_resolves_to_none(self, transition_catalog):
        assert transition_catalog.resolve("999") is None

    def test_elective_slot_absorbs_several_legacy_codes(self, transition_catalog):
        assert transition_catalog.resolve("200") == "ELECTIVE_SLOT"
        assert transition_catalog.resolve("201") == "ELECTIVE_SLOT"


class TestStateReconciler:
    """Test folding a history into one state per catalog code."""

    def test_empty_history(self, transition_catalog):
        assert StateReconciler(transition_catalog).reconcile([]) == {}

    def test_legacy_codes_are_mapped(self, transition_catalog, make_record):
        history = [
            make_record("100", CourseState.APPROVED),
            make_record("101", CourseState.FAILED),
        ]
        state = StateReconciler(transition_catalog).reconcile(history)

        assert state == {"N1": CourseState.APPROVED, "N2": CourseState.FAILED}

    def test_unmapped_codes_are_dropped(self, transition_catalog, make_record):
        history = [
            make_record("999", CourseState.APPROVED),
            make_record("100", CourseState.APPROVED),
        ]
        state = StateReconciler(transition_catalog).reconcile(history)

        assert list(state) == ["N1"]

    def test_absorption(self, transition_catalog, make_record):
        """Test that a later failure never erases an approval."""
        history = [
            make_record("100", CourseState.APPROVED),
            make_record("100", CourseState.FAILED),
            make_record("N1", CourseState.IN_PROGRESS),
        ]
        state = StateReconciler(transition_catalog).reconcile(history)

        assert state["N1"] is CourseState.APPROVED

    def test_shield(self, transition_catalog, make_record):
        """Test that IN_PROGRESS followed by FAILED stays IN_PROGRESS."""
        history = [
            make_record("101", CourseState.IN_PROGRESS),
            make_record("101", CourseState.FAILED),
        ]
        state = StateReconciler(transition_catalog).reconcile(history)

        assert state["N2"] is CourseState.IN_PROGRESS

    def test_retake_in_progress_hides_old_failure(self, transition_catalog, make_record):
        history = [
            make_record("101", CourseState.FAILED),
            make_record("101", CourseState.IN_PROGRESS),
        ]
        state = StateReconciler(transition_catalog).reconcile(history)

        assert state["N2"] is CourseState.IN_PROGRESS

    def test_legacy_and_new_code_share_one_state(self, transition_catalog, make_record):
        """Test that a legacy failure and a new-code pass land on the same course."""
        history = [
            make_record("100", CourseState.FAILED),
            make_record("N1", CourseState.APPROVED),
        ]
        state = StateReconciler(transition_catalog).reconcile(history)

        assert state == {"N1": CourseState.APPROVED}

    def test_elective_slot_merges_legacy_electives(self, transition_catalog, make_record):
        history = [
            make_record("200", CourseState.FAILED),
            make_record("201", CourseState.APPROVED),
        ]
        state = StateReconciler(transition_catalog).reconcile(history)

        assert state == {"ELECTIVE_SLOT": CourseState.APPROVED}

    def test_idempotent(self, transition_catalog, make_record):
        """Test that reconciling the same history twice gives the same state."""
        history = [
            make_record("100", CourseState.FAILED),
            make_record("101", CourseState.IN_PROGRESS),
            make_record("200", CourseState.APPROVED),
            make_record("100", CourseState.IN_PROGRESS),
        ]
        reconciler = StateReconciler(transition_catalog)

        assert reconciler.reconcile(history) == reconciler.reconcile(history)

    def test_history_not_modified(self, transition_catalog, make_record):
        history = [
            make_record("100", CourseState.FAILED),
            make_record("100", CourseState.APPROVED),
        ]
        snapshot = list(history)
        StateReconciler(transition_catalog).reconcile(history)

        assert history == snapshot

    def test_pending_records_are_ignored(self, transition_catalog, make_record):
        history = [make_record("100", CourseState.PENDING)]

        assert StateReconciler(transition_catalog).reconcile(history) == {}
