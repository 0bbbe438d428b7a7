"""
Tests for transcript row parsing.
Run with: pytest tests/test_parser.py -v
"""

import pytest

from advising.data import TranscriptParser
from advising.models import CourseState


def row(code="514003", name="ARTE", grade="", observation="", period="VIGENCIA 2023-1", **extra):
    data = {"code": code, "name": name, "grade": grade,
            "observation": observation, "periodHeader": period}
    data.update(extra)
    return data


@pytest.fixture
def parser():
    return TranscriptParser()


class TestStateDetermination:
    """Test how each row's state is decided."""

    def test_numeric_pass(self, parser):
        record = parser.parse_row(row(grade="4.5"))
        assert record.state is CourseState.APPROVED
        assert record.grade == 4.5

    def test_numeric_fail(self, parser):
        record = parser.parse_row(row(grade="2.9"))
        assert record.state is CourseState.FAILED

    def test_passing_threshold_is_inclusive(self, parser):
        assert parser.parse_row(row(grade="3.0")).state is CourseState.APPROVED

    def test_grade_extracted_from_noisy_text(self, parser):
        record = parser.parse_row(row(grade="nota 3.7 final"))
        assert record.grade == 3.7

    def test_qualitative_approval(self, parser):
        record = parser.parse_row(row(grade="Aprobado"))
        assert record.state is CourseState.APPROVED
        assert record.grade == 3.5

    def test_qualitative_approval_in_observation(self, parser):
        record = parser.parse_row(row(observation="Aprobado"))
        assert record.state is CourseState.APPROVED

    def test_negated_approval_fails(self, parser):
        record = parser.parse_row(row(observation="No aprobado"))
        assert record.state is CourseState.FAILED

    def test_empty_grade_defaults_to_failed(self, parser):
        record = parser.parse_row(row())
        assert record.state is CourseState.FAILED
        assert record.grade == 0.0

    @pytest.mark.parametrize("period", [
        "VIGENCIA 2025-2",
        "2025 II PERIODO 16-04",
        "2025 periodo 16-04",
    ])
    def test_current_term_is_in_progress(self, parser, period):
        record = parser.parse_row(row(grade="", period=period))
        assert record.state is CourseState.IN_PROGRESS

    @pytest.mark.parametrize("period", [
        "VIGENCIA 2025-1",
        "2025 I PERIODO 16-01",
        "VIGENCIA 2024-2",
    ])
    def test_past_terms_are_historical(self, parser, period):
        assert not parser.is_current_term(period)

    def test_explicit_state_is_trusted(self, parser):
        record = parser.parse_row(row(grade="1.0", state="approved"))
        assert record.state is CourseState.APPROVED

    def test_invalid_explicit_state_is_ignored(self, parser):
        record = parser.parse_row(row(grade="4.0", state="pending"))
        assert record.state is CourseState.APPROVED


class TestSocialService:
    """Test the pass/fail social service course."""

    def test_present_means_approved(self, parser):
        record = parser.parse_row(row(code="700004", name="SERVICIO SOCIAL"))
        assert record.state is CourseState.APPROVED
        assert record.grade == 5.0

    @pytest.mark.parametrize("observation", ["No aprobado", "REPROBADO"])
    def test_failed_when_text_says_so(self, parser, observation):
        record = parser.parse_row(row(code="700004", observation=observation))
        assert record.state is CourseState.FAILED
        assert record.grade == 0.0


class TestRowFiltering:
    """Test row normalization and skipping."""

    def test_code_is_reduced_to_digits(self, parser):
        assert parser.parse_row(row(code=" 514-003 ", grade="4.0")).code == "514003"

    def test_short_code_skipped(self, parser):
        assert parser.parse_row(row(code="12")) is None

    def test_denied_request_skipped(self, parser):
        assert parser.parse_row(row(name="ELECTIVO - NEGADO LUEGO DE ESTUDIO")) is None

    def test_default_period_label(self, parser):
        assert parser.parse_row(row(grade="4.0", period="")).period == "Histórico"


class TestParse:
    """Test whole-payload parsing."""

    def test_student_fields_and_order(self, parser):
        parsed = parser.parse({
            "studentName": "ANA PÉREZ",
            "studentId": "CC 1",
            "courses": [row(code="401305", grade="2.1"), row(code="401305", grade="3.9")],
        })

        assert parsed["student_name"] == "ANA PÉREZ"
        assert parsed["student_id"] == "CC 1"
        assert [r.state for r in parsed["courses"]] == [CourseState.FAILED, CourseState.APPROVED]

    def test_defaults_for_missing_student(self, parser):
        parsed = parser.parse({"courses": []})
        assert parsed["student_name"] == "Estudiante UNAD"
        assert parsed["student_id"] == ""

    @pytest.mark.parametrize("payload", [None, [], {"courses": "oops"}, {}])
    def test_malformed_payload_is_empty_history(self, parser, payload):
        assert parser.parse(payload)["courses"] == []

    def test_non_dict_rows_skipped(self, parser):
        parsed = parser.parse({"courses": ["junk", row(grade="4.0")]})
        assert len(parsed["courses"]) == 1
