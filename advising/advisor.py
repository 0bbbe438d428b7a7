"""
Transition Advisor - Main Orchestrator.

This module contains the TransitionAdvisor class that connects the
algorithm layer to the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising
"""

import json

from .config import FULL_LOAD_CAP, SUBSIDY_CAP
from .data import CatalogLoader, TranscriptParser
from .engines import (
    StateReconciler,
    ProgressCalculator,
    CourseRecommendationEngine,
)
from .models import AnalysisResult
from .ui import TerminalDisplay


class TransitionAdvisor:
    """
    Main interface for the curriculum transition advisor.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the Algorithm layer to the Presentation layer:

    1. Receives a course history (or raw extractor output)
    2. Reconciles it ONCE and feeds the result to both consumers:
       ProgressCalculator and CourseRecommendationEngine
    3. Passes the AnalysisResult to the Presentation layer for display

    Every run builds fresh state; the only thing shared between runs is the
    read-only Catalog, so runs for different students are independent.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object, or call analyze() and use
    AnalysisResult.to_dict() directly.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = TransitionAdvisor()

        # From CourseRecord objects
        result = advisor.analyze(history, "Ana", "CC 123")

        # From the extractor's JSON payload, with terminal display
        result = advisor.run_report("transcript.json")
    """

    def __init__(self, loader: CatalogLoader = None, display=None):
        self.loader = loader or CatalogLoader()
        self.catalog = self.loader.catalog
        self.parser = TranscriptParser()

        self.reconciler = StateReconciler(self.catalog)
        self.progress_calculator = ProgressCalculator(self.catalog)
        self.recommendation_engine = CourseRecommendationEngine(self.catalog)

        self.display = display or TerminalDisplay()

    def analyze(self, history, student_name: str = "", student_id: str = "",
                full_load_cap: int = FULL_LOAD_CAP,
                subsidy_cap: int = SUBSIDY_CAP) -> AnalysisResult:
        """
        Run the full analysis for one student.

        Args:
            history: Sequence of CourseRecord objects (legacy or new codes)
            student_name: Student name from the transcript
            student_id: Student identifier from the transcript
            full_load_cap: Credit cap of the suggested term load
            subsidy_cap: Credit cap of the subsidy bundle

        Returns:
            AnalysisResult with progress, suggestions, and subsidy bundle
        """
        history = list(history)

        # STEP 1: One state per new-curriculum course
        reconciled = self.reconciler.reconcile(history)

        # STEP 2: Credits
        progress = self.progress_calculator.summarize(
            reconciled, history, student_name, student_id
        )

        # STEP 3: Bundles
        suggestions, subsidy_bundle = self.recommendation_engine.recommend(
            reconciled, full_load_cap, subsidy_cap
        )

        return AnalysisResult(
            progress=progress,
            suggestions=suggestions,
            subsidy_bundle=subsidy_bundle,
        )

    def analyze_transcript(self, transcript_data: dict, **caps) -> AnalysisResult:
        """
        Analyze the extractor's JSON payload (see TranscriptParser).

        A failed extraction (empty or malformed payload) yields a valid
        result with no history.
        """
        parsed = self.parser.parse(transcript_data)
        return self.analyze(
            parsed["courses"], parsed["student_name"], parsed["student_id"], **caps
        )

    def analyze_batch(self, transcripts: list, **caps) -> list:
        """
        Analyze several extractor payloads, one independent run each.

        Returns:
            List of AnalysisResult in the same order as `transcripts`
        """
        return [self.analyze_transcript(t, **caps) for t in transcripts]

    def run_report(self, transcript_path: str, full_load_cap: int = FULL_LOAD_CAP,
                   subsidy_cap: int = SUBSIDY_CAP) -> AnalysisResult:
        """
        Load a transcript JSON file, analyze it, and display the report.

        Raises:
            FileNotFoundError: transcript_path does not exist
            json.JSONDecodeError: the file is not valid JSON
        """
        with open(transcript_path, "r", encoding="utf-8") as f:
            transcript_data = json.load(f)

        result = self.analyze_transcript(
            transcript_data, full_load_cap=full_load_cap, subsidy_cap=subsidy_cap
        )
        self.display.print_report(result, full_load_cap, subsidy_cap)
        return result
