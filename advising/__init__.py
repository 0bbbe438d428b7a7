"""
Curriculum Transition Advising Package
======================================

Advises students moving from a legacy curriculum to a new one: how much of
the new curriculum their history already covers, and which courses to take
next term.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │CatalogLoader│  │TranscriptParser │  │      StateReconciler        │  │
│  │  (I/O)      │  │ (row parsing)   │  │ (equivalencies + retakes)   │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │   ProgressCalculator    │  │     CourseRecommendationEngine      │  │
│  │  (credits, percentage)  │  │  (eligibility, priority, bundles)   │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Formats and prints to console                                 │   │
│  │  • Can be replaced with: WebDisplay, PDFDisplay, APIResponse    │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     TransitionAdvisor                                    │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── advisor.py           # TransitionAdvisor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # CourseRecord, CourseState, CatalogCourse
│   ├── catalog.py       # Catalog (courses + equivalency table)
│   └── recommendation.py # Suggestion, ProgressSummary, AnalysisResult
│
├── data/                # Data loading and parsing
│   ├── loader.py        # CatalogLoader
│   ├── parser.py        # TranscriptParser
│   └── curriculum/      # catalog.json, equivalencies.json
│
├── engines/             # Core business logic
│   ├── reconciler.py    # StateReconciler, merge_state
│   ├── progress.py      # ProgressCalculator
│   └── recommendation.py # CourseRecommendationEngine
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

Basic usage:

    from advising import TransitionAdvisor, CourseRecord, CourseState

    advisor = TransitionAdvisor()

    history = [
        CourseRecord("401302", "Teorías del aprendizaje", 3.7, CourseState.APPROVED, "VIGENCIA 2022-1"),
        CourseRecord("150001", "Fundamentos de investigación", 0.0, CourseState.IN_PROGRESS, "VIGENCIA 2025-2"),
    ]
    result = advisor.analyze(history, student_name="Ana", student_id="CC 123")

    result.progress.percentage      # share of the curriculum completed
    result.suggestions              # full term load (<= 18 credits)
    result.subsidy_bundle           # subsidy-eligible subset (<= 14 credits)

Running from command line:

    python -m advising transcript.json

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import TransitionAdvisor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    CourseRecord,
    CourseState,
    CourseCategory,
    CatalogCourse,
    Catalog,
    Priority,
    Suggestion,
    ProgressSummary,
    AnalysisResult,
)

# Engine exports (for advanced use)
from .engines import (
    StateReconciler,
    ProgressCalculator,
    CourseRecommendationEngine,
    merge_state,
)

# Data exports
from .data import CatalogLoader, TranscriptParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    TOTAL_CREDITS,
    FULL_LOAD_CAP,
    SUBSIDY_CAP,
    PASSING_GRADE,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "TransitionAdvisor",
    "main",
    # Models
    "CourseRecord",
    "CourseState",
    "CourseCategory",
    "CatalogCourse",
    "Catalog",
    "Priority",
    "Suggestion",
    "ProgressSummary",
    "AnalysisResult",
    # Engines
    "StateReconciler",
    "ProgressCalculator",
    "CourseRecommendationEngine",
    "merge_state",
    # Data
    "CatalogLoader",
    "TranscriptParser",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "TOTAL_CREDITS",
    "FULL_LOAD_CAP",
    "SUBSIDY_CAP",
    "PASSING_GRADE",
]
