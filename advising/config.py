"""
Configuration constants for the advising system.

This module contains all configuration values and constants used throughout
the transition engine. Centralizing these makes it easy to adjust
behavior as institutional policies change.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Curriculum data ships inside the package (advising/data/curriculum)
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data" / "curriculum"
CATALOG_FILE = DATA_DIR / "catalog.json"
EQUIVALENCY_FILE = DATA_DIR / "equivalencies.json"
EXAMPLE_TRANSCRIPT_FILE = DATA_DIR / "example_transcript.json"


# =============================================================================
# CREDIT POLICY
# =============================================================================

# Total credits of the new curriculum. This is a fixed institutional number,
# not the sum of the catalog: elective slots and legacy overlaps mean the
# catalog can add up to more than this.
TOTAL_CREDITS = 156

# Standard full-time load for one term
FULL_LOAD_CAP = 18

# Tuition subsidy ("gratuidad") only covers enrollments up to this many
# credits, so the subsidy bundle is packed against a lower cap.
SUBSIDY_CAP = 14


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Numeric scale is 0.0 - 5.0; a final grade at or above this passes
PASSING_GRADE = 3.0

# Grade assigned to rows approved qualitatively ("Aprobado", homologations)
# that carry no numeric grade
QUALITATIVE_PASS_GRADE = 3.5

# Grade assigned to the social service course, which is graded pass/fail
SOCIAL_SERVICE_PASS_GRADE = 5.0


# =============================================================================
# TRANSCRIPT CONVENTIONS
# =============================================================================

# Period headers on the transcript look like "VIGENCIA 2025-2" or
# "2025 II PERIODO 16-04". A header is the current term when it mentions
# the current year AND one of the markers.
CURRENT_TERM_YEAR = "2025"
CURRENT_TERM_MARKERS = ("II", "16-04", "2025-2")

# Period label for rows without a section header
DEFAULT_PERIOD_LABEL = "Histórico"

# Social service ("Prestación servicio social unadista") has no grade column
SOCIAL_SERVICE_CODE = "700004"

# Rows for homologation requests that were denied; never count them
REJECTED_ROW_MARKER = "negado luego de estudio"

# Shortest course code considered a real row (anything shorter is noise)
MIN_CODE_LENGTH = 3

DEFAULT_STUDENT_NAME = "Estudiante UNAD"
