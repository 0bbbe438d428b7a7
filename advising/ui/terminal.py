"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the advising package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import (
    AnalysisResult,
    CourseState,
    Priority,
    ProgressSummary,
)


class TerminalDisplay:
    """
    Pretty terminal output for analysis results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and return AnalysisResult.to_dict().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def priority_badge(cls, priority: Priority) -> str:
        """Return a colored priority badge."""
        if priority is Priority.HIGH:
            return f"{cls.BG_RED}{cls.WHITE} HIGH {cls.RESET}"
        elif priority is Priority.MEDIUM:
            return f"{cls.BG_YELLOW}{cls.WHITE} MED  {cls.RESET}"
        return f"{cls.BG_GREEN}{cls.WHITE} LOW  {cls.RESET}"

    @classmethod
    def state_color(cls, state: CourseState) -> str:
        return {
            CourseState.APPROVED: cls.GREEN,
            CourseState.IN_PROGRESS: cls.YELLOW,
            CourseState.FAILED: cls.RED,
        }.get(state, cls.DIM)

    @classmethod
    def print_student_info(cls, progress: ProgressSummary):
        """Print student identification information."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {progress.student_name or 'Unknown'}")
        print(f"  {cls.BOLD}ID:{cls.RESET} {progress.student_id or 'Unknown'}")

    @classmethod
    def progress_bar(cls, percentage: float, width: int = 40) -> str:
        filled = int(round(width * percentage / 100))
        return f"{cls.GREEN}{'█' * filled}{cls.DIM}{'░' * (width - filled)}{cls.RESET}"

    @classmethod
    def print_progress(cls, progress: ProgressSummary):
        """Print credit totals and completion percentage."""
        cls.print_header("PROGRESS IN THE NEW CURRICULUM")
        print(f"\n  {cls.progress_bar(progress.percentage)} {progress.percentage:.1f}%")
        print(f"\n  {cls.BOLD}Earned credits:{cls.RESET}  {progress.earned_credits}")
        print(f"  {cls.BOLD}Pending credits:{cls.RESET} {progress.pending_credits}")
        print(f"  {cls.BOLD}Total credits:{cls.RESET}   {progress.total_credits}")

        counts = {}
        for state in progress.reconciled.values():
            counts[state] = counts.get(state, 0) + 1
        print(f"\n  {cls.GREEN}Approved:{cls.RESET} {counts.get(CourseState.APPROVED, 0)} courses"
              f"   {cls.YELLOW}In progress:{cls.RESET} {counts.get(CourseState.IN_PROGRESS, 0)}"
              f"   {cls.RED}Failed:{cls.RESET} {counts.get(CourseState.FAILED, 0)}")

    @classmethod
    def print_history(cls, progress: ProgressSummary):
        """Print the transcript rows as received."""
        cls.print_subheader("Academic History")

        if not progress.history:
            print(f"  {cls.DIM}(no courses found on the transcript){cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'CODE':<10} {'COURSE':<40} {'GRADE':>5}  {'STATE':<12} PERIOD{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 86}{cls.RESET}")
        for record in progress.history:
            name = record.name[:38] + ".." if len(record.name) > 40 else record.name
            color = cls.state_color(record.state)
            print(f"  {record.code:<10} {name:<40} {record.grade:>5.1f}  "
                  f"{color}{record.state.value:<12}{cls.RESET} {cls.DIM}{record.period}{cls.RESET}")

    @classmethod
    def print_suggestions(cls, title: str, suggestions: list, cap: int = None):
        """Print one bundle of suggestions with its credit total."""
        cls.print_header(title)

        if not suggestions:
            print(f"\n  {cls.DIM}No courses suggested for this criterion.{cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'PRIORITY':<8} {'CODE':<15} {'COURSE':<40} {'CR':>3}  REASON{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 86}{cls.RESET}")
        for suggestion in suggestions:
            course = suggestion.course
            name = course.name[:38] + ".." if len(course.name) > 40 else course.name
            print(f"  {cls.priority_badge(suggestion.priority)}   {course.code:<15} {name:<40} "
                  f"{course.credits:>3}  {cls.DIM}{suggestion.justification}{cls.RESET}")

        total = sum(s.course.credits for s in suggestions)
        cap_str = f" / {cap}" if cap is not None else ""
        print(f"\n  {cls.BOLD}Total credits:{cls.RESET} {total}{cap_str}")

    @classmethod
    def print_report(cls, result: AnalysisResult, full_load_cap: int = None,
                     subsidy_cap: int = None):
        """Print the complete report for one student."""
        cls.print_student_info(result.progress)
        cls.print_progress(result.progress)
        cls.print_history(result.progress)
        cls.print_suggestions("SUGGESTED LOAD FOR NEXT TERM", result.suggestions, full_load_cap)
        cls.print_suggestions("SUBSIDY BUNDLE (GRATUIDAD)", result.subsidy_bundle, subsidy_cap)
        print()
