"""
Command-Line Interface for the Advising System.

This module provides the CLI for the transition advisor. It handles user
input and hands the transcript to the TransitionAdvisor.

The transcript is the JSON produced by the extraction step (see
TranscriptParser for its shape). Without a path argument the CLI asks
for one, defaulting to the bundled example transcript.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising [transcript.json] [--json]
"""

import argparse
import json
import logging

from .config import EXAMPLE_TRANSCRIPT_FILE, FULL_LOAD_CAP, SUBSIDY_CAP
from .advisor import TransitionAdvisor
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curriculum-advisor",
        description="Curriculum transition progress and next-term course suggestions.",
    )
    parser.add_argument("transcript", nargs="?",
                        help="Path to the extracted transcript JSON")
    parser.add_argument("--json", action="store_true",
                        help="Print the analysis as JSON instead of tables")
    parser.add_argument("--full-load", type=int, default=FULL_LOAD_CAP,
                        help=f"Credit cap of the suggested load (default {FULL_LOAD_CAP})")
    parser.add_argument("--subsidy", type=int, default=SUBSIDY_CAP,
                        help=f"Credit cap of the subsidy bundle (default {SUBSIDY_CAP})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show debug logging (dropped codes, skipped rows)")
    return parser


def _ask_transcript_path() -> str:
    """Prompt for a transcript path; Enter or EOF picks the example."""
    print(f"\n{TerminalDisplay.BOLD}Transcript JSON path{TerminalDisplay.RESET} "
          f"{TerminalDisplay.DIM}(Enter for the example transcript){TerminalDisplay.RESET}")
    try:
        path = input("  Path: ").strip()
    except EOFError:
        path = ""
    if not path:
        path = str(EXAMPLE_TRANSCRIPT_FILE)
        print(f"  → Using example: {path}")
    return path


def main(argv=None) -> int:
    """
    Command-line interface for the transition advisor.

    Returns:
        Process exit code (0 on success, 1 if the transcript can't be read)
    """
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    transcript_path = args.transcript
    if not transcript_path:
        if args.json:
            transcript_path = str(EXAMPLE_TRANSCRIPT_FILE)
        else:
            print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
            print("╔══════════════════════════════════════════════════════════════════╗")
            print("║         CURRICULUM TRANSITION ADVISOR                            ║")
            print("║         Legacy curriculum → New curriculum                       ║")
            print("╚══════════════════════════════════════════════════════════════════╝")
            print(f"{TerminalDisplay.RESET}")
            transcript_path = _ask_transcript_path()

    advisor = TransitionAdvisor()

    try:
        if args.json:
            with open(transcript_path, "r", encoding="utf-8") as f:
                transcript_data = json.load(f)
            result = advisor.analyze_transcript(
                transcript_data, full_load_cap=args.full_load, subsidy_cap=args.subsidy
            )
            print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        else:
            advisor.run_report(transcript_path, args.full_load, args.subsidy)
    except FileNotFoundError:
        logger.error("Transcript not found: %s", transcript_path)
        print(f"  {TerminalDisplay.RED}Transcript not found: {transcript_path}{TerminalDisplay.RESET}")
        return 1
    except json.JSONDecodeError as e:
        logger.error("Transcript %s is not valid JSON: %s", transcript_path, e)
        print(f"  {TerminalDisplay.RED}Transcript is not valid JSON: {transcript_path}{TerminalDisplay.RESET}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
