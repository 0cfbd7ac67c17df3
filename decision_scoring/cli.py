"""
Decision Scoring Engine - CLI.

============================================================
RESPONSIBILITY
============================================================
Command-line interface for scoring a decision.

- Reads options from a JSON file (or stdin)
- Blends stored / given weights with a risk personality
- Prints a text summary or the JSON report

============================================================
USAGE
============================================================
python -m decision_scoring --options options.json
python -m decision_scoring --options options.json --personality aggressive
python -m decision_scoring --options - --weights "cost=40,time=10,risk=30,priority=10,reward=10" --format json

Options file: a JSON list of option objects, or {"options": [...]}.

============================================================
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from .blender import WeightBlender
from .config import LOG_LEVELS, ScoringSettings, load_settings
from .engine import ScoringEngine, format_analysis_summary
from .logging_setup import setup_logging
from .preferences import parse_weight_string
from .report import build_decision_report
from .sanitizer import collect_options
from .types import DecisionScoringError, RiskPersonality

logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_SCORING_ERROR = 2


# ============================================================
# CLI ARGUMENT PARSER
# ============================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="decision-score",
        description="Rank the options of a decision by weighted multi-criteria score",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Personalities:
  conservative  - risk weighs most (0.40)
  balanced      - even spread (default)
  aggressive    - reward weighs most (0.30)

Examples:
  %(prog)s --options options.json
  %(prog)s --options options.json --personality aggressive --format json
  cat options.json | %(prog)s --options -
        """
    )

    parser.add_argument(
        "--options", "-o",
        type=str,
        required=True,
        metavar="PATH",
        help="JSON file with the options ('-' reads stdin)",
    )

    # --------------------------------------------------------
    # Weighting Options
    # --------------------------------------------------------
    weighting_group = parser.add_argument_group("Weighting Options")

    weighting_group.add_argument(
        "--personality", "-p",
        type=str,
        choices=[p.value for p in RiskPersonality],
        default=None,
        help="Risk personality (default: DECISION_DEFAULT_PERSONALITY or balanced)",
    )

    weighting_group.add_argument(
        "--weights", "-w",
        type=str,
        metavar="SPEC",
        help='User weights, e.g. "cost=25,time=20,risk=25,priority=15,reward=15"',
    )

    # --------------------------------------------------------
    # Output Options
    # --------------------------------------------------------
    output_group = parser.add_argument_group("Output Options")

    output_group.add_argument(
        "--format", "-f",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    output_group.add_argument(
        "--log-level",
        type=str,
        choices=list(LOG_LEVELS),
        default=None,
        help="Logging level (default: DECISION_LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version="%(prog)s 1.0.0",
    )

    return parser


# ============================================================
# INPUT LOADING
# ============================================================

def load_option_records(path: str) -> List[Any]:
    """
    Read option records from a JSON file or stdin.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a list of option objects
    """
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")

    data = json.loads(text)
    if isinstance(data, dict):
        data = data.get("options")
    if not isinstance(data, list):
        raise ValueError("Expected a JSON list of options or an object with an 'options' list")

    for position, record in enumerate(data, start=1):
        if not isinstance(record, dict):
            raise ValueError(
                f"Option {position} must be a JSON object, got {json.dumps(record)}"
            )
    return data


# ============================================================
# MAIN ENTRY POINT
# ============================================================

def run(args: argparse.Namespace, settings: ScoringSettings) -> int:
    """
    Score the decision described by the parsed arguments.

    Returns:
        Exit code
    """
    try:
        records = load_option_records(args.options)
    except (OSError, ValueError) as e:
        print(f"Error: cannot read options: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        personality = RiskPersonality.parse(args.personality or settings.default_personality)
        user_weights = parse_weight_string(args.weights) if args.weights else settings.user_weights

        options = collect_options(records)
        weights = WeightBlender().blend(user_weights, personality)
        result = ScoringEngine(engine_version=settings.engine_version).score(options, weights)
    except DecisionScoringError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SCORING_ERROR

    report = build_decision_report(result, personality, user_weights)

    if args.format == "json":
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_analysis_summary(result))
        print(report.recommendation)
        if report.alternative_suggestion:
            print(report.alternative_suggestion)
        print(report.risk_assessment)

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except DecisionScoringError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_SCORING_ERROR

    setup_logging(args.log_level or settings.log_level, settings.log_format)
    logger.debug(f"Settings: {settings.to_dict()}")

    return run(args, settings)


# ============================================================
# MODULE EXECUTION
# ============================================================

if __name__ == "__main__":
    sys.exit(main())
