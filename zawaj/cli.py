"""
zawaj-match: score, moderate and check profiles from JSON files.

Usage:
    zawaj-match compat alice.json bob.json
    zawaj-match rank alice.json candidates.json --limit 5
    zawaj-match moderate --text "some bio text"
    zawaj-match moderate --profile bob.json
    zawaj-match complete bob.json --threshold 80
    zawaj-match --json compat alice.json bob.json
    zawaj-match --log-level DEBUG --log-file run.log rank alice.json candidates.json

Profiles are camelCase JSON objects as returned by the profile API;
candidates.json holds a list of them.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from zawaj.config import get_log_level
from zawaj.scorers.compatibility import CompatibilityScorer
from zawaj.utils.logger import MatchingLogger, configure_global_logging, get_logger
from zawaj.utils.profile_fields import get_field
from zawaj.validators.completeness import get_completion_details
from zawaj.validators.moderation import generate_moderation_report

console = Console()


def _load_json(path: str, logger: MatchingLogger) -> Any:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    logger.debug("Loaded JSON", path=path, type=type(data).__name__)
    return data


def _print_json(payload: Any):
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_compat(args, logger: MatchingLogger) -> int:
    details = CompatibilityScorer().details(
        _load_json(args.profile_a, logger), _load_json(args.profile_b, logger)
    )
    if args.json:
        _print_json(details.to_wire())
        return 0

    table = Table(title=f"Compatibility: {details.overall_score}/100")
    table.add_column("Factor")
    table.add_column("Points", justify="right")
    table.add_column("Match")
    for factor in details.details:
        table.add_row(
            factor.factor,
            f"{factor.points}/{factor.weight}",
            "[green]yes[/green]" if factor.match else "[red]no[/red]",
        )
    console.print(table)
    return 0


def cmd_rank(args, logger: MatchingLogger) -> int:
    profile = _load_json(args.profile, logger)
    candidates = _load_json(args.candidates, logger)
    if not isinstance(candidates, list):
        raise ValueError(f"{args.candidates} must contain a JSON list of profiles")

    ranked = CompatibilityScorer().rank(profile, candidates, limit=args.limit, min_score=args.min_score)
    if candidates and not ranked:
        logger.warning("No candidates reached the minimum score", min_score=args.min_score, candidates=len(candidates))

    if args.json:
        _print_json([{"index": r.index, "score": r.score} for r in ranked])
        return 0

    table = Table(title=f"{len(ranked)} candidates")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Score", justify="right")
    for position, entry in enumerate(ranked, start=1):
        name = get_field(entry.candidate, "basicInfo", "name") or "-"
        table.add_row(str(position), str(name), str(entry.score))
    console.print(table)
    return 0


def cmd_moderate(args, logger: MatchingLogger) -> int:
    if args.profile:
        report = generate_moderation_report(_load_json(args.profile, logger), "profile")
    elif args.message is not None:
        report = generate_moderation_report(args.message, "message")
    else:
        report = generate_moderation_report(args.text, "text")

    if args.json:
        _print_json(report.to_wire())
        return 0

    flagged = report.flagged_fields if report.flagged_fields is not None else report.flagged_words
    style = "green" if report.is_appropriate else "red"
    console.print(
        Panel(
            f"Appropriate: {report.is_appropriate}\n"
            f"Score: {report.moderation_score:.2f}\n"
            f"Flagged: {', '.join(flagged) if flagged else 'none'}\n"
            f"Needs review: {report.needs_review}",
            title=f"Moderation ({report.content_type})",
            border_style=style,
        )
    )
    return 0


def cmd_complete(args, logger: MatchingLogger) -> int:
    details = get_completion_details(_load_json(args.profile, logger), threshold=args.threshold)
    if args.json:
        _print_json(details.to_wire())
        return 0

    style = "green" if details.is_complete else "yellow"
    missing = "\n".join(f"  - {path}" for path in details.missing_fields) or "  none"
    console.print(
        Panel(
            f"{details.completeness}% complete\n{details.completion_message}\n\nMissing:\n{missing}",
            title="Profile completeness",
            border_style=style,
        )
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zawaj-match", description="Profile matching and moderation tools")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR (default: $ZAWAJ_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log output to this file")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compat = subparsers.add_parser("compat", help="Score two profiles against each other")
    compat.add_argument("profile_a", help="Path to first profile JSON")
    compat.add_argument("profile_b", help="Path to second profile JSON")
    compat.set_defaults(func=cmd_compat)

    rank = subparsers.add_parser("rank", help="Rank candidates by compatibility with a profile")
    rank.add_argument("profile", help="Path to the searcher's profile JSON")
    rank.add_argument("candidates", help="Path to a JSON list of candidate profiles")
    rank.add_argument("--limit", type=int, default=None, help="Show at most N candidates")
    rank.add_argument("--min-score", type=int, default=0, help="Drop candidates below this score")
    rank.set_defaults(func=cmd_rank)

    moderate = subparsers.add_parser("moderate", help="Check content against the abusive word lists")
    target = moderate.add_mutually_exclusive_group(required=True)
    target.add_argument("--text", help="Free text to check")
    target.add_argument("--message", help="Chat message to check")
    target.add_argument("--profile", help="Path to a profile JSON to check")
    moderate.set_defaults(func=cmd_moderate)

    complete = subparsers.add_parser("complete", help="Profile completeness and missing fields")
    complete.add_argument("profile", help="Path to profile JSON")
    complete.add_argument("--threshold", type=int, default=None, help="Completeness needed to count as complete")
    complete.set_defaults(func=cmd_complete)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv(Path.cwd() / ".env")
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = (args.log_level or get_log_level("WARNING")).upper()
    configure_global_logging(log_level)
    logger = get_logger(log_level=log_level, log_file=args.log_file, reconfigure=True)
    logger.info(f"Running {args.command}")

    try:
        status = args.func(args, logger)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        logger.error(f"{args.command} failed", exception=e)
        status = 1

    summary = logger.get_error_summary()
    logger.info(
        f"Finished {args.command}",
        errors=summary["total_errors"],
        warnings=summary["total_warnings"],
    )
    return status


if __name__ == "__main__":
    sys.exit(main())
