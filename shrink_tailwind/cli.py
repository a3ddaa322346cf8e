"""
Command line entry point.

    shrink-tailwind scan FILE [--threshold N]
    shrink-tailwind extract FILE LINE NAME [--flat] [--preserve-states]
                                           [--force] [--write] [--css PATH]

Without --write, extract only prints the generated rule and the updated
line; with --write the source file is rewritten and the rule appended to
the stylesheet (default: TARGET_CSS_FILE).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .contracts.errors import ExtractionError
from .core.logging import configure_logging
from .services.extraction_service import extraction_service
from .services.stylesheet_service import StylesheetService


logger = logging.getLogger(__name__)


def scan(args: argparse.Namespace) -> int:
    path = Path(args.file)
    suggestions = extraction_service.find_suggestions(
        path.read_text(encoding="utf-8"), args.threshold
    )
    for suggestion in suggestions:
        groups = ", ".join(f"{c}: {n}" for c, n in suggestion.categories.items())
        print(f"{path}:{suggestion.describe()} ({groups})")
    return 0


def extract(args: argparse.Namespace) -> int:
    path = Path(args.file)
    text = path.read_text(encoding="utf-8")
    plan = extraction_service.plan_extraction(
        text,
        args.line - 1,
        args.name,
        group_by_category=False if args.flat else None,
        preserve_state_variants=True if args.preserve_states else None,
        force=args.force,
    )
    updated = plan.apply(text)

    print(plan.css, end="")
    line_index = plan.location.line_index
    print(f"{path}:{line_index + 1}: {updated.split(chr(10))[line_index].strip()}")

    if args.write:
        stylesheet = StylesheetService().append_rule(args.css, plan.css)
        path.write_text(updated, encoding="utf-8")
        print(f"Wrote .{plan.class_name} to {stylesheet}")

    print(plan.describe(), file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shrink-tailwind",
        description="Extract long Tailwind class lists into @apply rules",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Scan command
    scan_parser = subparsers.add_parser("scan", help="List lines with long class lists")
    scan_parser.add_argument("file", help="Markup file to scan")
    scan_parser.add_argument("--threshold", type=int, default=None,
                             help="Minimum class count (default: CLASS_THRESHOLD)")
    scan_parser.set_defaults(func=scan)

    # Extract command
    extract_parser = subparsers.add_parser("extract", help="Extract one class list")
    extract_parser.add_argument("file", help="Markup file")
    extract_parser.add_argument("line", type=int, help="1-based line number")
    extract_parser.add_argument("name", help="Class name for the generated rule")
    extract_parser.add_argument("--flat", action="store_true",
                                help="Do not group classes by category")
    extract_parser.add_argument("--preserve-states", action="store_true",
                                help="Keep state variants (hover:, focus:, ...) inline")
    extract_parser.add_argument("--force", action="store_true",
                                help="Extract even below the threshold")
    extract_parser.add_argument("--write", action="store_true",
                                help="Rewrite the file and append to the stylesheet")
    extract_parser.add_argument("--css", default=None,
                                help="Stylesheet path (default: TARGET_CSS_FILE)")
    extract_parser.set_defaults(func=extract)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        return args.func(args)
    except (ExtractionError, OSError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
