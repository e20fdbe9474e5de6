# formatkit/cli/main.py
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import yaml

from formatkit import configure_logging
from formatkit.config import FormatKitSettings, settings as global_settings
from formatkit.core.exceptions import FormatKitError
from formatkit.formatters import format_duration, join_natural, join_with_overflow


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="formatkit", description="Format values for display")
    parser.add_argument("--config", type=str, help="Path to a settings YAML file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Join items into a natural-language list")
    list_parser.add_argument("items", nargs="*", help="Items to join")
    list_parser.add_argument("--limit", type=int, help="Overflow limit (default: settings.overflow_limit)")
    list_parser.add_argument("--all", action="store_true", help="Never summarize the overflow")
    list_parser.add_argument("--separator", default=", ", help="Separator between items")
    list_parser.add_argument("--last-separator", default=" and ", help="Separator before the last item")
    list_parser.add_argument("--template", default="%d more", help="Overflow template with one %%d")

    duration_parser = subparsers.add_parser("duration", help="Format a number of seconds")
    duration_parser.add_argument("seconds", type=int, help="Duration in seconds")
    duration_parser.add_argument("--abbreviated", "-a", action="store_true", help="Use s/m/h/d units")

    subparsers.add_parser("settings", help="Print the effective settings as YAML")
    return parser


def _load_settings(path: Optional[str]) -> FormatKitSettings:
    if path:
        return FormatKitSettings.from_yaml(path)
    return global_settings


def run(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    args = _build_parser().parse_args(argv)

    try:
        cfg = _load_settings(args.config)
        configure_logging(args.debug or cfg.debug)

        if args.command == "list":
            if args.all:
                out = join_natural(args.items, args.separator, args.last_separator)
            else:
                limit = args.limit if args.limit is not None else cfg.overflow_limit
                out = join_with_overflow(
                    args.items,
                    limit=limit,
                    separator=args.separator,
                    last_separator=args.last_separator,
                    overflow_template=args.template,
                )
        elif args.command == "duration":
            out = format_duration(args.seconds, abbreviated=args.abbreviated)
        else:
            out = yaml.safe_dump(cfg.as_dict(), sort_keys=False).rstrip("\n")
    except (FormatKitError, OSError) as e:
        print(f"formatkit: {e}", file=sys.stderr)
        return 2

    print(out)
    return 0


def main():
    sys.exit(run(sys.argv[1:]))
