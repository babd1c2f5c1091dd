"""Command-line entry point: list, show and run lessons."""

from __future__ import annotations

import argparse
import logging
import sys
import uuid
from typing import get_args

from designkit.config import LogLevel, settings
from designkit.errors import UnknownKindError
from designkit.lessons import LESSONS, PATTERN, SOLID, get_lesson, iter_lessons
from designkit.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="designkit",
        description="SOLID principles and creational patterns, before and after.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(get_args(LogLevel)),
        help="Override DESIGNKIT_LOG_LEVEL.",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        help="Override DESIGNKIT_LOG_FORMAT.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List available lessons.")
    list_cmd.add_argument("--category", choices=[SOLID, PATTERN])

    show_cmd = sub.add_parser("show", help="Print a lesson's summary.")
    show_cmd.add_argument("slug")

    run_cmd = sub.add_parser("run", help="Run lesson demos.")
    run_cmd.add_argument("slugs", nargs="*", metavar="slug")
    run_cmd.add_argument("--all", action="store_true", help="Run every lesson.")
    return parser


def _cmd_list(args: argparse.Namespace) -> int:
    for lesson in iter_lessons(args.category):
        print(f"{lesson.slug:<18} {lesson.title}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    lesson = get_lesson(args.slug)
    print(lesson.title)
    print()
    print(lesson.summary)
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    if args.all:
        lessons = list(LESSONS.values())
    elif args.slugs:
        # Resolve everything first so a typo fails before any demo prints.
        lessons = [get_lesson(slug) for slug in args.slugs]
    else:
        print("designkit run: give at least one lesson or --all", file=sys.stderr)
        return 2

    for lesson in lessons:
        logger.info("Running lesson %s", lesson.slug)
        print(f"== {lesson.title} ==")
        lesson.demo()
        print()
    return 0


COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "run": _cmd_run,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        settings.log_level = args.log_level
    if args.log_format:
        settings.log_format = args.log_format
    setup_logging(run_id=str(uuid.uuid4()))

    try:
        return COMMANDS[args.command](args)
    except UnknownKindError as e:
        print(f"designkit: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
