"""Command line entry point: run one lesson against the configured database."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .errors import AppError
from .lesson import Lesson
from .lessons_grouping import GROUPING_LESSONS
from .lessons_select import SELECT_LESSONS
from .utils import get_database

DEFAULT_LESSON = 12

_LESSONS: dict[int, Lesson] = {
    lesson.number: lesson for lesson in (*SELECT_LESSONS, *GROUPING_LESSONS)
}


def get_lesson(number: int) -> Lesson:
    """Return the lesson with the given number."""
    try:
        return _LESSONS[number]
    except KeyError:
        raise ValueError(
            f"no lesson numbered {number}; choose from {min(_LESSONS)} to {max(_LESSONS)}"
        ) from None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlprogress",
        description="Run a query lesson and show its data frame when ORM and SQL agree.",
    )
    parser.add_argument(
        "lesson",
        nargs="?",
        type=int,
        default=DEFAULT_LESSON,
        help=f"lesson number (default {DEFAULT_LESSON})",
    )
    parser.add_argument("--url", help="database URL (default: DATABASE_URL)")
    parser.add_argument(
        "--env-file", help="environment file to load (default: nearest .env)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load the environment file, connect and display the chosen lesson."""
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        lesson = get_lesson(args.lesson)
    except ValueError as exc:
        parser.error(str(exc))

    env_file = args.env_file or find_dotenv(usecwd=True)
    if not env_file or not Path(env_file).is_file():
        print("error: .env file not found", file=sys.stderr)
        return 1
    load_dotenv(env_file)

    try:
        with get_database(args.url) as (session, connection):
            lesson.display(session, connection)
    except AppError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())