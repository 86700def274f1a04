#!/usr/bin/env python3
import argparse
import importlib
import sys

from superkit import __version__
from superkit.lessons import LESSONS
from superkit.lib import board
from superkit.lib.config import Config
from superkit.lib.logger import Logger


class LessonNotFoundError(Exception):
    """Raised when a requested lesson does not exist."""

    pass


def _lesson_name(lesson: str) -> str:
    """
    Resolve a lesson number ('1', '01') or module name ('pwm_led') to a module name.

    Raises:
        LessonNotFoundError: If nothing matches, or a number is shared by several lessons.
    """

    if lesson in LESSONS:
        return lesson

    if lesson.isdigit():
        number = f"{int(lesson):02d}"
        matches = [name for name, (num, _) in LESSONS.items() if num == number]
        if len(matches) == 1:
            return matches[0]
        if matches:
            raise LessonNotFoundError(f"Lesson {number} is ambiguous, use one of: {', '.join(matches)}")

    raise LessonNotFoundError(f"No lesson named '{lesson}'")


def _resolve_lesson(lesson: str):
    """
    Import 'superkit.lessons.<name>' and return the module object.

    Raises:
        LessonNotFoundError: If the lesson doesn't exist.
        ImportError: If the module exists but fails due to an internal dependency.
    """

    return importlib.import_module(f"superkit.lessons.{_lesson_name(lesson)}")


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level argparse parser with subcommands."""

    parser = argparse.ArgumentParser(prog="superkit", description="Sunfounder Super Starter Kit lessons")
    sub = parser.add_subparsers(dest="command", required=True)

    p_version = sub.add_parser("version", help="Print the package version")
    p_version.set_defaults(handler=cmd_version)

    p_list = sub.add_parser("list", help="List the available lessons")
    p_list.set_defaults(handler=cmd_list)

    p_run = sub.add_parser("run", help="Run a lesson (e.g., 01 or pwm_led)")
    p_run.add_argument("lesson", help="Lesson number or name, e.g. '4' or 'pwm_led'")
    p_run.add_argument("--cycles", type=int, help="Stop after N loops (0 runs until Ctrl-C)")
    p_run.add_argument("--mock", action="store_true", help="Use mock GPIO pins instead of real hardware")
    p_run.set_defaults(handler=cmd_run)

    return parser


def cmd_version(_: argparse.Namespace) -> int:
    """
    Print the package version.

    Args:
        _ (argparse.Namespace): Unused argparse namespace.

    Returns:
        int: Process exit code (0 on success).
    """

    print(__version__)
    return 0


def cmd_list(_: argparse.Namespace) -> int:
    for name, (number, title) in LESSONS.items():
        Logger.info(f"{number}  {name:<15} {title}")
    return 0


def cmd_run(ns: argparse.Namespace) -> int:
    try:
        if Config.get("dev", "log_level", Logger.INFO) == Logger.DEBUG:
            Logger.debug("Developer logging enabled.")
        if Config.get("dev", "stack_trace_errors", False):
            Logger.debug("Stack trace errors enabled.")

        if ns.cycles is not None:
            if ns.cycles < 0:
                Logger.error("--cycles must be 0 or more")
                return 1
            Config.set("runner", "cycles", ns.cycles)

        board.use_pin_factory("mock" if ns.mock else None)

        mod = _resolve_lesson(ns.lesson)
        main_fn = getattr(mod, "execute", None)
        if not callable(main_fn):
            Logger.error(f"Lesson '{ns.lesson}' is invalid: missing callable execute()")
            return 1

        Logger.info(f"Running lesson '{mod.__name__.rsplit('.', 1)[-1]}'...")
        main_fn()
        Logger.success("Lesson complete.")
        return 0

    except LessonNotFoundError as e:
        Logger.error(str(e))
        return 1
    except Exception as e:
        if Config.get("dev", "stack_trace_errors", False):
            raise

        Logger.error(f"Failed to run lesson '{ns.lesson}': {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `superkit` CLI.

    Initializes logging, loads configuration, and dispatches subcommands.

    Args:
        argv (list[str] | None): Arguments excluding the executable; if None, uses sys.argv[1:].

    Returns:
        int: Process exit code.
    """

    Logger.setup(Logger.INFO)

    Config.load()
    Logger.set_level(Config.get("dev", "log_level", Logger.INFO))

    parser = _build_parser()
    ns = parser.parse_args(argv)
    return ns.handler(ns)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        if Config.get("dev", "stack_trace_errors", False):
            raise
        Logger.error(f"Error: {e}")
        sys.exit(1)
