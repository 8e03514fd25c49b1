"""
genere/cli/main.py

Command-line front end.

    genere generate main < table.json
    genere generate main --input table.json --seed 42 --count 3
    genere regender f < text.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from genere import __version__
from genere.core.domain.exceptions import DomainError
from genere.core.domain.models import Gender
from genere.generator import Generator
from genere.shared.config import settings
from genere.shared.logging_config import configure_logging, get_logger
from genere.shared.observability import setup_observability

logger = get_logger(__name__)

# Symbols used by `regender`: the text depends on a single forced gender.
REGENDER_SYMBOL = "main"
REGENDER_DEPENDENCY = "gender"


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _gender_arg(value: str) -> Gender:
    try:
        return Gender.parse(value)
    except DomainError as exc:
        raise argparse.ArgumentTypeError(exc.message) from exc


def _forced_gender_arg(value: str) -> Tuple[str, Gender]:
    name, sep, gender = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=GENDER, got '{value}'")
    return name, _gender_arg(gender)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genere",
        description="Generate random text with grammatical gender agreement.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {settings.LOG_LEVEL}).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # `generate` command
    gen = subparsers.add_parser(
        "generate",
        help="Instantiate a symbol of a JSON table.",
    )
    gen.add_argument("symbol", help="Symbol to instantiate.")
    gen.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help="JSON table to read. If omitted or '-', read from stdin.",
    )
    gen.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output.",
    )
    gen.add_argument(
        "--count",
        "-n",
        type=int,
        default=1,
        help="Number of texts to generate, one per line.",
    )
    gen.add_argument(
        "--gender",
        "-g",
        metavar="NAME=GENDER",
        type=_forced_gender_arg,
        action="append",
        default=[],
        help="Force the gender (m, f or n) of a symbol. Repeatable.",
    )

    # `regender` command
    regender = subparsers.add_parser(
        "regender",
        help="Resolve the gender forms of a plain text for one gender.",
    )
    regender.add_argument(
        "gender",
        type=_gender_arg,
        help="Gender to apply: m, f or n.",
    )
    regender.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help="Text file to read. If omitted or '-', read from stdin.",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_input(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=settings.TABLE_ENCODING)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_generate(args: argparse.Namespace) -> int:
    generator = Generator()
    generator.load_json(_read_input(args.input))
    for name, gender in args.gender:
        generator.force_gender(name, gender)

    seed = args.seed if args.seed is not None else settings.DEFAULT_SEED
    for i in range(args.count):
        print(generator.instantiate(args.symbol, seed=None if seed is None else seed + i))
    return 0


def _cmd_regender(args: argparse.Namespace) -> int:
    generator = Generator()
    generator.define(f"{REGENDER_SYMBOL}[{REGENDER_DEPENDENCY}]", [_read_input(args.input)])
    generator.force_gender(REGENDER_DEPENDENCY, args.gender)
    print(generator.instantiate(REGENDER_SYMBOL))
    return 0


_COMMANDS = {
    "generate": _cmd_generate,
    "regender": _cmd_regender,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    setup_observability()

    if args.command == "generate" and args.count < 1:
        parser.error("--count must be at least 1")

    try:
        exit_code = _COMMANDS[args.command](args)
    except DomainError as exc:
        logger.error("command_failed", command=args.command, error=type(exc).__name__)
        print(f"Error: {exc.message}", file=sys.stderr)
        exit_code = 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = 1

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
