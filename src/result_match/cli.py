"""Rich command-line demo for result-match.

Produces an outcome with a small local producer and renders it through the
tagged dispatcher, the class-based ``match`` method, or both.
"""

import argparse
import logging
import os
import sys
from typing import Any, List, Optional, Tuple, Union

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import classes, tagged
from .convert import from_tagged

console = Console()
logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "RESULT_MATCH_LOG_LEVEL"

STYLES = ("tagged", "class", "both")

Outcome = Union[tagged.Result[Any, Any], classes.Result[Any, Any]]


def divide(a: float, b: float) -> tagged.Result[float, str]:
    if b == 0:
        return tagged.Failure("division by zero")
    return tagged.Success(a / b)


def parse_int(text: str) -> tagged.Result[int, str]:
    try:
        return tagged.Success(int(text))
    except ValueError:
        return tagged.Failure(f"not an integer: {text!r}")


def describe(outcome: Outcome) -> Tuple[str, Any]:
    """Return ``(branch, payload)`` for an outcome of either encoding."""
    if isinstance(outcome, classes.Result):
        return outcome.match(
            lambda s: ("success", s.value),
            lambda f: ("failure", f.reason),
        )
    return tagged.result(
        outcome,
        lambda s: ("success", s.value),
        lambda f: ("failure", f.reason),
    )


def show_outcomes(rows: List[Tuple[str, Outcome]]) -> None:
    """Print one table row per (encoding, outcome) pair."""
    table = Table(title="Outcome", box=box.ROUNDED)
    table.add_column("Encoding", style="cyan", no_wrap=True)
    table.add_column("Branch", style="bold")
    table.add_column("Payload", style="magenta")

    for encoding, outcome in rows:
        branch, payload = describe(outcome)
        colour = "green" if branch == "success" else "red"
        table.add_row(encoding, f"[{colour}]{branch}[/{colour}]", repr(payload))

    console.print(table)


def resolve_log_level(verbose: bool) -> int:
    """--verbose wins, then RESULT_MATCH_LOG_LEVEL, then WARNING."""
    if verbose:
        return logging.DEBUG

    name = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not name:
        return logging.WARNING

    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level

    console.print(
        f"[yellow]![/yellow] Ignoring invalid {LOG_LEVEL_ENV_VAR}={name!r}",
        style="dim",
    )
    return logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=resolve_log_level(verbose),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Dispatch on a Success/Failure outcome without exceptions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  result-match divide 10 4               # success branch
  result-match divide 1 0 --style both   # failure branch, both encodings
  result-match parse 42x                 # failure branch
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    divide_parser = subparsers.add_parser("divide", help="divide A by B")
    divide_parser.add_argument("a", type=float)
    divide_parser.add_argument("b", type=float)

    parse_parser = subparsers.add_parser("parse", help="parse TEXT as an integer")
    parse_parser.add_argument("text")

    for sub in (divide_parser, parse_parser):
        sub.add_argument(
            "--style", choices=STYLES, default="tagged", help="encoding to dispatch with"
        )

    args = parser.parse_args()
    configure_logging(args.verbose)

    if args.command == "divide":
        outcome = divide(args.a, args.b)
    else:
        outcome = parse_int(args.text)
    logger.debug(f"Produced {outcome!r}")

    rows: List[Tuple[str, Outcome]] = []
    if args.style in ("tagged", "both"):
        rows.append(("tagged", outcome))
    if args.style in ("class", "both"):
        rows.append(("class", from_tagged(outcome)))
    show_outcomes(rows)

    sys.exit(0 if tagged.is_success(outcome) else 1)


if __name__ == "__main__":
    main()
