"""
vcal — narzędzie CLI silnika urlopowego.

Użycie:
  vcal [--verbose] <komenda> [opcje]

Komendy:
  parse           Parsuje tekst wsadowy i pokazuje rozpoznane urlopy.
  register        Parsuje tekst wsadowy i zapisuje urlopy w bazie.
  spans           Pokazuje ciągi kolejnych dni urlopu w miesiącu.
  check-conflict  Sprawdza kolizję nowego/edytowanego urlopu.
  employees       Listuje pracowników z bazy danych.
  apply-schema    Aplikuje db/schema.sql do bazy danych (idempotentne).
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.logging import RichHandler

# Windows: terminal może używać cp1252, wymuszamy UTF-8 (nazwy pracowników po koreańsku)
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from vcal.commands import parse as cmd_parse
from vcal.commands import register as cmd_register
from vcal.commands import spans as cmd_spans
from vcal.commands import check_conflict as cmd_check_conflict
from vcal.commands import employees as cmd_employees
from vcal.commands import apply_schema as cmd_apply_schema


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vcal",
        description="vcal — wsadowe wprowadzanie i kalendarz urlopów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="vcal 0.1.0"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Szczegółowe logi (DEBUG).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_register.add_parser(subparsers)
    cmd_spans.add_parser(subparsers)
    cmd_check_conflict.add_parser(subparsers)
    cmd_employees.add_parser(subparsers)
    cmd_apply_schema.add_parser(subparsers)

    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
