"""Komenda: vcal spans — ciągi urlopowe (ConsecutiveSpan) w wybranym miesiącu."""

from __future__ import annotations

import argparse
import datetime as dt
import json

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from calendar_engine import aggregate_all, month_period, span_geometry
from vcal._input import add_records_argument, load_records
from vcal.commands.parse import TYPE_STYLE

console = Console(width=200)

_BAR_WIDTH = 31


def _bar(left: float, width: float) -> str:
    start = round(left * _BAR_WIDTH)
    length = max(1, round(width * _BAR_WIDTH))
    return "·" * start + "█" * length + "·" * max(0, _BAR_WIDTH - start - length)


def run(args: argparse.Namespace) -> None:
    today = dt.date.today()
    year = args.year or today.year
    month = args.month or today.month

    records = load_records(args)
    if args.employee is not None:
        records = [r for r in records if str(r.employee_id) == args.employee]

    spans_by_employee = aggregate_all(records, year, month)
    period_start, period_length = month_period(year, month)

    if args.json_output:
        out = [
            {
                "employee_id":       s.employee_id,
                "start_date":        s.start_date.isoformat(),
                "end_date":          s.end_date.isoformat(),
                "type":              s.type.value,
                "description":       s.description,
                "source_record_ids": list(s.source_record_ids),
            }
            for spans in spans_by_employee.values()
            for s in spans
        ]
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return

    rows = [(emp, s) for emp, spans in spans_by_employee.items() for s in spans]
    if not rows:
        console.print(f"[yellow]Brak urlopów w {year}-{month:02d}.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("PRACOWNIK", no_wrap=True, style="bold")
    table.add_column("OD",        no_wrap=True, style="cyan")
    table.add_column("DO",        no_wrap=True, style="cyan")
    table.add_column("DNI",       justify="right", no_wrap=True)
    table.add_column("TYP",       no_wrap=True)
    table.add_column("REKORDY",   no_wrap=False, max_width=30, style="dim")
    table.add_column("KALENDARZ", no_wrap=True)

    for emp, span in rows:
        geo = span_geometry(span, period_start, period_length)
        bar = _bar(geo.left, geo.width) if geo else ""
        table.add_row(
            str(emp),
            span.start_date.isoformat(),
            span.end_date.isoformat(),
            str(span.day_count),
            Text(span.type.label, style=TYPE_STYLE.get(span.type, "")),
            ", ".join(str(i) for i in span.source_record_ids),
            bar,
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(rows)} spanów w {year}-{month:02d}[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "spans",
        help="Pokazuje ciągi kolejnych dni urlopu w miesiącu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Łączy jednodniowe rekordy urlopowe w ciągi kolejnych dni (per pracownik).
Ciąg z różnymi typami dni jest pokazywany jako 연차.

Przykłady:
  vcal spans --year 2025 --month 7
  vcal spans --records urlopy.json --employee 3
  vcal spans --records urlopy.json --json-output
        """,
    )
    add_records_argument(p)
    p.add_argument("--year", type=int, default=None, help="Rok (domyślnie: bieżący).")
    p.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        metavar="1-12",
        default=None,
        help="Miesiąc (domyślnie: bieżący).",
    )
    p.add_argument(
        "--employee",
        metavar="ID",
        default=None,
        help="Tylko wskazany pracownik.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz spany jako JSON na stdout.",
    )
    p.set_defaults(func=run)
