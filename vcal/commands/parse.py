"""Komenda: vcal parse — parsowanie wsadowego tekstu urlopowego (podgląd)."""

from __future__ import annotations

import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from batch_parser import parse
from data_model import LeaveType, ParseReport
from vcal._input import read_names, read_text

console = Console()

TYPE_STYLE: dict[LeaveType, str] = {
    LeaveType.ANNUAL:         "blue",
    LeaveType.MORNING_HALF:   "green",
    LeaveType.AFTERNOON_HALF: "yellow",
    LeaveType.SPECIAL:        "red",
    LeaveType.SICK:           "dim",
    LeaveType.WORK:           "magenta",
}


# ---------------------------------------------------------------------------
# Wyświetlanie
# ---------------------------------------------------------------------------

def show_report(report: ParseReport) -> None:
    if report.batches:
        table = Table(
            box=box.SIMPLE_HEAD,
            show_header=True,
            header_style="bold white",
            row_styles=["", "dim"],
            expand=False,
        )
        table.add_column("PRACOWNIK", no_wrap=True, style="bold")
        table.add_column("DATA",      no_wrap=True, style="cyan")
        table.add_column("TYP",       no_wrap=True)
        table.add_column("WPISANO",   no_wrap=True, style="dim")

        for batch in report.batches:
            for i, entry in enumerate(batch.vacations):
                table.add_row(
                    batch.employee_name if i == 0 else "",
                    entry.date,
                    Text(entry.type.label, style=TYPE_STYLE.get(entry.type, "")),
                    entry.original_text,
                )

        console.print()
        console.print(table)
        console.print(
            f"  [dim]{len(report.batches)} pracowników, {report.entry_count} wpisów[/dim]\n"
        )
    else:
        console.print("[yellow]Nie rozpoznano żadnych wpisów.[/yellow]")

    if report.errors:
        console.print("[red]Błędy:[/red]")
        for e in report.errors:
            console.print(f"  [red]·[/red] {e}")

    if report.warnings:
        console.print("[yellow]Ostrzeżenia:[/yellow]")
        for w in report.warnings:
            console.print(f"  [yellow]·[/yellow] {w}")


def report_to_json(report: ParseReport) -> dict:
    return {
        "is_valid": report.is_valid,
        "batches": [
            {
                "employee_name": b.employee_name,
                "vacations": [
                    {"date": v.date, "type": v.type.value, "original_text": v.original_text}
                    for v in b.vacations
                ],
            }
            for b in report.batches
        ],
        "errors": [
            {"line_number": d.line_number, "message": d.message} for d in report.errors
        ],
        "warnings": [
            {"line_number": d.line_number, "message": d.message} for d in report.warnings
        ],
    }


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def known_names(args: argparse.Namespace) -> list[str]:
    names = read_names(args.employees)
    if args.from_db:
        from registration import LeaveStoreError, PostgresLeaveStore
        from vcal._db import get_connection

        try:
            conn = get_connection()
        except Exception as e:
            console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
            raise SystemExit(1)
        try:
            names.extend(e.name for e in PostgresLeaveStore(conn).list_employees())
        except LeaveStoreError as e:
            console.print(f"[red]Błąd odczytu pracowników:[/red] {e}")
            raise SystemExit(1)
        finally:
            conn.close()
    return names


def run(args: argparse.Namespace) -> None:
    text = read_text(args.text_file)
    report = parse(text, known_names(args), args.year, args.month)

    if args.json_output:
        print(json.dumps(report_to_json(report), ensure_ascii=False, indent=2))
    else:
        show_report(report)

    if not report.is_valid:
        sys.exit(1)


def add_input_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "text_file",
        metavar="PLIK",
        help='Plik z tekstem wsadowym ("-" = stdin).',
    )
    p.add_argument(
        "--employees", "-e",
        metavar="PLIK",
        default=None,
        help="Plik z nazwami znanych pracowników (jedna na linię).",
    )
    p.add_argument(
        "--year",
        type=int,
        default=None,
        help="Rok dla dat bez roku (domyślnie: bieżący).",
    )
    p.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        metavar="1-12",
        default=None,
        help="Miesiąc dla dat podanych samym dniem (domyślnie: bieżący).",
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje tekst wsadowy i pokazuje rozpoznane urlopy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje tekst: linia z nazwą pracownika, pod nią linie z datami
(rozdzielone , lub ;). Półdniówki: 0716(오전), 0716(PM).

Obsługiwane formaty dat (w tej kolejności):
  20250717  2025-07-17  25-07-17  250717  0717  7/17  7-17  17

Przykłady:
  vcal parse urlopy.txt
  vcal parse urlopy.txt --employees pracownicy.txt
  vcal parse - --from-db --json-output < urlopy.txt
        """,
    )
    add_input_arguments(p)
    p.add_argument(
        "--from-db",
        action="store_true",
        help="Dołącz nazwy pracowników z bazy danych.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport jako JSON na stdout.",
    )
    p.set_defaults(func=run)
