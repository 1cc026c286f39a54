"""Komenda: vcal register — parsowanie i zapis urlopów w bazie (z nadpisywaniem)."""

from __future__ import annotations

import argparse

from rich.console import Console

from batch_parser import parse
from data_model import Employee
from registration import (
    LeaveStore,
    LeaveStoreError,
    MemoryLeaveStore,
    PostgresLeaveStore,
    RegistrationResult,
    register_batches,
)
from vcal._db import get_connection
from vcal._input import read_names, read_text
from vcal.commands.parse import add_input_arguments, show_report

console = Console()


def show_result(result: RegistrationResult) -> None:
    console.print(
        f"[green]Zapisano:[/green] {result.success_count}  "
        f"[red]Nieudane:[/red] {result.failure_count}  "
        f"[yellow]Nadpisane:[/yellow] {result.overwrite_count}"
    )
    if result.new_employees:
        console.print(
            f"[cyan]Nowi pracownicy:[/cyan] {', '.join(result.new_employees)}"
        )
    for f in result.failures:
        console.print(
            f"  [red]·[/red] {f.employee_name} {f.entry.date} ({f.entry.type.label}): {f.reason}"
        )


def _register(store: LeaveStore, text: str, args: argparse.Namespace) -> RegistrationResult:
    try:
        names = [e.name for e in store.list_employees()]
    except LeaveStoreError as e:
        console.print(f"[red]Błąd odczytu pracowników:[/red] {e}")
        raise SystemExit(1)

    report = parse(text, names, args.year, args.month)
    show_report(report)

    if not report.is_valid:
        console.print("[red]Rejestracja zablokowana — popraw błędy i spróbuj ponownie.[/red]")
        raise SystemExit(1)
    if not report.batches:
        console.print("[yellow]Brak danych do zapisania.[/yellow]")
        raise SystemExit(0)

    try:
        return register_batches(report, store)
    except LeaveStoreError as e:
        console.print(f"[red]Błąd zapisu:[/red] {e}")
        raise SystemExit(1)


def run(args: argparse.Namespace) -> None:
    text = read_text(args.text_file)

    if args.dry_run:
        employees = [Employee(id=i, name=n) for i, n in enumerate(read_names(args.employees), start=1)]
        result = _register(MemoryLeaveStore(employees), text, args)
        console.print("[dim](dry-run — nic nie zapisano w bazie)[/dim]")
        show_result(result)
        return

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        result = _register(PostgresLeaveStore(conn), text, args)
    finally:
        conn.close()

    show_result(result)
    if result.failure_count:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "register",
        help="Parsuje tekst wsadowy i zapisuje urlopy w bazie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje tekst wsadowy i zapisuje każdy wpis jako rekord urlopowy.

  - nieznany pracownik jest tworzony automatycznie (zespół 기타)
  - istniejący urlop tego samego pracownika w tym samym dniu jest nadpisywany
  - błędy parsowania blokują rejestrację
  - błąd zapisu jednego wpisu nie przerywa pozostałych

Przykłady:
  vcal register urlopy.txt
  vcal register urlopy.txt --dry-run --employees pracownicy.txt
        """,
    )
    add_input_arguments(p)
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Rejestracja w pamięci (bez bazy); znani pracownicy z --employees.",
    )
    p.set_defaults(func=run)
