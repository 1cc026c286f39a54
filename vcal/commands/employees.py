"""Komenda: vcal employees — listowanie pracowników z bazy danych."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from registration import LeaveStoreError, PostgresLeaveStore
from vcal._db import get_connection

console = Console()


def run(args: argparse.Namespace) -> None:
    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia:[/red] {e}")
        raise SystemExit(1)

    try:
        employees = PostgresLeaveStore(conn).list_employees()
    except LeaveStoreError as e:
        console.print(f"[red]Błąd odczytu:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    if args.team:
        employees = [e for e in employees if e.team in args.team]

    if not employees:
        console.print("[yellow]Brak pracowników spełniających kryteria.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("ID",    justify="right", no_wrap=True, style="dim")
    table.add_column("NAZWA", no_wrap=True, style="bold")
    table.add_column("ZESPÓŁ", no_wrap=True, style="cyan")

    for e in employees:
        table.add_row(str(e.id), e.name, e.team)

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(employees)} pracowników[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "employees",
        help="Listuje pracowników z bazy danych.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje pracowników zapisanych w bazie (również utworzonych automatycznie
przez vcal register).

Przykłady:
  vcal employees
  vcal employees --team 기타
        """,
    )
    p.add_argument(
        "--team", "-t",
        nargs="+",
        metavar="ZESPÓŁ",
        help="Filtruj po zespole (można podać kilka).",
    )
    p.set_defaults(func=run)
