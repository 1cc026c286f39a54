"""Komenda: vcal check-conflict — sprawdza kolizję pojedynczego wpisu urlopowego."""

from __future__ import annotations

import argparse
import datetime as dt

from rich.console import Console

from batch_parser import normalize
from calendar_engine import LeaveCandidate, aggregate, find_conflicts, find_span
from data_model import LeaveRecord, RecordId
from vcal._input import add_records_argument, load_records

console = Console()


def _match_id(raw: str, known: list[RecordId]) -> RecordId:
    """Identyfikator z CLI (str) w typie użytym w rekordach (int lub str)."""
    for k in known:
        if str(k) == raw:
            return k
    return int(raw) if raw.isdigit() else raw


def _parse_date(raw: str) -> dt.date:
    today = dt.date.today()
    nd = normalize(raw, today.year, today.month)
    if nd is None:
        console.print(f"[red]Nierozpoznana data:[/red] {raw}")
        raise SystemExit(2)
    return dt.date.fromisoformat(nd.date)


def run(args: argparse.Namespace) -> None:
    records: list[LeaveRecord] = load_records(args)

    employee_id = _match_id(args.employee, [r.employee_id for r in records])
    record_id = _match_id(args.id, [r.id for r in records]) if args.id else None
    candidate = LeaveCandidate(
        employee_id=employee_id,
        date=_parse_date(args.date),
        id=record_id,
    )

    # Edycja: span, do którego należy edytowany rekord (liczony na całym zbiorze)
    editing_span = None
    if record_id is not None:
        editing_span = find_span(aggregate(records, employee_id), record_id)

    conflicts = find_conflicts(candidate, records, editing_span)

    if not conflicts:
        console.print(
            f"[green]OK[/green]  Brak kolizji: pracownik [bold]{employee_id}[/bold], "
            f"{candidate.date.isoformat()}"
        )
        return

    console.print(
        f"[red]KOLIZJA[/red]  Pracownik [bold]{employee_id}[/bold] ma już urlop "
        f"{candidate.date.isoformat()}:"
    )
    for r in conflicts:
        console.print(f"  [red]·[/red] id={r.id} {r.type.label} {r.description or ''}".rstrip())
    raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check-conflict",
        help="Sprawdza, czy nowy/edytowany urlop koliduje z istniejącym.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Sprawdza kolizję (ten sam pracownik, ta sama data) dla nowego wpisu lub
edycji istniejącego rekordu (--id). Przy edycji wewnątrz wielodniowego
ciągu rekordy tego ciągu nie są traktowane jako kolizja.

Kod wyjścia: 0 = brak kolizji, 1 = kolizja.

Przykłady:
  vcal check-conflict --employee 1 --date 2025-07-15
  vcal check-conflict --employee 1 --date 0715 --id 5 --records urlopy.json
        """,
    )
    add_records_argument(p)
    p.add_argument("--employee", required=True, metavar="ID", help="Id pracownika.")
    p.add_argument("--date", required=True, metavar="DATA", help="Data (dowolny obsługiwany format).")
    p.add_argument("--id", default=None, metavar="ID", help="Id edytowanego rekordu.")
    p.set_defaults(func=run)
