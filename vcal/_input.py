"""Wspólne wejście komend: tekst wsadowy, lista pracowników, rekordy (JSON lub baza)."""

from __future__ import annotations

import argparse
import pathlib
import sys

from rich.console import Console

from calendar_engine import RecordsFileError, load_records_json
from data_model import LeaveRecord

console = Console(stderr=True)


def read_text(path_arg: str) -> str:
    """Czyta plik tekstowy; "-" oznacza stdin."""
    if path_arg == "-":
        return sys.stdin.read()
    path = pathlib.Path(path_arg)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    return path.read_text(encoding="utf-8")


def read_names(path_arg: str | None) -> list[str]:
    """Jedna nazwa pracownika na linię; puste linie pomijane."""
    if not path_arg:
        return []
    return [line.strip() for line in read_text(path_arg).splitlines() if line.strip()]


def load_records(args: argparse.Namespace) -> list[LeaveRecord]:
    """Rekordy z --records (JSON) albo z bazy, jeśli pliku nie podano."""
    if args.records:
        try:
            return load_records_json(args.records)
        except FileNotFoundError:
            console.print(f"[red]Plik nie istnieje:[/red] {args.records}")
            raise SystemExit(1)
        except RecordsFileError as e:
            console.print(f"[red]Błędny plik rekordów:[/red] {e}")
            raise SystemExit(1)

    from registration import LeaveStoreError, PostgresLeaveStore
    from vcal._db import get_connection

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        return PostgresLeaveStore(conn).list_records()
    except LeaveStoreError as e:
        console.print(f"[red]Błąd odczytu rekordów:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()


def add_records_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--records", "-r",
        metavar="PLIK.json",
        default=None,
        help="Plik JSON z rekordami urlopów (domyślnie: odczyt z bazy).",
    )
