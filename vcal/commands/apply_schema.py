"""Komenda: vcal apply-schema — tworzy typ leave_type i tabele employee / leave_record."""

from __future__ import annotations

import argparse
import pathlib
import re

import psycopg2
from rich import box
from rich.console import Console
from rich.table import Table

from vcal._db import get_connection

console = Console()

SCHEMA_PATH = pathlib.Path(__file__).resolve().parents[2] / "db" / "schema.sql"

_DOLLAR_RE = re.compile(r"\$\$")


def split_statements(sql: str) -> list[str]:
    """
    Dzieli skrypt SQL na pojedyncze instrukcje.

    Instrukcja kończy się średnikiem na końcu linii, o ile nie jesteśmy
    wewnątrz bloku $$ ... $$ (ciało DO/funkcji). Komentarze i puste linie
    między instrukcjami są pomijane.
    """
    stmts: list[str] = []
    current: list[str] = []
    quoted = False

    for line in sql.splitlines():
        stripped = line.strip()
        if not current and (not stripped or stripped.startswith("--")):
            continue
        current.append(line)
        quoted ^= len(_DOLLAR_RE.findall(line)) % 2 == 1
        if not quoted and stripped.endswith(";"):
            stmts.append("\n".join(current).strip())
            current = []

    if current:
        stmts.append("\n".join(current).strip())
    return stmts


def _summary(stmt: str) -> str:
    return " ".join(stmt.split()[:6])


def show_statements(stmts: list[str]) -> None:
    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white", expand=False)
    table.add_column("#", justify="right", no_wrap=True, style="dim")
    table.add_column("INSTRUKCJA", no_wrap=True)
    for i, stmt in enumerate(stmts, start=1):
        table.add_row(str(i), _summary(stmt))
    console.print(table)


def run(args: argparse.Namespace) -> None:
    schema_path = pathlib.Path(args.schema)
    if not schema_path.exists():
        console.print(f"[red]Brak pliku schematu:[/red] {schema_path}")
        raise SystemExit(1)

    stmts = split_statements(schema_path.read_text(encoding="utf-8"))
    if args.show:
        show_statements(stmts)
        return

    try:
        conn = get_connection()
    except psycopg2.Error as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    # Jedna transakcja: przy błędzie schemat zostaje w stanie sprzed uruchomienia
    done = 0
    try:
        with conn, conn.cursor() as cur:
            for stmt in stmts:
                cur.execute(stmt)
                done += 1
    except psycopg2.Error as e:
        console.print(f"[red]Błąd w instrukcji {done + 1}:[/red] {_summary(stmts[done])}")
        console.print(f"  {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]Schemat zastosowany:[/green] {schema_path.name} ({done} instrukcji)")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "apply-schema",
        help="Aplikuje db/schema.sql do bazy danych (idempotentne).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Tworzy typ leave_type oraz tabele employee i leave_record w jednej
transakcji. Skrypt można uruchamiać wielokrotnie.

Połączenie: PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD (lub plik .env).

Przykłady:
  vcal apply-schema
  vcal apply-schema --show
        """,
    )
    p.add_argument(
        "--schema",
        default=str(SCHEMA_PATH),
        metavar="PLIK",
        help=f"Plik schematu (domyślnie: {SCHEMA_PATH.name}).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Tylko wypisz instrukcje, bez łączenia z bazą.",
    )
    p.set_defaults(func=run)
