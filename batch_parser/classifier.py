"""
batch_parser/classifier.py — klasyfikacja linii wsadowego tekstu urlopowego.

Architektura:
  raw_text → linie (trim, bez pustych) → tokeny (, ; ， ；)
  → _classify_line() → (DATES | NAME)
  → automat z kursorem pracownika (AWAITING_NAME | HAS_EMPLOYEE)
  → ParseReport(batches, errors, warnings)

Format wejścia (przykład):

    김철수
    0715, 0716(오전)

    박영희
    2025-07-20

Linia jest linią dat, jeśli choć jeden jej token jest datą; w przeciwnym
razie cała linia jest nazwą pracownika.

Kluczowe funkcje publiczne:
  parse(raw_text, known_employee_names, reference_year, reference_month) -> ParseReport
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from data_model import (
    Diagnostic,
    DiagnosticKind,
    ParsedEmployeeBatch,
    ParsedLeaveEntry,
    ParseReport,
)

from .normalizer import NormalizedDate, normalize

log = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_TOKEN_SEP_RE = re.compile(r"[,;，；]+")


# ---------------------------------------------------------------------------
# Typy wewnętrzne
# ---------------------------------------------------------------------------

class _Cursor(Enum):
    AWAITING_NAME = auto()
    HAS_EMPLOYEE  = auto()


@dataclass(frozen=True, slots=True)
class _Line:
    number: int                     # 1-based numer linii w surowym tekście
    text:   str
    dates:  tuple[NormalizedDate, ...]

    @property
    def is_date_line(self) -> bool:
        return bool(self.dates)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def split_tokens(line: str) -> list[str]:
    """
    >>> split_tokens("0715, 0716(오전);0717")
    ['0715', '0716(오전)', '0717']
    """
    return [t.strip() for t in _TOKEN_SEP_RE.split(line) if t.strip()]


def parse(
    raw_text: str,
    known_employee_names: Iterable[str],
    reference_year: int | None = None,
    reference_month: int | None = None,
) -> ParseReport:
    """
    Parsuje wsadowy tekst urlopowy.

    Args:
        raw_text:             tekst wielolinijkowy z pola wejściowego
        known_employee_names: nazwy istniejących pracowników (dokładne dopasowanie)
        reference_year:       rok dla dat bez roku (domyślnie bieżący)
        reference_month:      miesiąc dla dat "sam dzień" (domyślnie bieżący)

    Returns:
        ParseReport; pracownicy bez żadnej rozpoznanej daty są pomijani.
    """
    today = dt.date.today()
    year = reference_year if reference_year is not None else today.year
    month = reference_month if reference_month is not None else today.month
    known = set(known_employee_names)

    report = ParseReport()
    cursor = _Cursor.AWAITING_NAME
    current: ParsedEmployeeBatch | None = None

    for line in _classify_lines(raw_text, year, month):
        if line.is_date_line:
            match cursor:
                case _Cursor.AWAITING_NAME:
                    for nd in line.dates:
                        report.errors.append(Diagnostic(
                            kind=DiagnosticKind.ERROR,
                            line_number=line.number,
                            message=(
                                f"Data bez nazwy pracownika ({nd.original_text}). "
                                f"Podaj nazwę pracownika w linii powyżej."
                            ),
                        ))
                case _Cursor.HAS_EMPLOYEE:
                    assert current is not None
                    current.vacations.extend(
                        ParsedLeaveEntry(
                            date=nd.date,
                            type=nd.type,
                            original_text=nd.original_text,
                        )
                        for nd in line.dates
                    )
            continue

        # Linia z nazwą: zamknij poprzedniego pracownika i zacznij nowego
        _flush(current, report)
        current = ParsedEmployeeBatch(employee_name=line.text)
        cursor = _Cursor.HAS_EMPLOYEE

        if line.text not in known:
            report.warnings.append(Diagnostic(
                kind=DiagnosticKind.WARNING,
                line_number=line.number,
                message=(
                    f"'{line.text}' nie jest zarejestrowanym pracownikiem — "
                    f"zostanie dodany automatycznie."
                ),
            ))

    _flush(current, report)

    log.debug(
        "parse: %d pracowników, %d wpisów, %d błędów, %d ostrzeżeń",
        len(report.batches), report.entry_count,
        len(report.errors), len(report.warnings),
    )
    return report


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _classify_lines(raw_text: str, year: int, month: int) -> list[_Line]:
    lines: list[_Line] = []
    for number, raw in enumerate(_LINE_BREAK_RE.split(raw_text or ""), start=1):
        text = raw.strip()
        if not text:
            continue
        dates = tuple(
            nd
            for token in split_tokens(text)
            if (nd := normalize(token, year, month)) is not None
        )
        lines.append(_Line(number=number, text=text, dates=dates))
    return lines


def _flush(batch: ParsedEmployeeBatch | None, report: ParseReport) -> None:
    # Pracownik bez rozpoznanych dat jest pomijany bez diagnostyki
    if batch is not None and batch.vacations:
        report.batches.append(batch)
