"""
calendar_engine/aggregator.py — łączenie dni urlopu w ciągi (ConsecutiveSpan).

aggregate(records, employee_id, year=None, month=None) -> list[ConsecutiveSpan]

Algorytm:
  - filtr: pracownik (+ okres, jeśli podany), stabilne sortowanie po dacie
  - zachłanny skan: span rośnie, dopóki kolejny rekord wypada dokładnie
    dzień po końcu spanu; inaczej span jest zamykany i zaczyna się nowy
  - różne typy w jednym spanie → ANNUAL (span niesie jeden typ)

Span nie przekracza granicy miesiąca tylko dlatego, że wejście jest
przefiltrowane do okresu; sam algorytm jest od okresu niezależny.
"""

from __future__ import annotations

import datetime as dt
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from data_model import ConsecutiveSpan, EmployeeId, LeaveRecord, LeaveType, RecordId

_ONE_DAY = dt.timedelta(days=1)


@dataclass(slots=True)
class _OpenSpan:
    start: dt.date
    end:   dt.date
    type:  LeaveType
    description: str | None
    record_ids:  list[RecordId] = field(default_factory=list)

    def close(self, employee_id: EmployeeId) -> ConsecutiveSpan:
        return ConsecutiveSpan(
            employee_id=employee_id,
            start_date=self.start,
            end_date=self.end,
            type=self.type,
            description=self.description,
            source_record_ids=tuple(self.record_ids),
        )


def in_period(day: dt.date, year: int | None, month: int | None) -> bool:
    if year is not None and day.year != year:
        return False
    if month is not None and day.month != month:
        return False
    return True


def aggregate(
    records: Iterable[LeaveRecord],
    employee_id: EmployeeId,
    year: int | None = None,
    month: int | None = None,
) -> list[ConsecutiveSpan]:
    """
    Zwraca spany jednego pracownika w kolejności dat.

    Args:
        records:     pełny zbiór rekordów (nie jest modyfikowany)
        employee_id: pracownik, dla którego liczymy spany
        year, month: opcjonalny okres widoczny (np. miesiąc kalendarza)
    """
    own = sorted(
        (
            r for r in records
            if r.employee_id == employee_id and in_period(r.date, year, month)
        ),
        key=lambda r: r.date,
    )

    spans: list[ConsecutiveSpan] = []
    current: _OpenSpan | None = None

    for record in own:
        if current is not None and record.date == current.end + _ONE_DAY:
            current.end = record.date
            current.record_ids.append(record.id)
            if record.type != current.type:
                current.type = LeaveType.ANNUAL
            continue

        if current is not None:
            spans.append(current.close(employee_id))
        current = _OpenSpan(
            start=record.date,
            end=record.date,
            type=record.type,
            description=record.description,
            record_ids=[record.id],
        )

    if current is not None:
        spans.append(current.close(employee_id))

    return spans


def aggregate_all(
    records: Iterable[LeaveRecord],
    year: int | None = None,
    month: int | None = None,
) -> dict[EmployeeId, list[ConsecutiveSpan]]:
    """Spany dla wszystkich pracowników obecnych w rekordach."""
    by_employee: dict[EmployeeId, list[LeaveRecord]] = defaultdict(list)
    for r in records:
        by_employee[r.employee_id].append(r)
    return {
        emp: aggregate(rows, emp, year, month)
        for emp, rows in by_employee.items()
    }


def find_span(spans: Iterable[ConsecutiveSpan], record_id: RecordId) -> ConsecutiveSpan | None:
    """Span zawierający dany rekord (cel edycji), albo None."""
    for span in spans:
        if record_id in span.source_record_ids:
            return span
    return None
