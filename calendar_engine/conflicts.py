"""
calendar_engine/conflicts.py — wykrywanie kolizji przy tworzeniu/edycji urlopu.

Kolizja = inny rekord tego samego pracownika na tę samą datę.

Wyjątki od reguły:
  - rekord nie koliduje sam ze sobą (candidate.id)
  - przy edycji wewnątrz wielodniowego spanu rekordy tego spanu nie kolidują
    (przesunięcie dnia w obrębie własnego bloku chwilowo celuje w zajętą datę)

Dotyczy tylko ścieżki pojedynczego wpisu; w rejestracji wsadowej kolizja
jest nadpisaniem.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable

from data_model import ConsecutiveSpan, EmployeeId, LeaveRecord, RecordId


@dataclass(frozen=True, slots=True)
class LeaveCandidate:
    """Nowy (id=None) lub edytowany rekord przed zapisem."""
    employee_id: EmployeeId
    date:        dt.date
    id:          RecordId | None = None


def find_conflicts(
    candidate: LeaveCandidate,
    existing: Iterable[LeaveRecord],
    editing_span: ConsecutiveSpan | None = None,
) -> list[LeaveRecord]:
    """Zwraca rekordy kolidujące z kandydatem po zastosowaniu wyjątków."""
    raw = [
        r for r in existing
        if r.employee_id == candidate.employee_id
        and r.date == candidate.date
        and (candidate.id is None or r.id != candidate.id)
    ]

    if editing_span is not None and editing_span.is_multi_day:
        own = set(editing_span.source_record_ids)
        raw = [r for r in raw if r.id not in own]

    return raw


def has_conflict(
    candidate: LeaveCandidate,
    existing: Iterable[LeaveRecord],
    editing_span: ConsecutiveSpan | None = None,
) -> bool:
    return bool(find_conflicts(candidate, existing, editing_span))
