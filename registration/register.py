"""
registration/register.py — rejestracja batchy z parsera w magazynie urlopów.

Dla każdego batcha:
  1. pracownik po dokładnej nazwie; brak → utworzenie (zespół "기타")
  2. dla każdego wpisu po kolei:
       - istniejący rekord (pracownik, data) → usunięcie i licznik nadpisań
       - dodanie nowego rekordu
     błąd magazynu dla wpisu jest logowany, pętla idzie dalej

Zapis jest sekwencyjny (wpis po wpisie), żeby licznik nadpisań był
deterministyczny. Przy dużych batchach można zapisywać równolegle
i uzgadniać liczniki z odpowiedzi.

Publiczne API:
  register_batches(source, store) -> RegistrationResult
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from data_model import (
    DEFAULT_TEAM,
    Diagnostic,
    Employee,
    ParsedEmployeeBatch,
    ParsedLeaveEntry,
    ParseReport,
)

from .store import LeaveStore, LeaveStoreError

log = logging.getLogger(__name__)


class RegistrationBlockedError(RuntimeError):
    """Raport parsera zawiera błędy — rejestracja jest zablokowana."""

    def __init__(self, errors: list[Diagnostic]) -> None:
        self.errors = errors
        super().__init__(
            f"Rejestracja zablokowana: {len(errors)} błąd(ów) parsowania."
        )


@dataclass(slots=True)
class EntryFailure:
    employee_name: str
    entry:         ParsedLeaveEntry
    reason:        str


@dataclass(slots=True)
class RegistrationResult:
    """
    - success_count:   zapisane wpisy
    - failure_count:   wpisy, których zapis się nie udał
    - overwrite_count: wpisy, które zastąpiły istniejący rekord
    - new_employees:   nazwy pracowników utworzonych automatycznie
    - failures:        szczegóły nieudanych wpisów
    """
    success_count:   int = 0
    failure_count:   int = 0
    overwrite_count: int = 0
    new_employees:   list[str] = field(default_factory=list)
    failures:        list[EntryFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success_count + self.failure_count


def register_batches(
    source: ParseReport | Iterable[ParsedEmployeeBatch],
    store: LeaveStore,
) -> RegistrationResult:
    """
    Rejestruje batche w magazynie.

    Args:
        source: ParseReport (musi być bez błędów) albo gotowa lista batchy
        store:  magazyn urlopów (LeaveStore)

    Raises:
        RegistrationBlockedError: raport zawiera błędy parsowania
        LeaveStoreError:          nie udało się odczytać/utworzyć pracownika
    """
    if isinstance(source, ParseReport):
        if not source.is_valid:
            raise RegistrationBlockedError(source.errors)
        batches = source.batches
    else:
        batches = list(source)

    result = RegistrationResult()
    employees: dict[str, Employee] = {e.name: e for e in store.list_employees()}

    for batch in batches:
        employee = employees.get(batch.employee_name)
        if employee is None:
            employee = store.add_employee(batch.employee_name, DEFAULT_TEAM)
            employees[employee.name] = employee
            result.new_employees.append(employee.name)
            log.info("Nowy pracownik: %s (id=%s)", employee.name, employee.id)

        for entry in batch.vacations:
            _register_entry(store, employee, entry, result)

    log.info(
        "Rejestracja: %d zapisanych, %d nieudanych, %d nadpisanych",
        result.success_count, result.failure_count, result.overwrite_count,
    )
    return result


def _register_entry(
    store: LeaveStore,
    employee: Employee,
    entry: ParsedLeaveEntry,
    result: RegistrationResult,
) -> None:
    day = entry.as_date()
    try:
        existing = store.find_record(employee.id, day)
        if existing is not None:
            store.delete_record(existing.id)
            result.overwrite_count += 1
        store.add_record(employee.id, day, entry.type)
    except LeaveStoreError as exc:
        log.error("Nie zapisano urlopu %s %s: %s", employee.name, entry.date, exc)
        result.failure_count += 1
        result.failures.append(EntryFailure(employee.name, entry, str(exc)))
        return

    result.success_count += 1
    log.debug("Zapisano urlop %s %s (%s)", employee.name, entry.date, entry.type.label)
