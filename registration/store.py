"""
registration/store.py — magazyn pracowników i rekordów urlopowych.

LeaveStore         — protokół używany przez rejestrację wsadową i CLI
MemoryLeaveStore   — implementacja w pamięci (testy, --dry-run)
PostgresLeaveStore — implementacja psycopg2 na tabelach z db/schema.sql

Każda operacja zapisu jest osobną transakcją; błąd bazy jest zgłaszany
jako LeaveStoreError, żeby wywołujący mógł kontynuować z kolejnym wpisem.
"""

from __future__ import annotations

import datetime as dt
import itertools
import logging
from typing import Protocol

import psycopg2

from calendar_engine import in_period
from data_model import (
    DEFAULT_TEAM,
    Employee,
    EmployeeId,
    LeaveRecord,
    LeaveType,
    RecordId,
)

log = logging.getLogger(__name__)


class LeaveStoreError(RuntimeError):
    """Błąd odczytu/zapisu w magazynie urlopów."""


class LeaveStore(Protocol):
    def list_employees(self) -> list[Employee]: ...

    def add_employee(self, name: str, team: str = DEFAULT_TEAM) -> Employee: ...

    def list_records(
        self,
        employee_id: EmployeeId | None = None,
        year: int | None = None,
        month: int | None = None,
    ) -> list[LeaveRecord]: ...

    def find_record(self, employee_id: EmployeeId, date: dt.date) -> LeaveRecord | None: ...

    def add_record(
        self,
        employee_id: EmployeeId,
        date: dt.date,
        leave_type: LeaveType,
        description: str | None = None,
    ) -> LeaveRecord: ...

    def delete_record(self, record_id: RecordId) -> None: ...


# ---------------------------------------------------------------------------
# MemoryLeaveStore
# ---------------------------------------------------------------------------

class MemoryLeaveStore:
    """Magazyn w pamięci; identyfikatory nadawane rosnąco od 1."""

    def __init__(
        self,
        employees: list[Employee] | None = None,
        records: list[LeaveRecord] | None = None,
    ) -> None:
        self._employees: dict[EmployeeId, Employee] = {e.id: e for e in employees or []}
        self._records: dict[RecordId, LeaveRecord] = {r.id: r for r in records or []}
        start = max(
            (i for i in itertools.chain(self._employees, self._records) if isinstance(i, int)),
            default=0,
        )
        self._ids = itertools.count(start + 1)

    def list_employees(self) -> list[Employee]:
        return list(self._employees.values())

    def add_employee(self, name: str, team: str = DEFAULT_TEAM) -> Employee:
        emp = Employee(id=next(self._ids), name=name, team=team)
        self._employees[emp.id] = emp
        return emp

    def list_records(
        self,
        employee_id: EmployeeId | None = None,
        year: int | None = None,
        month: int | None = None,
    ) -> list[LeaveRecord]:
        return sorted(
            (
                r for r in self._records.values()
                if (employee_id is None or r.employee_id == employee_id)
                and in_period(r.date, year, month)
            ),
            key=lambda r: (r.date, str(r.employee_id)),
        )

    def find_record(self, employee_id: EmployeeId, date: dt.date) -> LeaveRecord | None:
        for r in self._records.values():
            if r.employee_id == employee_id and r.date == date:
                return r
        return None

    def add_record(
        self,
        employee_id: EmployeeId,
        date: dt.date,
        leave_type: LeaveType,
        description: str | None = None,
    ) -> LeaveRecord:
        if employee_id not in self._employees:
            raise LeaveStoreError(f"Nieznany pracownik id={employee_id}")
        rec = LeaveRecord(
            id=next(self._ids),
            employee_id=employee_id,
            date=date,
            type=leave_type,
            description=description,
        )
        self._records[rec.id] = rec
        return rec

    def delete_record(self, record_id: RecordId) -> None:
        if self._records.pop(record_id, None) is None:
            raise LeaveStoreError(f"Brak rekordu id={record_id}")


# ---------------------------------------------------------------------------
# PostgresLeaveStore
# ---------------------------------------------------------------------------

_SELECT_RECORDS = """
    SELECT id, employee_id, leave_date, leave_type, description
    FROM leave_record
    {where}
    ORDER BY leave_date, employee_id, id
"""


class PostgresLeaveStore:
    """
    Magazyn na PostgreSQL.

    Args:
        conn: połączenie psycopg2 (np. z vcal._db.get_connection());
              zamykanie połączenia należy do wywołującego.
    """

    def __init__(self, conn) -> None:
        self._conn = conn

    def list_employees(self) -> list[Employee]:
        rows = self._fetch("SELECT id, name, team FROM employee ORDER BY team, name", ())
        return [Employee(id=i, name=n, team=t) for i, n, t in rows]

    def add_employee(self, name: str, team: str = DEFAULT_TEAM) -> Employee:
        (emp_id,) = self._write(
            "INSERT INTO employee (name, team) VALUES (%s, %s) RETURNING id",
            (name, team),
        )
        log.info("Dodano pracownika %s (id=%s)", name, emp_id)
        return Employee(id=emp_id, name=name, team=team)

    def list_records(
        self,
        employee_id: EmployeeId | None = None,
        year: int | None = None,
        month: int | None = None,
    ) -> list[LeaveRecord]:
        wheres: list[str] = []
        params: list = []
        if employee_id is not None:
            wheres.append("employee_id = %s")
            params.append(employee_id)
        if year is not None:
            wheres.append("EXTRACT(YEAR FROM leave_date) = %s")
            params.append(year)
        if month is not None:
            wheres.append("EXTRACT(MONTH FROM leave_date) = %s")
            params.append(month)
        where = ("WHERE " + " AND ".join(wheres)) if wheres else ""
        rows = self._fetch(_SELECT_RECORDS.format(where=where), tuple(params))
        return [_record_from_row(row) for row in rows]

    def find_record(self, employee_id: EmployeeId, date: dt.date) -> LeaveRecord | None:
        rows = self._fetch(
            _SELECT_RECORDS.format(where="WHERE employee_id = %s AND leave_date = %s"),
            (employee_id, date),
        )
        return _record_from_row(rows[0]) if rows else None

    def add_record(
        self,
        employee_id: EmployeeId,
        date: dt.date,
        leave_type: LeaveType,
        description: str | None = None,
    ) -> LeaveRecord:
        (rec_id,) = self._write(
            """
            INSERT INTO leave_record (employee_id, leave_date, leave_type, description)
            VALUES (%s, %s, %s, %s)
            RETURNING id
            """,
            (employee_id, date, leave_type.value, description),
        )
        return LeaveRecord(
            id=rec_id,
            employee_id=employee_id,
            date=date,
            type=leave_type,
            description=description,
        )

    def delete_record(self, record_id: RecordId) -> None:
        self._write("DELETE FROM leave_record WHERE id = %s RETURNING id", (record_id,))

    # ------------------------------------------------------------------
    # Pomocnicze
    # ------------------------------------------------------------------

    def _fetch(self, sql: str, params: tuple) -> list[tuple]:
        try:
            with self._conn, self._conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchall()
        except psycopg2.Error as exc:
            raise LeaveStoreError(str(exc).strip()) from exc

    def _write(self, sql: str, params: tuple) -> tuple:
        try:
            with self._conn, self._conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
        except psycopg2.Error as exc:
            raise LeaveStoreError(str(exc).strip()) from exc
        if row is None:
            raise LeaveStoreError(f"Zapytanie nie zwróciło wiersza: {params}")
        return row


def _record_from_row(row: tuple) -> LeaveRecord:
    rec_id, employee_id, leave_date, leave_type, description = row
    return LeaveRecord(
        id=rec_id,
        employee_id=employee_id,
        date=leave_date,
        type=LeaveType(leave_type),
        description=description,
    )
