import datetime as dt

import pytest

from batch_parser import parse
from data_model import Employee, LeaveRecord, LeaveType, ParsedEmployeeBatch, ParsedLeaveEntry
from registration import (
    LeaveStoreError,
    MemoryLeaveStore,
    RegistrationBlockedError,
    register_batches,
)

TEXT = "김철수\n0715\n0716(오전)\n\n박영희\n0720"


def content(store):
    names = {e.id: e.name for e in store.list_employees()}
    return sorted((names[r.employee_id], r.date, r.type) for r in store.list_records())


def test_registers_and_creates_unknown_employees():
    store = MemoryLeaveStore([Employee(id=1, name="김철수")])
    report = parse(TEXT, [e.name for e in store.list_employees()], 2025, 7)

    result = register_batches(report, store)

    assert result.success_count == 3
    assert result.failure_count == 0
    assert result.overwrite_count == 0
    assert result.new_employees == ["박영희"]
    assert content(store) == [
        ("김철수", dt.date(2025, 7, 15), LeaveType.ANNUAL),
        ("김철수", dt.date(2025, 7, 16), LeaveType.MORNING_HALF),
        ("박영희", dt.date(2025, 7, 20), LeaveType.ANNUAL),
    ]
    park = next(e for e in store.list_employees() if e.name == "박영희")
    assert park.team == "기타"


def test_registering_twice_overwrites_every_entry():
    store = MemoryLeaveStore()
    report = parse(TEXT, [], 2025, 7)

    register_batches(report, store)
    before = content(store)
    ids_before = {r.id for r in store.list_records()}

    second = register_batches(report, store)

    assert second.overwrite_count == 3
    assert second.new_employees == []
    assert content(store) == before
    assert {r.id for r in store.list_records()}.isdisjoint(ids_before)


def test_overwrite_replaces_type_of_existing_record():
    store = MemoryLeaveStore(
        [Employee(id=1, name="김철수")],
        [LeaveRecord(id=10, employee_id=1, date=dt.date(2025, 7, 15), type=LeaveType.SICK)],
    )
    result = register_batches(parse("김철수\n0715(PM)", ["김철수"], 2025, 7), store)

    assert result.overwrite_count == 1
    (record,) = store.list_records()
    assert record.type is LeaveType.AFTERNOON_HALF
    assert record.id != 10


def test_report_with_errors_is_blocked():
    store = MemoryLeaveStore()
    report = parse("0715\n김철수\n0716", [], 2025, 7)

    with pytest.raises(RegistrationBlockedError) as exc_info:
        register_batches(report, store)

    assert len(exc_info.value.errors) == 1
    assert store.list_records() == []
    assert store.list_employees() == []


class FlakyStore(MemoryLeaveStore):
    def __init__(self, fail_on):
        super().__init__()
        self.fail_on = fail_on

    def add_record(self, employee_id, date, leave_type, description=None):
        if date == self.fail_on:
            raise LeaveStoreError("connection reset")
        return super().add_record(employee_id, date, leave_type, description)


def test_failed_entry_does_not_stop_the_loop(caplog):
    store = FlakyStore(fail_on=dt.date(2025, 7, 16))
    report = parse(TEXT, [], 2025, 7)

    with caplog.at_level("ERROR", logger="registration.register"):
        result = register_batches(report, store)

    assert result.success_count == 2
    assert result.failure_count == 1
    assert result.total == 3
    assert result.failures[0].employee_name == "김철수"
    assert result.failures[0].entry.date == "2025-07-16"
    assert "connection reset" in result.failures[0].reason
    assert "connection reset" in caplog.text
    assert {r.date for r in store.list_records()} == {dt.date(2025, 7, 15), dt.date(2025, 7, 20)}


def test_plain_batches_are_accepted():
    batch = ParsedEmployeeBatch(
        employee_name="이민호",
        vacations=[ParsedLeaveEntry(date="2025-08-01", type=LeaveType.ANNUAL, original_text="0801")],
    )
    store = MemoryLeaveStore()
    result = register_batches([batch], store)
    assert result.success_count == 1
    assert store.list_records(year=2025, month=8)[0].date == dt.date(2025, 8, 1)
    assert store.list_records(month=7) == []


def test_memory_store_ids_continue_after_seed():
    store = MemoryLeaveStore(
        [Employee(id=3, name="김철수")],
        [LeaveRecord(id=7, employee_id=3, date=dt.date(2025, 7, 1))],
    )
    emp = store.add_employee("박영희")
    assert emp.id == 8
    with pytest.raises(LeaveStoreError):
        store.delete_record(999)
    with pytest.raises(LeaveStoreError):
        store.add_record(999, dt.date(2025, 7, 1), LeaveType.ANNUAL)
