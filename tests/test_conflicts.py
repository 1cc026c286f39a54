import datetime as dt

from calendar_engine import LeaveCandidate, aggregate, find_conflicts, has_conflict
from data_model import ConsecutiveSpan, LeaveRecord, LeaveType

D = dt.date.fromisoformat


def rec(id, day, employee=1):
    return LeaveRecord(id=id, employee_id=employee, date=D(day))


def span(ids, start="2025-07-15", end="2025-07-17"):
    return ConsecutiveSpan(employee_id=1, start_date=D(start), end_date=D(end),
                           type=LeaveType.ANNUAL, description=None,
                           source_record_ids=tuple(ids))


EXISTING = [rec(4, "2025-07-15"), rec(5, "2025-07-16"), rec(6, "2025-07-17")]


def test_move_within_own_span_is_not_a_conflict():
    candidate = LeaveCandidate(employee_id=1, date=D("2025-07-15"), id=5)
    assert not has_conflict(candidate, EXISTING, span([4, 5, 6]))


def test_record_outside_editing_span_conflicts():
    candidate = LeaveCandidate(employee_id=1, date=D("2025-07-15"), id=5)
    assert has_conflict(candidate, EXISTING, span([5, 6], start="2025-07-16"))


def test_without_span_other_record_conflicts():
    candidate = LeaveCandidate(employee_id=1, date=D("2025-07-15"), id=5)
    assert [r.id for r in find_conflicts(candidate, EXISTING)] == [4]


def test_record_never_conflicts_with_itself():
    candidate = LeaveCandidate(employee_id=1, date=D("2025-07-16"), id=5)
    assert not has_conflict(candidate, EXISTING)


def test_single_day_span_gives_no_exemption():
    candidate = LeaveCandidate(employee_id=1, date=D("2025-07-15"), id=5)
    one_day = span([4], start="2025-07-15", end="2025-07-15")
    assert has_conflict(candidate, EXISTING, one_day)


def test_new_record_conflicts_on_occupied_day():
    candidate = LeaveCandidate(employee_id=1, date=D("2025-07-17"))
    assert has_conflict(candidate, EXISTING)


def test_other_employee_or_free_day_is_fine():
    assert not has_conflict(LeaveCandidate(employee_id=2, date=D("2025-07-15")), EXISTING)
    assert not has_conflict(LeaveCandidate(employee_id=1, date=D("2025-07-20")), EXISTING)


def test_with_span_from_aggregator():
    (editing,) = aggregate(EXISTING, 1)
    candidate = LeaveCandidate(employee_id=1, date=D("2025-07-17"), id=4)
    assert not has_conflict(candidate, EXISTING, editing)
