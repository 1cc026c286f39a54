import datetime as dt

import pytest

from batch_parser import PATTERNS, normalize, split_half_day
from data_model import LeaveType


@pytest.mark.parametrize("token", ["25-07-17", "2025-07-17", "20250717", "250717", "2025/7/17", "2025.07.17"])
def test_year_formats_resolve_to_same_date(token):
    nd = normalize(token, 2030, 1)
    assert nd is not None
    assert nd.date == "2025-07-17"
    assert nd.type is LeaveType.ANNUAL


def test_formats_without_year_use_reference_year():
    assert normalize("0717", 2026, 1).date == "2026-07-17"
    assert normalize("07-17", 2026, 1).date == "2026-07-17"
    assert normalize("7/17", 2026, 1).date == "2026-07-17"
    assert normalize("7.17", 2026, 1).date == "2026-07-17"


def test_bare_day_uses_reference_month():
    nd = normalize("5", 2025, 9)
    assert nd.date == "2025-09-05"
    assert nd.pattern == "DD"


def test_leap_day():
    assert normalize("0229", 2024, 3).date == "2024-02-29"
    assert normalize("0229", 2025, 3) is None


@pytest.mark.parametrize("token", ["0230", "1301", "0000", "02-30", "2025-04-31", "32", "0", "13-01"])
def test_invalid_calendar_dates_are_rejected(token):
    assert normalize(token, 2025, 2) is None


def test_short_year_pivot():
    assert normalize("49-01-02", 2025, 1).date == "2049-01-02"
    assert normalize("50-01-02", 2025, 1).date == "1950-01-02"
    assert normalize("990101", 2025, 1).date == "1999-01-01"


def test_first_matching_pattern_wins():
    # 6 cyfr to YYMMDD, nie MMDD + śmieci
    assert normalize("250717", 2030, 1).pattern == "YYMMDD"
    # niepoprawny YYYYMMDD nie spada do krótszych wzorców
    assert normalize("20251340", 2025, 1) is None


def test_pattern_table_order():
    names = [p.name for p in PATTERNS]
    assert names == ["YYYYMMDD", "YYYY-MM-DD", "YY-MM-DD", "YYMMDD", "MMDD", "MM-DD", "M-DD", "DD"]


@pytest.mark.parametrize(
    "token, expected",
    [
        ("0716(오전)", LeaveType.MORNING_HALF),
        ("0716(오후)", LeaveType.AFTERNOON_HALF),
        ("0716(AM)", LeaveType.MORNING_HALF),
        ("0716(pm)", LeaveType.AFTERNOON_HALF),
        ("0716 (Morning)", LeaveType.MORNING_HALF),
        ("0716(afternoon)", LeaveType.AFTERNOON_HALF),
    ],
)
def test_half_day_qualifier(token, expected):
    nd = normalize(token, 2025, 1)
    assert nd.date == "2025-07-16"
    assert nd.type is expected
    assert nd.original_text == token


def test_unknown_parenthesised_text_is_not_a_date():
    assert normalize("0716(휴가)", 2025, 1) is None


def test_split_half_day_strips_all_parenthesised_groups():
    body, leave_type = split_half_day("0716(오전)(확정)")
    assert body == "0716"
    assert leave_type is LeaveType.MORNING_HALF


@pytest.mark.parametrize("token", ["", "   ", "김철수", "07/16/2025", "2025-07", "abc0716", "07-16-"])
def test_non_dates(token):
    assert normalize(token, 2025, 7) is None


def test_round_trip_for_every_day_of_a_leap_year():
    day = dt.date(2024, 1, 1)
    while day.year == 2024:
        for token in (day.isoformat(), day.strftime("%Y%m%d"), day.strftime("%m%d")):
            nd = normalize(token, 2024, 1)
            assert nd is not None, token
            assert dt.date.fromisoformat(nd.date) == day
        day += dt.timedelta(days=1)
