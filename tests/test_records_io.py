import datetime as dt
import json

import pytest

from calendar_engine import RecordsFileError, load_records_json, records_from_json, records_to_json
from data_model import LeaveType


def test_load_wrapped_records(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps({
        "records": [
            {"id": 4, "employee_id": 1, "date": "2025-07-15", "type": "annual"},
            {"id": "b", "employee_id": "kim", "date": "2025-07-16", "type": "오전반차",
             "description": "wizyta"},
            {"id": 6, "employee_id": 1, "date": "2025-07-17"},
        ]
    }, ensure_ascii=False), encoding="utf-8")

    records = load_records_json(path)

    assert [r.id for r in records] == [4, "b", 6]
    assert records[1].type is LeaveType.MORNING_HALF
    assert records[1].description == "wizyta"
    assert records[2].type is LeaveType.ANNUAL
    assert records[0].date == dt.date(2025, 7, 15)


def test_bare_list_is_accepted():
    records = records_from_json([{"id": 1, "employee_id": 1, "date": "2025-07-15", "type": "병가"}])
    assert records[0].type is LeaveType.SICK


@pytest.mark.parametrize(
    "data",
    [
        {"records": [{"id": 1, "date": "2025-07-15"}]},
        {"records": [{"id": 1, "employee_id": 1, "date": "15.07.2025"}]},
        {"rows": []},
        "2025-07-15",
    ],
)
def test_schema_violations(data):
    with pytest.raises(RecordsFileError):
        records_from_json(data)


def test_bad_values_after_schema():
    with pytest.raises(RecordsFileError, match="records/0"):
        records_from_json([{"id": 1, "employee_id": 1, "date": "2025-02-30"}])
    with pytest.raises(RecordsFileError, match="Nieobsługiwany"):
        records_from_json([{"id": 1, "employee_id": 1, "date": "2025-02-03", "type": "urlop"}])


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(RecordsFileError):
        load_records_json(path)


def test_to_json_is_loadable():
    records = records_from_json([{"id": 1, "employee_id": 1, "date": "2025-07-15", "type": "오후"}])
    again = records_from_json(records_to_json(records))
    assert again == records
