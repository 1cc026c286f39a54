"""
calendar_engine/records_io.py — wczytywanie rekordów urlopowych z JSON.

Oczekiwany format::

    {
        "records": [
            {"id": 4, "employee_id": 1, "date": "2025-07-15", "type": "annual"},
            {"id": 5, "employee_id": 1, "date": "2025-07-16", "type": "오전",
             "description": "wizyta"}
        ]
    }

Dopuszczalna jest też goła lista rekordów. Pole "type" przyjmuje wartość
enuma, etykietę lub alias (LeaveType.from_label); domyślnie "annual".
Plik jest walidowany schematem JSON (Draft 2020-12) przed konwersją.

Publiczne API:
  load_records_json(path)      -> list[LeaveRecord]
  records_from_json(data)      -> list[LeaveRecord]
  records_to_json(records)     -> dict
"""

from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Iterable

import jsonschema

from data_model import LeaveRecord, LeaveType

_ID = {"type": ["integer", "string"]}

RECORD_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["id", "employee_id", "date"],
    "properties": {
        "id":          _ID,
        "employee_id": _ID,
        "date":        {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}$"},
        "type":        {"type": "string", "minLength": 1},
        "description": {"type": ["string", "null"]},
    },
}

RECORDS_FILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "oneOf": [
        {"type": "array", "items": RECORD_SCHEMA},
        {
            "type": "object",
            "required": ["records"],
            "properties": {"records": {"type": "array", "items": RECORD_SCHEMA}},
        },
    ],
}


class RecordsFileError(ValueError):
    """Plik rekordów nie spełnia schematu lub zawiera niepoprawne wartości."""


def load_records_json(path: pathlib.Path | str) -> list[LeaveRecord]:
    path = pathlib.Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RecordsFileError(f"{path}: niepoprawny JSON: {exc}") from exc
    return records_from_json(data)


def records_from_json(data: Any) -> list[LeaveRecord]:
    validator = jsonschema.Draft202012Validator(RECORDS_FILE_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        e = errors[0]
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/"
        raise RecordsFileError(f"Naruszenie schematu na ścieżce {path}: {e.message}")

    rows = data["records"] if isinstance(data, dict) else data
    return [_record_from_dict(i, row) for i, row in enumerate(rows)]


def records_to_json(records: Iterable[LeaveRecord]) -> dict[str, Any]:
    return {
        "records": [
            {
                "id":          r.id,
                "employee_id": r.employee_id,
                "date":        r.date.isoformat(),
                "type":        r.type.value,
                "description": r.description,
            }
            for r in records
        ]
    }


def _record_from_dict(index: int, row: dict[str, Any]) -> LeaveRecord:
    try:
        day = dt.date.fromisoformat(row["date"])
        leave_type = LeaveType.from_label(row.get("type") or LeaveType.ANNUAL.value)
    except ValueError as exc:
        raise RecordsFileError(f"/records/{index}: {exc}") from exc

    return LeaveRecord(
        id=row["id"],
        employee_id=row["employee_id"],
        date=day,
        type=leave_type,
        description=row.get("description"),
    )
