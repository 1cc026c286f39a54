"""
calendar_engine — spany urlopowe, geometria kalendarza i kolizje.

Publiczne API:
  aggregate(records, employee_id, year, month)   -> list[ConsecutiveSpan]
  aggregate_all(records, year, month)            -> dict[employee_id, list[ConsecutiveSpan]]
  find_span(spans, record_id)                    -> ConsecutiveSpan | None
  has_conflict(candidate, existing, editing_span) -> bool
  find_conflicts(candidate, existing, editing_span) -> list[LeaveRecord]
  span_geometry(span, period_start, period_length) -> SpanGeometry | None
  month_period(year, month)                      -> (date, int)
  load_records_json(path)                        -> list[LeaveRecord]

Wszystkie funkcje są czyste: liczone od zera przy każdym wywołaniu,
nie modyfikują wejścia.
"""

from .aggregator import aggregate, aggregate_all, find_span, in_period
from .conflicts import LeaveCandidate, find_conflicts, has_conflict
from .geometry import SpanGeometry, month_period, span_geometry
from .records_io import (
    RecordsFileError,
    load_records_json,
    records_from_json,
    records_to_json,
)

__all__ = [
    "aggregate",
    "aggregate_all",
    "find_span",
    "in_period",
    "LeaveCandidate",
    "find_conflicts",
    "has_conflict",
    "SpanGeometry",
    "month_period",
    "span_geometry",
    "RecordsFileError",
    "load_records_json",
    "records_from_json",
    "records_to_json",
]
