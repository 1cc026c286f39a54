"""
calendar_engine/geometry.py — pozycja i szerokość paska spanu w wierszu kalendarza.

left  = (start - period_start) / period_length
width = day_count / period_length

Obie wartości są ułamkami [0, 1]; span wystający poza okres jest przycinany.
"""

from __future__ import annotations

import calendar
import datetime as dt
from dataclasses import dataclass

from data_model import ConsecutiveSpan


@dataclass(frozen=True, slots=True)
class SpanGeometry:
    left:  float
    width: float


def month_period(year: int, month: int) -> tuple[dt.date, int]:
    """
    >>> month_period(2024, 2)
    (datetime.date(2024, 2, 1), 29)
    """
    return dt.date(year, month, 1), calendar.monthrange(year, month)[1]


def span_geometry(
    span: ConsecutiveSpan,
    period_start: dt.date,
    period_length: int,
) -> SpanGeometry | None:
    """Geometria paska albo None, gdy span leży całkowicie poza okresem."""
    if period_length <= 0:
        raise ValueError(f"period_length musi być > 0, podano {period_length}")

    period_end = period_start + dt.timedelta(days=period_length - 1)
    start = max(span.start_date, period_start)
    end = min(span.end_date, period_end)
    if start > end:
        return None

    offset = (start - period_start).days
    days = (end - start).days + 1
    return SpanGeometry(left=offset / period_length, width=days / period_length)
