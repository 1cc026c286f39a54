"""
batch_parser/normalizer.py — normalizacja pojedynczego tokenu datowego.

normalize(token, reference_year, reference_month) -> NormalizedDate | None

Kroki:
  1. kwalifikator półdniówki w nawiasie: (오전) / (AM) / (morning) → MORNING_HALF,
     (오후) / (PM) / (afternoon) → AFTERNOON_HALF; bez kwalifikatora → ANNUAL
  2. wzorce z date_patterns.PATTERNS w kolejności (pierwszy wygrywa)
  3. walidacja zakresów i poprawności kalendarzowej (np. 02-30 odrzucone)

None oznacza "to nie jest data" — wywołujący traktuje token jako
nierozpoznany, a nie jako błąd.
"""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass

from data_model import LeaveType

from .date_patterns import PATTERNS, DatePattern, expand_short_year

_HALF_DAY_RE = re.compile(r"\((오전|오후|am|pm|morning|afternoon)\)", re.IGNORECASE)
_PAREN_GROUP_RE = re.compile(r"\([^)]*\)")

_MORNING = {"오전", "am", "morning"}


@dataclass(frozen=True, slots=True)
class NormalizedDate:
    date:          str          # "yyyy-MM-dd"
    type:          LeaveType
    original_text: str
    pattern:       str = ""     # nazwa dopasowanego DatePattern


def split_half_day(token: str) -> tuple[str, LeaveType]:
    """
    Oddziela kwalifikator półdniówki od reszty tokenu.

    >>> split_half_day("0716(오전)")
    ('0716', <LeaveType.MORNING_HALF: 'morning_half'>)
    >>> split_half_day("7/16")
    ('7/16', <LeaveType.ANNUAL: 'annual'>)
    """
    m = _HALF_DAY_RE.search(token)
    if not m:
        return token.strip(), LeaveType.ANNUAL
    qualifier = m.group(1).lower()
    leave_type = LeaveType.MORNING_HALF if qualifier in _MORNING else LeaveType.AFTERNOON_HALF
    return _PAREN_GROUP_RE.sub("", token).strip(), leave_type


def normalize(
    token: str,
    reference_year: int,
    reference_month: int,
) -> NormalizedDate | None:
    """
    Parsuje token datowy do kanonicznej daty i typu urlopu.

    Args:
        token:           pojedynczy token (fragment linii między przecinkami)
        reference_year:  rok dla formatów bez roku
        reference_month: miesiąc dla formatu "sam dzień"

    >>> normalize("25-07-17", 2030, 1).date
    '2025-07-17'
    >>> normalize("0229", 2025, 1) is None
    True
    """
    body, leave_type = split_half_day(token)
    if not body:
        return None

    for pattern in PATTERNS:
        m = pattern.regex.match(body)
        if not m:
            continue
        day = _resolve(m, pattern, reference_year, reference_month)
        if day is None:
            return None
        return NormalizedDate(
            date=day.isoformat(),
            type=leave_type,
            original_text=token.strip(),
            pattern=pattern.name,
        )

    return None


def _resolve(
    m: re.Match[str],
    pattern: DatePattern,
    reference_year: int,
    reference_month: int,
) -> dt.date | None:
    if pattern.year is not None:
        year = int(m.group(pattern.year))
        if pattern.short_year:
            year = expand_short_year(year)
    else:
        year = reference_year

    if pattern.month is not None:
        month = int(m.group(pattern.month))
    else:
        month = reference_month

    day = int(m.group(pattern.day))

    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None
    if not (dt.MINYEAR <= year <= dt.MAXYEAR):
        return None

    # date() odrzuca 02-30, 04-31, 02-29 w latach nieprzestępnych
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None
