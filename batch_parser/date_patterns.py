"""
batch_parser/date_patterns.py — wzorce regex dla tokenów datowych.

Każdy DatePattern zawiera:
  - name         : krótka nazwa formatu (do logów i testów)
  - regex        : skompilowany wzorzec dopasowywany do całego tokenu
  - year/month/day: numer grupy z daną częścią (None = brak w tokenie)
  - short_year   : rok dwucyfrowy → reguła pivot (< 50 → 20xx, inaczej 19xx)
  - current_month: miesiąc brany z miesiąca referencyjnego

Wzorce są testowane w kolejności; pierwszy pasujący wygrywa. Krótsze formaty
są prefiksami dłuższych, więc kolejność listy jest częścią kontraktu.
Nowy format = nowy wpis w PATTERNS.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Separator części daty: -, / lub .
_SEP = r"[-/.]"

PIVOT_YEAR = 50


@dataclass(frozen=True, slots=True)
class DatePattern:
    name:          str
    regex:         re.Pattern[str]
    day:           int
    year:          int | None = None
    month:         int | None = None
    short_year:    bool = False
    current_month: bool = False


def _p(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def expand_short_year(year: int) -> int:
    """
    >>> expand_short_year(25), expand_short_year(49), expand_short_year(50)
    (2025, 2049, 1950)
    """
    return 2000 + year if year < PIVOT_YEAR else 1900 + year


PATTERNS: list[DatePattern] = [
    # -------------------------------------------------------------------------
    # Z rokiem czterocyfrowym
    # -------------------------------------------------------------------------
    DatePattern(
        name="YYYYMMDD",
        regex=_p(r"^(\d{4})(\d{2})(\d{2})$"),
        year=1, month=2, day=3,
    ),
    DatePattern(
        name="YYYY-MM-DD",
        regex=_p(rf"^(\d{{4}}){_SEP}(\d{{1,2}}){_SEP}(\d{{1,2}})$"),
        year=1, month=2, day=3,
    ),

    # -------------------------------------------------------------------------
    # Z rokiem dwucyfrowym (pivot)
    # -------------------------------------------------------------------------
    DatePattern(
        name="YY-MM-DD",
        regex=_p(rf"^(\d{{2}}){_SEP}(\d{{1,2}}){_SEP}(\d{{1,2}})$"),
        year=1, month=2, day=3, short_year=True,
    ),
    DatePattern(
        name="YYMMDD",
        regex=_p(r"^(\d{2})(\d{2})(\d{2})$"),
        year=1, month=2, day=3, short_year=True,
    ),

    # -------------------------------------------------------------------------
    # Bez roku: rok referencyjny
    # -------------------------------------------------------------------------
    DatePattern(
        name="MMDD",
        regex=_p(r"^(\d{2})(\d{2})$"),
        month=1, day=2,
    ),
    DatePattern(
        name="MM-DD",
        regex=_p(rf"^(\d{{1,2}}){_SEP}(\d{{1,2}})$"),
        month=1, day=2,
    ),
    DatePattern(
        name="M-DD",
        regex=_p(r"^(\d)[-/](\d{1,2})$"),
        month=1, day=2,
    ),

    # -------------------------------------------------------------------------
    # Sam dzień: miesiąc referencyjny
    # -------------------------------------------------------------------------
    DatePattern(
        name="DD",
        regex=_p(r"^(\d{1,2})$"),
        day=1, current_month=True,
    ),
]
