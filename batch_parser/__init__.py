"""
batch_parser — parser wsadowego tekstu urlopowego.

Publiczne API:
  normalize(token, reference_year, reference_month) -> NormalizedDate | None
  parse(raw_text, known_employee_names, ...)        -> ParseReport
  split_tokens(line)                                -> list[str]
  DebouncedParser                                   — parse() po 500 ms ciszy
  PATTERNS                                          — uporządkowane formaty dat

Typowe użycie:
    from batch_parser import parse

    report = parse(text, ["김철수"])
    if report.is_valid:
        for batch in report.batches:
            print(batch.employee_name, [v.date for v in batch.vacations])
"""

from .date_patterns import PATTERNS, DatePattern, expand_short_year
from .normalizer import NormalizedDate, normalize, split_half_day
from .classifier import parse, split_tokens
from .debounce import DebouncedParser, DEFAULT_DELAY

__all__ = [
    "PATTERNS",
    "DatePattern",
    "expand_short_year",
    "NormalizedDate",
    "normalize",
    "split_half_day",
    "parse",
    "split_tokens",
    "DebouncedParser",
    "DEFAULT_DELAY",
]
