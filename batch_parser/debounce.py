"""
batch_parser/debounce.py — parsowanie z opóźnieniem (debounce) dla pola tekstowego.

Każde submit() restartuje jeden timer; parse() uruchamia się dopiero po
`delay` sekundach ciszy. W danej chwili czeka co najwyżej jeden przebieg,
a nowy tekst po prostu zastępuje poprzedni.
"""

from __future__ import annotations

import threading
from typing import Callable, Iterable

from data_model import ParseReport

from .classifier import parse

DEFAULT_DELAY = 0.5


class DebouncedParser:
    """
    Użycie:
        parser = DebouncedParser(show_preview, employee_names)
        parser.submit(text)      # przy każdej zmianie pola
        parser.flush()           # np. przed rejestracją
    """

    def __init__(
        self,
        on_result: Callable[[ParseReport], None],
        known_employee_names: Iterable[str] = (),
        delay: float = DEFAULT_DELAY,
        reference_year: int | None = None,
        reference_month: int | None = None,
    ) -> None:
        self._on_result = on_result
        self._known = list(known_employee_names)
        self._delay = delay
        self._reference_year = reference_year
        self._reference_month = reference_month
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: str | None = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def set_known_employees(self, names: Iterable[str]) -> None:
        with self._lock:
            self._known = list(names)

    def submit(self, raw_text: str) -> None:
        """Zapamiętuje tekst i restartuje timer."""
        with self._lock:
            self._cancel_timer()
            self._pending = raw_text
            self._timer = threading.Timer(self._delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._pending = None

    def flush(self) -> ParseReport | None:
        """Uruchamia oczekujący przebieg natychmiast (synchronicznie)."""
        with self._lock:
            self._cancel_timer()
        return self._fire()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> ParseReport | None:
        with self._lock:
            text, self._pending = self._pending, None
            self._timer = None
            known = list(self._known)
        if text is None:
            return None

        # Pusty tekst czyści podgląd bez parsowania
        if not text.strip():
            report = ParseReport()
        else:
            report = parse(text, known, self._reference_year, self._reference_month)
        self._on_result(report)
        return report
