"""
data_model/diagnostics.py — diagnostyka parsera wsadowego i raport parsowania.

Diagnostic  — pojedynczy błąd lub ostrzeżenie przypięte do numeru linii.
ParseReport — wynik parsowania: batche, błędy (blokujące rejestrację)
              i ostrzeżenia (informacyjne).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .leave import ParsedEmployeeBatch


class DiagnosticKind(StrEnum):
    ERROR   = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """
    - kind:        ERROR (blokuje rejestrację) albo WARNING
    - line_number: 1-based numer linii w surowym tekście
    - message:     czytelny opis
    """
    kind:        DiagnosticKind
    line_number: int
    message:     str

    def __str__(self) -> str:
        return f"linia {self.line_number}: {self.message}"


@dataclass(slots=True)
class ParseReport:
    """
    Wynik jednego przebiegu parsera.

    - batches:  wpisy per pracownik (tylko pracownicy z >= 1 datą)
    - errors:   lista Diagnostic(kind=ERROR)
    - warnings: lista Diagnostic(kind=WARNING)
    """
    batches:  list[ParsedEmployeeBatch] = field(default_factory=list)
    errors:   list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True gdy brak błędów (ostrzeżenia nie blokują)."""
        return not self.errors

    @property
    def entry_count(self) -> int:
        return sum(len(b.vacations) for b in self.batches)
