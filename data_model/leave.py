"""
data_model/leave.py — rekordy urlopowe, wyniki parsowania i spany.

LeaveType           — zamknięta enumeracja typów urlopu
Employee            — pracownik (id + nazwa wyświetlana + zespół)
LeaveRecord         — pojedynczy dzień urlopu jednego pracownika (wartość)
ParsedLeaveEntry    — znormalizowany wpis z parsera wsadowego
ParsedEmployeeBatch — wpisy jednego pracownika z jednego przebiegu parsera
ConsecutiveSpan     — maksymalny ciąg kolejnych dni jednego pracownika
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import StrEnum

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Identyfikator rekordu / pracownika: SERIAL z bazy albo klucz tekstowy z JSON.
type RecordId = int | str
type EmployeeId = int | str

DEFAULT_TEAM = "기타"


# ---------------------------------------------------------------------------
# LeaveType
# ---------------------------------------------------------------------------

class LeaveType(StrEnum):
    """
    Typ urlopu.

    MORNING_HALF / AFTERNOON_HALF dotyczą zawsze jednego dnia kalendarzowego.
    """
    ANNUAL         = "annual"
    MORNING_HALF   = "morning_half"
    AFTERNOON_HALF = "afternoon_half"
    SPECIAL        = "special"
    SICK           = "sick"
    WORK           = "work"

    @property
    def label(self) -> str:
        """Etykieta wyświetlana w kalendarzu (koreańska, jak w dashboardzie)."""
        return _LABELS[self]

    @property
    def is_half_day(self) -> bool:
        return self in (LeaveType.MORNING_HALF, LeaveType.AFTERNOON_HALF)

    @classmethod
    def from_label(cls, text: str) -> LeaveType:
        """
        Rozpoznaje typ po wartości enuma, etykiecie lub aliasie.

        >>> LeaveType.from_label("오전반차")
        <LeaveType.MORNING_HALF: 'morning_half'>
        >>> LeaveType.from_label("sick")
        <LeaveType.SICK: 'sick'>
        """
        key = (text or "").strip()
        if not key:
            raise ValueError("Pusty typ urlopu.")
        lowered = key.lower()
        for member in cls:
            if member.value == lowered or member.label == key:
                return member
        try:
            return _ALIASES[key]
        except KeyError:
            allowed = ", ".join(m.label for m in cls)
            raise ValueError(
                f"Nieobsługiwany typ urlopu '{key}'. Dozwolone: {allowed}"
            ) from None


_LABELS: dict[LeaveType, str] = {
    LeaveType.ANNUAL:         "연차",
    LeaveType.MORNING_HALF:   "오전",
    LeaveType.AFTERNOON_HALF: "오후",
    LeaveType.SPECIAL:        "특별",
    LeaveType.SICK:           "병가",
    LeaveType.WORK:           "업무",
}

_ALIASES: dict[str, LeaveType] = {
    "반차":     LeaveType.MORNING_HALF,
    "오전반차": LeaveType.MORNING_HALF,
    "오후반차": LeaveType.AFTERNOON_HALF,
    "특별휴가": LeaveType.SPECIAL,
    "특휴":     LeaveType.SPECIAL,
    "연가":     LeaveType.ANNUAL,
    "휴가":     LeaveType.ANNUAL,
    "업무일정": LeaveType.WORK,
    "출장":     LeaveType.WORK,
    "교육":     LeaveType.WORK,
}

# Kolejność jak w selektorze typów; silnik przyjmuje ją jako stałą.
LEAVE_TYPES: tuple[LeaveType, ...] = tuple(LeaveType)


# ---------------------------------------------------------------------------
# Pracownicy i rekordy
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Employee:
    id:   EmployeeId
    name: str
    team: str = DEFAULT_TEAM


@dataclass(frozen=True, slots=True)
class LeaveRecord:
    """
    Jeden dzień urlopu jednego pracownika.

    Rekord jest niezmienny; aktualizacja = zastąpienie całego rekordu.
    """
    id:          RecordId
    employee_id: EmployeeId
    date:        dt.date
    type:        LeaveType = LeaveType.ANNUAL
    description: str | None = None


# ---------------------------------------------------------------------------
# Wynik parsera wsadowego
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedLeaveEntry:
    """
    Znormalizowany wpis urlopowy.

    - date:          kanoniczna data "yyyy-MM-dd" (zawsze poprawna kalendarzowo)
    - type:          typ urlopu (ANNUAL albo półdniówka z kwalifikatora)
    - original_text: token w postaci wpisanej przez użytkownika
    """
    date:          str
    type:          LeaveType
    original_text: str

    @property
    def parsed_as(self) -> str:
        """Podgląd w formie "2025/07/16 (오전)"."""
        return f"{self.date.replace('-', '/')} ({self.type.label})"

    def as_date(self) -> dt.date:
        return dt.date.fromisoformat(self.date)


@dataclass(slots=True)
class ParsedEmployeeBatch:
    employee_name: str
    vacations:     list[ParsedLeaveEntry] = field(default_factory=list)


# ---------------------------------------------------------------------------
# ConsecutiveSpan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConsecutiveSpan:
    """
    Ciąg kolejnych dni urlopu jednego pracownika.

    Niezmienniki:
      - start_date <= end_date
      - każdy dzień z [start_date, end_date] ma dokładnie jeden rekord źródłowy
      - len(source_record_ids) == day_count

    Span nie ma własnej tożsamości — jest liczony od zera przy każdej
    agregacji; łączy go z danymi tylko source_record_ids.
    """
    employee_id:       EmployeeId
    start_date:        dt.date
    end_date:          dt.date
    type:              LeaveType
    description:       str | None
    source_record_ids: tuple[RecordId, ...]

    @property
    def day_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    @property
    def is_multi_day(self) -> bool:
        return self.end_date > self.start_date

    def contains(self, day: dt.date) -> bool:
        return self.start_date <= day <= self.end_date
