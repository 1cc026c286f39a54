"""
data_model — struktury danych silnika urlopowego.

Użycie:
  from data_model import LeaveRecord, LeaveType, ConsecutiveSpan, ParseReport, ...

Moduły:
  leave       — LeaveType, Employee, LeaveRecord, ParsedLeaveEntry,
                ParsedEmployeeBatch, ConsecutiveSpan
  diagnostics — DiagnosticKind, Diagnostic, ParseReport
"""

from .leave import (
    RecordId,
    EmployeeId,
    DEFAULT_TEAM,
    LEAVE_TYPES,
    LeaveType,
    Employee,
    LeaveRecord,
    ParsedLeaveEntry,
    ParsedEmployeeBatch,
    ConsecutiveSpan,
)
from .diagnostics import (
    DiagnosticKind,
    Diagnostic,
    ParseReport,
)

__all__ = [
    # leave
    "RecordId",
    "EmployeeId",
    "DEFAULT_TEAM",
    "LEAVE_TYPES",
    "LeaveType",
    "Employee",
    "LeaveRecord",
    "ParsedLeaveEntry",
    "ParsedEmployeeBatch",
    "ConsecutiveSpan",
    # diagnostics
    "DiagnosticKind",
    "Diagnostic",
    "ParseReport",
]
