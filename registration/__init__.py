"""
registration — zapis wyników parsera wsadowego w magazynie urlopów.

Publiczne API:
  register_batches(report_or_batches, store)  -> RegistrationResult
  LeaveStore                                  — protokół magazynu
  MemoryLeaveStore, PostgresLeaveStore        — implementacje
  LeaveStoreError, RegistrationBlockedError   — wyjątki
"""

from .store import LeaveStore, LeaveStoreError, MemoryLeaveStore, PostgresLeaveStore
from .register import (
    EntryFailure,
    RegistrationBlockedError,
    RegistrationResult,
    register_batches,
)

__all__ = [
    "LeaveStore",
    "LeaveStoreError",
    "MemoryLeaveStore",
    "PostgresLeaveStore",
    "EntryFailure",
    "RegistrationBlockedError",
    "RegistrationResult",
    "register_batches",
]
