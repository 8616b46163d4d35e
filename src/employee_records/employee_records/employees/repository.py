from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import DepartmentStat, Employee, EmployeeDraft, EmployeeQuery


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, never on a concrete store.
    Implementations must enforce uniqueness of ``employee_id`` and ``email``
    themselves and raise ``Conflict`` on a duplicate write.
    """

    def get_by_id(self, record_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_duplicate(self, *, employee_id: str, email: str, exclude_id: Optional[int] = None) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, draft: EmployeeDraft, *, created_by: int, now: datetime) -> Employee:
        raise NotImplementedError

    def update(self, record_id: int, draft: EmployeeDraft, *, updated_by: int, now: datetime) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError

    def list(self, query: EmployeeQuery) -> tuple[Sequence[Employee], int]:
        raise NotImplementedError

    def count_by_status(self) -> dict[str, int]:
        raise NotImplementedError

    def department_stats(self) -> Sequence[DepartmentStat]:
        raise NotImplementedError

    def claim_account(self, record_id: int, *, password_hash: str, now: datetime) -> bool:
        """Set the credential only if the row is Active and still unclaimed.

        Must be a single conditional write so that of two racing claims at most
        one returns True.
        """
        raise NotImplementedError

    def touch_last_login(self, record_id: int, *, now: datetime) -> None:
        raise NotImplementedError
