from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..core.exceptions import Conflict
from .model import DepartmentStat, Employee, EmployeeDraft, EmployeeQuery
from .repository import EmployeeRepository

DUPLICATE_MESSAGE = "Employee with this ID or email already exists"


class InMemoryEmployeeRepository(EmployeeRepository):
    """Process-local store used by tests and ``STORE_BACKEND=memory``.

    Reads and writes share one lock, so uniqueness checks and the conditional claim
    behave like the unique indexes and single-row UPDATE of the MySQL store.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._rows: dict[int, Employee] = {}
        self._next_id = 1

    def get_by_id(self, record_id: int) -> Optional[Employee]:
        with self._lock:
            return self._rows.get(int(record_id))

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return next((e for e in self._rows.values() if e.employee_id == employee_id), None)

    def find_duplicate(self, *, employee_id: str, email: str, exclude_id: Optional[int] = None) -> Optional[Employee]:
        with self._lock:
            for e in self._rows.values():
                if e.id == exclude_id:
                    continue
                if e.employee_id == employee_id or e.email == email:
                    return e
            return None

    def create(self, draft: EmployeeDraft, *, created_by: int, now: datetime) -> Employee:
        with self._lock:
            if self.find_duplicate(employee_id=draft.employee_id, email=draft.email):
                raise Conflict(DUPLICATE_MESSAGE)
            employee = Employee(
                id=self._next_id,
                **vars(draft),
                created_by=created_by,
                created_at=now,
                updated_at=now,
            )
            self._rows[employee.id] = employee
            self._next_id += 1
            return employee

    def update(self, record_id: int, draft: EmployeeDraft, *, updated_by: int, now: datetime) -> Optional[Employee]:
        with self._lock:
            current = self._rows.get(int(record_id))
            if not current:
                return None
            if self.find_duplicate(employee_id=draft.employee_id, email=draft.email, exclude_id=current.id):
                raise Conflict(DUPLICATE_MESSAGE)
            updated = replace(current, **vars(draft), updated_by=updated_by, updated_at=now)
            self._rows[current.id] = updated
            return updated

    def delete_by_id(self, record_id: int) -> bool:
        with self._lock:
            return self._rows.pop(int(record_id), None) is not None

    def list(self, query: EmployeeQuery) -> tuple[Sequence[Employee], int]:
        with self._lock:
            items = list(self._rows.values())
        if query.department:
            items = [e for e in items if e.department == query.department]
        if query.status:
            items = [e for e in items if e.status == query.status]
        if query.search:
            term = query.search.lower()
            items = [
                e
                for e in items
                if any(term in v.lower() for v in (e.first_name, e.last_name, e.email, e.employee_id, e.position))
            ]
        items.sort(key=lambda e: e.id, reverse=True)
        start = (query.page - 1) * query.limit
        return items[start : start + query.limit], len(items)

    def count_by_status(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        with self._lock:
            rows = list(self._rows.values())
        for e in rows:
            counts[e.status.value] = counts.get(e.status.value, 0) + 1
        return counts

    def department_stats(self) -> Sequence[DepartmentStat]:
        with self._lock:
            rows = list(self._rows.values())
        groups: dict[str, list[float]] = {}
        for e in rows:
            groups.setdefault(e.department.value, []).append(e.salary)
        stats = [
            DepartmentStat(department=dept, count=len(salaries), avg_salary=sum(salaries) / len(salaries))
            for dept, salaries in groups.items()
        ]
        stats.sort(key=lambda s: (-s.count, s.department))
        return stats

    def claim_account(self, record_id: int, *, password_hash: str, now: datetime) -> bool:
        with self._lock:
            current = self._rows.get(int(record_id))
            if not current or current.has_account or current.status != EmployeeStatus.ACTIVE:
                return False
            self._rows[current.id] = replace(
                current,
                password_hash=password_hash,
                has_account=True,
                account_created_at=now,
                updated_at=now,
            )
            return True

    def touch_last_login(self, record_id: int, *, now: datetime) -> None:
        with self._lock:
            current = self._rows.get(int(record_id))
            if current:
                self._rows[current.id] = replace(current, last_login=now)
