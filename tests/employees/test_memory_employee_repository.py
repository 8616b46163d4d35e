from __future__ import annotations

import threading

from src.employee_records.employee_records.admins.memory_admin_repository import InMemoryAdminRepository
from src.employee_records.employee_records.common.datetime_utils import now_utc
from src.employee_records.employee_records.common.rules import validate
from src.employee_records.employee_records.core.enums import AdminRole
from src.employee_records.employee_records.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.employee_records.employee_records.employees.model import EmployeeDraft, EmployeeQuery
from src.employee_records.employee_records.employees.rules import EMPLOYEE_RULES


def _draft(employee_payload, n: int) -> EmployeeDraft:
    payload = employee_payload(employeeId=f"EMP{n:04d}", email=f"user{n}@company.com")
    return EmployeeDraft.from_cleaned(validate(EMPLOYEE_RULES, payload))


def _read_while_writing(read, write, rounds: int = 300) -> list:
    errors: list = []
    done = threading.Event()

    def reader():
        while not done.is_set():
            try:
                read()
            except Exception as e:
                errors.append(e)
                return

    t = threading.Thread(target=reader)
    t.start()
    try:
        for n in range(1, rounds + 1):
            write(n)
    finally:
        done.set()
        t.join(timeout=10)
    return errors


def test_employee_reads_are_safe_during_writes(employee_payload):
    repo = InMemoryEmployeeRepository()
    drafts = [_draft(employee_payload, n) for n in range(1, 301)]

    def read():
        repo.find_duplicate(employee_id="EMP9999", email="nobody@company.com")
        repo.get_by_employee_id("EMP9999")
        repo.list(EmployeeQuery(search="user"))
        repo.count_by_status()
        repo.department_stats()

    errors = _read_while_writing(read, lambda n: repo.create(drafts[n - 1], created_by=1, now=now_utc()))

    assert errors == []
    assert repo.list(EmployeeQuery(limit=1))[1] == 300


def test_admin_lookup_is_safe_during_writes():
    repo = InMemoryAdminRepository()

    def write(n):
        repo.create_admin(
            username=f"admin{n}",
            email=f"admin{n}@company.com",
            password_hash="x",
            role=AdminRole.ADMIN,
            now=now_utc(),
        )

    errors = _read_while_writing(lambda: repo.find_active_by_login("nobody"), write)

    assert errors == []
    assert repo.find_active_by_login("admin300@company.com").username == "admin300"
