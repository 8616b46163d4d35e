from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..core.enums import Department, EmployeeStatus
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import Address, DepartmentStat, EmergencyContact, Employee, EmployeeDraft, EmployeeQuery
from .repository import EmployeeRepository

DUPLICATE_MESSAGE = "Employee with this ID or email already exists"

_COLUMNS = """
    id, employee_id, first_name, last_name, email, phone, department, position, salary,
    hire_date, status, street, city, state, zip_code, country,
    emergency_name, emergency_relationship, emergency_phone,
    password_hash, has_account, account_created_at, last_login,
    created_by, updated_by, created_at, updated_at
"""


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        id=int(row["id"]),
        employee_id=row["employee_id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        phone=row["phone"],
        department=Department(row["department"]),
        position=row["position"],
        salary=float(row["salary"]),
        hire_date=row["hire_date"],
        status=EmployeeStatus(row["status"]),
        address=Address(
            street=row["street"],
            city=row["city"],
            state=row["state"],
            zip_code=row["zip_code"],
            country=row["country"],
        ),
        emergency_contact=EmergencyContact(
            name=row["emergency_name"],
            relationship=row["emergency_relationship"],
            phone=row["emergency_phone"],
        ),
        password_hash=row.get("password_hash"),
        has_account=bool(row.get("has_account", False)),
        account_created_at=from_db_datetime(row.get("account_created_at")),
        last_login=from_db_datetime(row.get("last_login")),
        created_by=row.get("created_by"),
        updated_by=row.get("updated_by"),
        created_at=from_db_datetime(row.get("created_at")),
        updated_at=from_db_datetime(row.get("updated_at")),
    )


def _draft_params(draft: EmployeeDraft) -> tuple:
    return (
        draft.employee_id,
        draft.first_name,
        draft.last_name,
        draft.email,
        draft.phone,
        draft.department.value,
        draft.position,
        draft.salary,
        draft.hire_date,
        draft.status.value,
        draft.address.street,
        draft.address.city,
        draft.address.state,
        draft.address.zip_code,
        draft.address.country,
        draft.emergency_contact.name,
        draft.emergency_contact.relationship,
        draft.emergency_contact.phone,
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, where: str, params: tuple) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE {where}", params)
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def get_by_id(self, record_id: int) -> Optional[Employee]:
        return self._get_one("id=%s", (record_id,))

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return self._get_one("employee_id=%s", (employee_id,))

    def find_duplicate(self, *, employee_id: str, email: str, exclude_id: Optional[int] = None) -> Optional[Employee]:
        if exclude_id is None:
            return self._get_one("(employee_id=%s OR email=%s) LIMIT 1", (employee_id, email))
        return self._get_one("(employee_id=%s OR email=%s) AND id<>%s LIMIT 1", (employee_id, email, exclude_id))

    def create(self, draft: EmployeeDraft, *, created_by: int, now: datetime) -> Employee:
        stamp = to_db_datetime(now)
        with db_cursor(self._conn_factory, conflict_message=DUPLICATE_MESSAGE) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    employee_id, first_name, last_name, email, phone, department, position, salary,
                    hire_date, status, street, city, state, zip_code, country,
                    emergency_name, emergency_relationship, emergency_phone,
                    has_account, created_by, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,0,%s,%s,%s)
                """,
                _draft_params(draft) + (created_by, stamp, stamp),
            )
            record_id = int(cur.lastrowid)
        created = self.get_by_id(record_id)
        if created is None:
            raise StoreError()
        return created

    def update(self, record_id: int, draft: EmployeeDraft, *, updated_by: int, now: datetime) -> Optional[Employee]:
        with db_cursor(self._conn_factory, conflict_message=DUPLICATE_MESSAGE) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET employee_id=%s, first_name=%s, last_name=%s, email=%s, phone=%s, department=%s,
                    position=%s, salary=%s, hire_date=%s, status=%s, street=%s, city=%s, state=%s,
                    zip_code=%s, country=%s, emergency_name=%s, emergency_relationship=%s,
                    emergency_phone=%s, updated_by=%s, updated_at=%s
                WHERE id=%s
                """,
                _draft_params(draft) + (updated_by, to_db_datetime(now), record_id),
            )
        return self.get_by_id(record_id)

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (record_id,))
            return cur.rowcount > 0

    def list(self, query: EmployeeQuery) -> tuple[Sequence[Employee], int]:
        clauses: list[str] = []
        params: list[Any] = []
        if query.department:
            clauses.append("department=%s")
            params.append(query.department.value)
        if query.status:
            clauses.append("status=%s")
            params.append(query.status.value)
        if query.search:
            like = f"%{_escape_like(query.search.lower())}%"
            clauses.append(
                "(LOWER(first_name) LIKE %s OR LOWER(last_name) LIKE %s OR LOWER(email) LIKE %s"
                " OR LOWER(employee_id) LIKE %s OR LOWER(position) LIKE %s)"
            )
            params.extend([like] * 5)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM employees {where}", tuple(params))
            total = int(fetchone(cur)["total"])
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees {where} ORDER BY created_at DESC, id DESC LIMIT %s OFFSET %s",
                tuple(params) + (query.limit, (query.page - 1) * query.limit),
            )
            return [_row_to_employee(r) for r in fetchall(cur)], total

    def count_by_status(self) -> dict[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT status, COUNT(*) AS n FROM employees GROUP BY status")
            return {r["status"]: int(r["n"]) for r in fetchall(cur)}

    def department_stats(self) -> Sequence[DepartmentStat]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT department, COUNT(*) AS n, AVG(salary) AS avg_salary
                FROM employees
                GROUP BY department
                ORDER BY n DESC, department
                """
            )
            return [
                DepartmentStat(department=r["department"], count=int(r["n"]), avg_salary=float(r["avg_salary"] or 0))
                for r in fetchall(cur)
            ]

    def claim_account(self, record_id: int, *, password_hash: str, now: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET password_hash=%s, has_account=1, account_created_at=%s, updated_at=%s
                WHERE id=%s AND has_account=0 AND status=%s
                """,
                (password_hash, to_db_datetime(now), to_db_datetime(now), record_id, EmployeeStatus.ACTIVE.value),
            )
            return cur.rowcount == 1

    def touch_last_login(self, record_id: int, *, now: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET last_login=%s WHERE id=%s", (to_db_datetime(now), record_id))
