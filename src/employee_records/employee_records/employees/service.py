from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from ..common.datetime_utils import now_utc
from ..common.rules import validate
from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.enums import Department, EmployeeStatus
from ..core.exceptions import Conflict, NotFound, ValidationError
from .model import Employee, EmployeeDraft, EmployeeQuery
from .repository import EmployeeRepository
from .rules import EMPLOYEE_QUERY_RULES, EMPLOYEE_RULES

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Employee with this ID or email already exists"


class EmployeeService:
    """Use case: manage employee records (admin only)."""

    def __init__(self, employees: EmployeeRepository, *, clock=now_utc):
        self._employees = employees
        self._clock = clock

    def list_employees(self, params: Optional[Mapping[str, Any]] = None) -> dict:
        data = validate(EMPLOYEE_QUERY_RULES, params)
        query = EmployeeQuery(
            page=data.get("page", 1),
            limit=data.get("limit", DEFAULT_PAGE_LIMIT),
            department=Department(data["department"]) if "department" in data else None,
            status=EmployeeStatus(data["status"]) if "status" in data else None,
            search=data.get("search"),
        )
        items, total = self._employees.list(query)
        return {
            "employees": [e.to_public() for e in items],
            "pagination": {
                "current": query.page,
                "pages": math.ceil(total / query.limit),
                "total": total,
                "limit": query.limit,
            },
        }

    def get_employee(self, record_id: int) -> Employee:
        employee = self._employees.get_by_id(record_id)
        if not employee:
            raise NotFound("Employee not found")
        return employee

    def create_employee(self, payload: Optional[Mapping[str, Any]], *, admin_id: int) -> Employee:
        draft = EmployeeDraft.from_cleaned(validate(EMPLOYEE_RULES, payload))

        # Fast path for a friendly error; the store's unique index is what actually decides.
        if self._employees.find_duplicate(employee_id=draft.employee_id, email=draft.email):
            raise Conflict(DUPLICATE_MESSAGE)

        employee = self._employees.create(draft, created_by=admin_id, now=self._clock())
        logger.info("Employee %s created by admin %s", employee.employee_id, admin_id)
        return employee

    def update_employee(self, record_id: int, payload: Optional[Mapping[str, Any]], *, admin_id: int) -> Employee:
        draft = EmployeeDraft.from_cleaned(validate(EMPLOYEE_RULES, payload))
        current = self.get_employee(record_id)
        if draft.employee_id != current.employee_id:
            raise ValidationError(
                "Validation failed",
                errors=[{"field": "employeeId", "message": "Employee ID cannot be changed once assigned"}],
            )

        if self._employees.find_duplicate(employee_id=draft.employee_id, email=draft.email, exclude_id=current.id):
            raise Conflict(DUPLICATE_MESSAGE)

        updated = self._employees.update(current.id, draft, updated_by=admin_id, now=self._clock())
        if not updated:
            raise NotFound("Employee not found")
        logger.info("Employee %s updated by admin %s", updated.employee_id, admin_id)
        return updated

    def delete_employee(self, record_id: int) -> Employee:
        employee = self.get_employee(record_id)
        if not self._employees.delete_by_id(employee.id):
            raise NotFound("Employee not found")
        logger.info("Employee %s deleted", employee.employee_id)
        return employee

    def stats(self) -> dict:
        counts = self._employees.count_by_status()
        departments = self._employees.department_stats()
        return {
            "overview": {
                "total": sum(counts.values()),
                "active": counts.get(EmployeeStatus.ACTIVE.value, 0),
                "inactive": counts.get(EmployeeStatus.INACTIVE.value, 0),
                "terminated": counts.get(EmployeeStatus.TERMINATED.value, 0),
            },
            "departments": [
                {"department": d.department, "count": d.count, "avgSalary": round(d.avg_salary, 2)} for d in departments
            ],
        }
