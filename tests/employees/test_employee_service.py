from __future__ import annotations

import pytest

from src.employee_records.employee_records.core.enums import EmployeeStatus
from src.employee_records.employee_records.core.exceptions import Conflict, NotFound, ValidationError


@pytest.fixture
def service(container):
    return container.employee_service


def test_create_normalizes_and_defaults(service, employee_payload):
    payload = employee_payload()
    payload.pop("status")

    employee = service.create_employee(payload, admin_id=1)

    assert employee.email == "jane.doe@company.com"
    assert employee.status == EmployeeStatus.ACTIVE
    assert employee.address.country == "United States"
    assert employee.has_account is False
    assert employee.created_by == 1


def test_duplicate_email_is_rejected(service, employee_payload):
    service.create_employee(employee_payload(), admin_id=1)

    with pytest.raises(Conflict) as exc:
        service.create_employee(employee_payload(employeeId="EMP0008", email="jane.doe@company.com"), admin_id=1)
    assert exc.value.message == "Employee with this ID or email already exists"


def test_duplicate_employee_id_is_rejected(service, employee_payload):
    service.create_employee(employee_payload(), admin_id=1)

    with pytest.raises(Conflict):
        service.create_employee(employee_payload(email="other@company.com"), admin_id=1)


def test_update_keeps_own_identifiers(service, employee_payload):
    employee = service.create_employee(employee_payload(), admin_id=1)

    updated = service.update_employee(employee.id, employee_payload(position="Staff Engineer"), admin_id=2)

    assert updated.position == "Staff Engineer"
    assert updated.updated_by == 2


def test_update_cannot_take_another_employees_email(service, employee_payload):
    service.create_employee(employee_payload(), admin_id=1)
    other = service.create_employee(employee_payload(employeeId="EMP0008", email="other@company.com"), admin_id=1)

    with pytest.raises(Conflict):
        service.update_employee(
            other.id, employee_payload(employeeId="EMP0008", email="jane.doe@company.com"), admin_id=1
        )


def test_update_cannot_change_employee_id(service, employee_payload):
    employee = service.create_employee(employee_payload(), admin_id=1)

    with pytest.raises(ValidationError) as exc:
        service.update_employee(employee.id, employee_payload(employeeId="EMP0099"), admin_id=1)

    assert [e["field"] for e in exc.value.errors] == ["employeeId"]
    assert service.get_employee(employee.id).employee_id == "EMP0007"


def test_update_does_not_touch_account_fields(container, service, employee_payload):
    employee = service.create_employee(employee_payload(), admin_id=1)
    container.claim_service.claim("EMP0007", "Abcdef1")
    claimed = container.employees_repo.get_by_id(employee.id)

    payload = employee_payload(hasAccount=False, password="Hacked1", passwordHash="x")
    updated = service.update_employee(employee.id, payload, admin_id=1)

    assert updated.has_account is True
    assert updated.password_hash == claimed.password_hash


def test_update_and_delete_missing_record(service, employee_payload):
    with pytest.raises(NotFound):
        service.update_employee(999, employee_payload(), admin_id=1)
    with pytest.raises(NotFound):
        service.delete_employee(999)


def test_delete_returns_removed_record(service, employee_payload):
    employee = service.create_employee(employee_payload(), admin_id=1)

    deleted = service.delete_employee(employee.id)

    assert deleted.employee_id == "EMP0007"
    with pytest.raises(NotFound):
        service.get_employee(employee.id)


def _seed(service, employee_payload):
    rows = [
        ("EMP0001", "Alice", "Smith", "alice@company.com", "Engineering", "Active", 100000),
        ("EMP0002", "Bob", "Jones", "bob@company.com", "Engineering", "Inactive", 80000),
        ("EMP0003", "Carol", "White", "carol@company.com", "Sales", "Active", 60000),
        ("EMP0004", "Dave", "Brown", "dave@company.com", "HR", "Terminated", 50000),
    ]
    for employee_id, first, last, email, dept, status, salary in rows:
        service.create_employee(
            employee_payload(
                employeeId=employee_id,
                firstName=first,
                lastName=last,
                email=email,
                department=dept,
                status=status,
                salary=salary,
            ),
            admin_id=1,
        )


def test_list_is_newest_first_with_pagination(service, employee_payload):
    _seed(service, employee_payload)

    result = service.list_employees({"page": "1", "limit": "3"})

    assert [e["employeeId"] for e in result["employees"]] == ["EMP0004", "EMP0003", "EMP0002"]
    assert result["pagination"] == {"current": 1, "pages": 2, "total": 4, "limit": 3}

    second = service.list_employees({"page": "2", "limit": "3"})
    assert [e["employeeId"] for e in second["employees"]] == ["EMP0001"]


def test_list_filters_and_search(service, employee_payload):
    _seed(service, employee_payload)

    by_department = service.list_employees({"department": "Engineering"})
    assert {e["employeeId"] for e in by_department["employees"]} == {"EMP0001", "EMP0002"}

    by_status = service.list_employees({"status": "Active", "department": "Sales"})
    assert [e["employeeId"] for e in by_status["employees"]] == ["EMP0003"]

    by_search = service.list_employees({"search": "CAROL"})
    assert [e["employeeId"] for e in by_search["employees"]] == ["EMP0003"]

    by_id = service.list_employees({"search": "emp0004"})
    assert [e["employeeId"] for e in by_id["employees"]] == ["EMP0004"]


def test_list_defaults(service):
    result = service.list_employees({})

    assert result["employees"] == []
    assert result["pagination"] == {"current": 1, "pages": 0, "total": 0, "limit": 10}


@pytest.mark.parametrize(
    "params",
    [
        {"page": "0"},
        {"limit": "101"},
        {"limit": "abc"},
        {"department": "Legal"},
        {"search": "x" * 101},
    ],
)
def test_list_rejects_bad_query(service, params):
    with pytest.raises(ValidationError):
        service.list_employees(params)


def test_stats(service, employee_payload):
    _seed(service, employee_payload)

    stats = service.stats()

    assert stats["overview"] == {"total": 4, "active": 2, "inactive": 1, "terminated": 1}
    assert stats["departments"][0] == {"department": "Engineering", "count": 2, "avgSalary": 90000.0}
    assert {d["department"] for d in stats["departments"]} == {"Engineering", "Sales", "HR"}
