from __future__ import annotations

import pytest

from src.employee_records.employee_records.core.enums import Role
from src.employee_records.employee_records.core.exceptions import Forbidden, NotFound, Unauthenticated


@pytest.fixture
def employee_token(container, employee_payload):
    container.employee_service.create_employee(employee_payload(), admin_id=1)
    return container.claim_service.claim("EMP0007", "Abcdef1").token


@pytest.fixture
def admin_session(container, admin):
    return container.auth_service.authenticate(Role.ADMIN, "admin", "admin123").token


def test_missing_token(container):
    with pytest.raises(Unauthenticated, match="No token provided"):
        container.gate.authorize(None, Role.ADMIN)


def test_employee_token_cannot_pass_admin_gate(container, employee_token):
    with pytest.raises(Forbidden):
        container.gate.authorize(employee_token, Role.ADMIN)


def test_admin_token_cannot_pass_employee_gate(container, admin_session):
    with pytest.raises(Forbidden):
        container.gate.authorize(admin_session, Role.EMPLOYEE)


def test_gate_resolves_fresh_record(container, employee_token):
    principal = container.gate.authorize(employee_token, Role.EMPLOYEE)

    assert principal.role == Role.EMPLOYEE
    assert principal.record.employee_id == "EMP0007"


def test_terminated_employee_loses_access_with_live_token(container, employee_token, employee_payload):
    record = container.employees_repo.get_by_employee_id("EMP0007")
    container.employee_service.update_employee(record.id, employee_payload(status="Terminated"), admin_id=1)

    with pytest.raises(Unauthenticated):
        container.gate.authorize(employee_token, Role.EMPLOYEE)


def test_deactivated_admin_loses_access_with_live_token(container, admin, admin_session):
    container.admins_repo.set_active(admin.admin_id, is_active=False)

    with pytest.raises(Unauthenticated):
        container.gate.authorize(admin_session, Role.ADMIN)


def test_deleted_employee_is_not_found(container, employee_token):
    record = container.employees_repo.get_by_employee_id("EMP0007")
    container.employee_service.delete_employee(record.id)

    with pytest.raises(NotFound):
        container.gate.authorize(employee_token, Role.EMPLOYEE)
