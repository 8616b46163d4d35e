from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "testing")

import pytest

from src.employee_records.employee_records.container import STORE_MEMORY, build_container
from src.employee_records.employee_records.main import create_app

JWT_SECRET = "test-jwt-secret-of-at-least-32-bytes"
FAST_HASH = "pbkdf2:sha256:1000"


def _employee_payload(**overrides) -> dict:
    payload = {
        "employeeId": "EMP0007",
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "Jane.Doe@Company.com",
        "phone": "+1 555 123 4567",
        "department": "Engineering",
        "position": "Backend Developer",
        "salary": 85000,
        "hireDate": "2023-01-15",
        "status": "Active",
        "address": {
            "street": "1 Main Street",
            "city": "Springfield",
            "state": "Illinois",
            "zipCode": "62701",
        },
        "emergencyContact": {
            "name": "John Doe",
            "relationship": "Spouse",
            "phone": "555-987-6543",
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def employee_payload():
    return _employee_payload


@pytest.fixture
def container():
    return build_container(jwt_secret=JWT_SECRET, store_backend=STORE_MEMORY, password_method=FAST_HASH)


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(container):
    return container.admin_service.create_admin(
        username="admin", email="admin@company.com", password="admin123", role="super_admin"
    )


@pytest.fixture
def admin_token(client, admin) -> str:
    resp = client.post("/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    return resp.get_json()["data"]["token"]


@pytest.fixture
def bearer():
    def _headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def create_employee(client, admin_token, bearer, employee_payload):
    """Create an employee through the API, returning its JSON record."""

    def _create(**overrides) -> dict:
        resp = client.post("/employees", json=employee_payload(**overrides), headers=bearer(admin_token))
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]["employee"]

    return _create
