from __future__ import annotations


def test_create_returns_201_with_public_record(client, admin_token, bearer, employee_payload):
    resp = client.post("/employees", json=employee_payload(), headers=bearer(admin_token))

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["message"] == "Employee created successfully"
    employee = body["data"]["employee"]
    assert employee["employeeId"] == "EMP0007"
    assert employee["email"] == "jane.doe@company.com"
    assert employee["fullName"] == "Jane Doe"
    assert employee["hasAccount"] is False
    assert "passwordHash" not in employee


def test_create_invalid_payload_lists_errors(client, admin_token, bearer, employee_payload):
    payload = employee_payload(employeeId="E7", salary=-5, hireDate="2999-01-01")

    resp = client.post("/employees", json=payload, headers=bearer(admin_token))

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert {"employeeId", "salary", "hireDate"} <= {e["field"] for e in body["errors"]}


def test_create_duplicate_is_400(client, admin_token, bearer, employee_payload, create_employee):
    create_employee()

    resp = client.post("/employees", json=employee_payload(employeeId="EMP0008"), headers=bearer(admin_token))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Employee with this ID or email already exists"


def test_malformed_body_is_400(client, admin_token, bearer):
    headers = {**bearer(admin_token), "Content-Type": "application/json"}

    resp = client.post("/employees", data="{not json", headers=headers)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_get_update_delete_roundtrip(client, admin_token, bearer, employee_payload, create_employee):
    record = create_employee()
    url = f"/employees/{record['id']}"

    got = client.get(url, headers=bearer(admin_token))
    assert got.status_code == 200
    assert got.get_json()["data"]["employee"]["employeeId"] == "EMP0007"

    updated = client.put(url, json=employee_payload(position="Tech Lead"), headers=bearer(admin_token))
    assert updated.status_code == 200
    assert updated.get_json()["data"]["employee"]["position"] == "Tech Lead"

    deleted = client.delete(url, headers=bearer(admin_token))
    assert deleted.status_code == 200
    assert deleted.get_json()["data"]["deletedEmployee"]["id"] == record["id"]

    assert client.get(url, headers=bearer(admin_token)).status_code == 404


def test_unknown_record_is_404(client, admin_token, bearer):
    resp = client.get("/employees/4242", headers=bearer(admin_token))

    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "Employee not found"}


def test_list_and_stats(client, admin_token, bearer, create_employee):
    create_employee()
    create_employee(employeeId="EMP0008", email="sam@company.com", department="Sales", salary=50000)

    listed = client.get("/employees?department=Sales", headers=bearer(admin_token))
    assert listed.status_code == 200
    data = listed.get_json()["data"]
    assert [e["employeeId"] for e in data["employees"]] == ["EMP0008"]
    assert data["pagination"]["total"] == 1

    stats = client.get("/employees/stats/overview", headers=bearer(admin_token))
    assert stats.status_code == 200
    assert stats.get_json()["data"]["overview"]["total"] == 2


def test_list_bad_query_is_400(client, admin_token, bearer):
    resp = client.get("/employees?limit=500", headers=bearer(admin_token))

    assert resp.status_code == 400


def test_schema_serves_rule_table(client, admin_token, bearer):
    resp = client.get("/employees/schema", headers=bearer(admin_token))

    assert resp.status_code == 200
    fields = {r["field"]: r for r in resp.get_json()["data"]["employee"]}
    assert fields["employeeId"]["pattern"] == r"^EMP\d{4}$"
    assert fields["salary"]["max"] == 10_000_000
    assert "Engineering" in fields["department"]["choices"]
    assert fields["status"]["default"] == "Active"
    assert "address.zipCode" in fields


def test_routes_require_token(client):
    assert client.get("/employees").status_code == 401
    assert client.post("/employees", json={}).status_code == 401
    assert client.get("/employees/schema").status_code == 401


def test_employee_token_is_forbidden(client, create_employee, bearer):
    create_employee()
    token = client.post(
        "/employee-auth/register", json={"employeeId": "EMP0007", "password": "Abcdef1"}
    ).get_json()["data"]["token"]

    resp = client.get("/employees", headers=bearer(token))

    assert resp.status_code == 403
    assert resp.get_json() == {"success": False, "message": "Access denied. Admin account required."}


def test_non_object_body_is_400(client, admin_token, bearer):
    resp = client.post("/employees", json=["EMP0007"], headers=bearer(admin_token))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Validation failed"


def test_nan_salary_is_rejected(client, admin_token, bearer, employee_payload):
    resp = client.post(
        "/employees",
        data='{"salary": NaN}',
        content_type="application/json",
        headers=bearer(admin_token),
    )

    assert resp.status_code == 400
    assert "salary" in {e["field"] for e in resp.get_json()["errors"]}

    payload = employee_payload(salary=float("nan"))
    resp = client.post("/employees", json=payload, headers=bearer(admin_token))

    assert resp.status_code == 400
    assert [e["field"] for e in resp.get_json()["errors"]] == ["salary"]
