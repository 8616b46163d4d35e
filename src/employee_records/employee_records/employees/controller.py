from __future__ import annotations

from flask import Blueprint, Flask, g, request

from ..auth.gate import require_role
from ..common.responses import json_body, success
from ..container import Container
from ..core.enums import Role
from .rules import EMPLOYEE_QUERY_RULES, EMPLOYEE_RULES


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("employees", __name__, url_prefix=f"{app.config.get('API_PREFIX', '')}/employees")
    admin_required = require_role(container.gate, Role.ADMIN)
    service = container.employee_service

    @bp.route("", methods=["GET"], endpoint="list")
    @admin_required
    def list_employees():
        return success(service.list_employees(request.args.to_dict()))

    @bp.route("/schema", methods=["GET"], endpoint="schema")
    @admin_required
    def schema():
        # Same rule tables the server validates with; the form layer renders from these.
        return success({"employee": EMPLOYEE_RULES.as_json(), "query": EMPLOYEE_QUERY_RULES.as_json()})

    @bp.route("/stats/overview", methods=["GET"], endpoint="stats")
    @admin_required
    def stats():
        return success(service.stats())

    @bp.route("/<int:record_id>", methods=["GET"], endpoint="get")
    @admin_required
    def get_employee(record_id: int):
        return success({"employee": service.get_employee(record_id).to_public()})

    @bp.route("", methods=["POST"], endpoint="create")
    @admin_required
    def create_employee():
        employee = service.create_employee(json_body(), admin_id=g.principal.principal_id)
        return success({"employee": employee.to_public()}, message="Employee created successfully", status=201)

    @bp.route("/<int:record_id>", methods=["PUT"], endpoint="update")
    @admin_required
    def update_employee(record_id: int):
        employee = service.update_employee(record_id, json_body(), admin_id=g.principal.principal_id)
        return success({"employee": employee.to_public()}, message="Employee updated successfully")

    @bp.route("/<int:record_id>", methods=["DELETE"], endpoint="delete")
    @admin_required
    def delete_employee(record_id: int):
        employee = service.delete_employee(record_id)
        return success({"deletedEmployee": employee.to_public()}, message="Employee deleted successfully")

    app.register_blueprint(bp)
