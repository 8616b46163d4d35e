from __future__ import annotations

from flask import Blueprint, Flask, g

from ..common.responses import json_body, success
from ..container import Container
from ..core.enums import Role
from .gate import require_role


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("employee_auth", __name__, url_prefix=f"{app.config.get('API_PREFIX', '')}/employee-auth")

    @bp.route("/register", methods=["POST"], endpoint="register")
    def claim_account():
        body = json_body()
        result = container.claim_service.claim(body.get("employeeId"), body.get("password"))
        return success(
            {"employee": result.principal.to_profile(), "token": result.token},
            message="Employee account created successfully",
            status=201,
        )

    @bp.route("/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        result = container.auth_service.authenticate(Role.EMPLOYEE, body.get("employeeId"), body.get("password"))
        return success({"employee": result.principal.to_profile(), "token": result.token}, message="Login successful")

    @bp.route("/me", methods=["GET"], endpoint="me")
    @require_role(container.gate, Role.EMPLOYEE)
    def me():
        return success({"employee": g.principal.record.to_profile()})

    app.register_blueprint(bp)
