from __future__ import annotations

from flask import Blueprint, Flask, g

from ..auth.gate import require_role
from ..common.responses import failure, json_body, success
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("admin_auth", __name__, url_prefix=f"{app.config.get('API_PREFIX', '')}/auth")

    @bp.route("/register", methods=["POST"], endpoint="register")
    def register_admin():
        # Retired route kept so clients get a clear 403 instead of a 404.
        return failure(
            "Admin registration is disabled. Admin accounts can only be created by system administrators.",
            status=403,
        )

    @bp.route("/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        result = container.auth_service.authenticate(Role.ADMIN, body.get("username"), body.get("password"))
        return success({"admin": result.principal.to_public(), "token": result.token}, message="Login successful")

    @bp.route("/me", methods=["GET"], endpoint="me")
    @require_role(container.gate, Role.ADMIN)
    def me():
        return success({"admin": g.principal.record.to_public()})

    app.register_blueprint(bp)
