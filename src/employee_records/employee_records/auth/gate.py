from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Callable, Optional, Union

from flask import g, request

from ..admins.model import Admin
from ..admins.repository import AdminRepository
from ..core.enums import EmployeeStatus, Role
from ..core.exceptions import Forbidden, NotFound, Unauthenticated
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .tokens import TokenClaims, TokenService


@dataclass(frozen=True)
class Principal:
    role: Role
    record: Union[Admin, Employee]
    claims: TokenClaims

    @property
    def principal_id(self) -> int:
        return self.claims.principal_id


class AuthorizationGate:
    """Resolve a bearer token to a principal and admit or deny by role.

    Runs once per request before any handler. The principal's record is read
    fresh every time, so a deactivated admin or a non-active employee is shut
    out even while holding an unexpired token.
    """

    def __init__(self, tokens: TokenService, admins: AdminRepository, employees: EmployeeRepository):
        self._tokens = tokens
        self._admins = admins
        self._employees = employees

    def authorize(self, token: Optional[str], required_role: Optional[Role] = None) -> Principal:
        if not token:
            raise Unauthenticated("No token provided")
        claims = self._tokens.verify(token)

        if required_role is not None and claims.role != required_role:
            if required_role == Role.ADMIN:
                raise Forbidden("Access denied. Admin account required.")
            raise Forbidden("Access denied. Employee account required.")

        if claims.role == Role.ADMIN:
            return Principal(role=claims.role, record=self._resolve_admin(claims.principal_id), claims=claims)
        return Principal(role=claims.role, record=self._resolve_employee(claims.principal_id), claims=claims)

    def _resolve_admin(self, admin_id: int) -> Admin:
        admin = self._admins.get_by_id(admin_id)
        if not admin:
            raise NotFound("Admin not found")
        if not admin.is_active:
            raise Unauthenticated("Account is disabled")
        return admin

    def _resolve_employee(self, record_id: int) -> Employee:
        employee = self._employees.get_by_id(record_id)
        if not employee or not employee.has_account:
            raise NotFound("Employee not found or account not active")
        if employee.status != EmployeeStatus.ACTIVE:
            raise Unauthenticated("Account is no longer active")
        return employee


def bearer_token() -> Optional[str]:
    """Token from ``Authorization: Bearer <token>``, or None."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_role(gate: AuthorizationGate, role: Optional[Role] = None) -> Callable:
    """Decorator running ``gate`` before the view; the principal lands on ``g.principal``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.principal = gate.authorize(bearer_token(), role)
            return view(*args, **kwargs)

        return wrapper

    return decorator
