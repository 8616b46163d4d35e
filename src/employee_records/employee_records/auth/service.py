from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Optional, Union

from ..admins.model import Admin
from ..admins.repository import AdminRepository
from ..common.datetime_utils import now_utc
from ..common.rules import validate
from ..core.enums import EmployeeStatus, Role
from ..core.exceptions import AlreadyClaimed, DomainError, InvalidClaimTarget, InvalidCredentials
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .passwords import PasswordHasher
from .rules import ADMIN_LOGIN_RULES, CLAIM_RULES, EMPLOYEE_LOGIN_RULES
from .tokens import TokenService

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class AuthResult:
    """A principal plus the bearer token just issued for it."""

    principal: Union[Admin, Employee]
    token: str
    role: Role


class AuthService:
    """Use case: authenticate an administrator or an employee (login).

    Both kinds follow the same shape: look the candidate up together with its
    "may log in" predicate, verify the secret, record lastLogin best-effort,
    issue a token. An unknown identifier and a wrong secret raise the very
    same ``InvalidCredentials``.
    """

    def __init__(
        self,
        admins: AdminRepository,
        employees: EmployeeRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        *,
        clock: Clock = now_utc,
    ):
        self._admins = admins
        self._employees = employees
        self._hasher = hasher
        self._tokens = tokens
        self._clock = clock

    def authenticate(self, kind: Role, identifier: str, password: str) -> AuthResult:
        if kind == Role.ADMIN:
            return self.login_admin(identifier, password)
        return self.login_employee(identifier, password)

    def login_admin(self, username: str, password: str) -> AuthResult:
        data = validate(ADMIN_LOGIN_RULES, {"username": username, "password": password})

        admin = self._admins.find_active_by_login(data["username"])
        if not admin or not self._hasher.verify(data["password"], admin.password_hash):
            logger.info("Admin login rejected for %r", data["username"])
            raise InvalidCredentials()

        now = self._clock()
        self._record_login(lambda: self._admins.touch_last_login(admin.admin_id, now=now))
        admin = replace(admin, last_login=now)

        token = self._tokens.issue(admin.admin_id, Role.ADMIN, now=now)
        logger.info("Admin %s logged in", admin.username)
        return AuthResult(principal=admin, token=token, role=Role.ADMIN)

    def login_employee(self, employee_id: str, password: str) -> AuthResult:
        data = validate(EMPLOYEE_LOGIN_RULES, {"employeeId": employee_id, "password": password})

        employee = self._employees.get_by_employee_id(data["employeeId"])
        if not _may_log_in(employee) or not self._hasher.verify(data["password"], employee.password_hash):
            logger.info("Employee login rejected for %r", data["employeeId"])
            raise InvalidCredentials()

        now = self._clock()
        self._record_login(lambda: self._employees.touch_last_login(employee.id, now=now))
        employee = replace(employee, last_login=now)

        token = self._tokens.issue(employee.id, Role.EMPLOYEE, extra={"employeeId": employee.employee_id}, now=now)
        logger.info("Employee %s logged in", employee.employee_id)
        return AuthResult(principal=employee, token=token, role=Role.EMPLOYEE)

    @staticmethod
    def _record_login(write: Callable[[], None]) -> None:
        # lastLogin is bookkeeping; a failed write must not fail the login.
        try:
            write()
        except DomainError:
            logger.warning("Could not record lastLogin", exc_info=True)


def _may_log_in(employee: Optional[Employee]) -> bool:
    return bool(employee and employee.has_account and employee.status == EmployeeStatus.ACTIVE)


class AccountClaimService:
    """Use case: an employee attaches a password to their pre-provisioned record.

    Provisioning stays with administrators; this never creates an Employee.
    """

    def __init__(self, employees: EmployeeRepository, hasher: PasswordHasher, tokens: TokenService, *, clock: Clock = now_utc):
        self._employees = employees
        self._hasher = hasher
        self._tokens = tokens
        self._clock = clock

    def claim(self, employee_id: str, password: str) -> AuthResult:
        data = validate(CLAIM_RULES, {"employeeId": employee_id, "password": password})

        employee = self._employees.get_by_employee_id(data["employeeId"])
        if not employee or employee.status != EmployeeStatus.ACTIVE:
            # same error for "no such id" and "not active"
            logger.info("Claim rejected for %r: no active employee", data["employeeId"])
            raise InvalidClaimTarget()
        if employee.has_account:
            raise AlreadyClaimed()

        password_hash = self._hasher.hash(data["password"])
        now = self._clock()
        if not self._employees.claim_account(employee.id, password_hash=password_hash, now=now):
            # lost a race with a concurrent claim (or a status change) between read and write
            current = self._employees.get_by_id(employee.id)
            if current and current.has_account:
                raise AlreadyClaimed()
            raise InvalidClaimTarget()

        claimed = self._employees.get_by_id(employee.id)
        if not claimed:
            raise InvalidClaimTarget()
        token = self._tokens.issue(claimed.id, Role.EMPLOYEE, extra={"employeeId": claimed.employee_id}, now=now)
        logger.info("Employee %s claimed an account", claimed.employee_id)
        return AuthResult(principal=claimed, token=token, role=Role.EMPLOYEE)
