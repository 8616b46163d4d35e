from __future__ import annotations

import logging

from ..auth.passwords import PasswordHasher
from ..common.datetime_utils import now_utc
from ..common.rules import EMAIL, ENUM, FieldRule, RuleTable, validate
from ..core.constants import PASSWORD_MIN_LENGTH
from ..core.enums import AdminRole
from .model import Admin
from .repository import AdminRepository

logger = logging.getLogger(__name__)

ADMIN_RULES = RuleTable(
    (
        FieldRule("username", min_length=3, max_length=50, pattern=r"^[\w.-]+$", message="Username must be 3-50 characters"),
        FieldRule("email", kind=EMAIL, lowercase=True, message="Please enter a valid email address"),
        FieldRule(
            "password",
            min_length=PASSWORD_MIN_LENGTH,
            strip=False,
            message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
        ),
        FieldRule(
            "role",
            kind=ENUM,
            choices=tuple(r.value for r in AdminRole),
            default=AdminRole.ADMIN.value,
            message="Role must be admin or super_admin",
        ),
    )
)


class AdminService:
    """Use case: provision administrators out-of-band (scripts, not HTTP)."""

    def __init__(self, admins: AdminRepository, hasher: PasswordHasher, *, clock=now_utc):
        self._admins = admins
        self._hasher = hasher
        self._clock = clock

    def create_admin(self, *, username: str, email: str, password: str, role: str = AdminRole.ADMIN.value) -> Admin:
        data = validate(ADMIN_RULES, {"username": username, "email": email, "password": password, "role": role})
        admin = self._admins.create_admin(
            username=data["username"],
            email=data["email"],
            password_hash=self._hasher.hash(data["password"]),
            role=AdminRole(data["role"]),
            now=self._clock(),
        )
        logger.info("Admin %s created", admin.username)
        return admin
