from __future__ import annotations

from ..common.rules import FieldRule, RuleTable
from ..core.constants import EMPLOYEE_ID_PATTERN, PASSWORD_MIN_LENGTH

PASSWORD_POLICY_PATTERN = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)"

CLAIM_RULES = RuleTable(
    (
        FieldRule("employeeId", pattern=EMPLOYEE_ID_PATTERN, message="Employee ID must be in format EMP0001"),
        FieldRule(
            "password",
            strip=False,
            min_length=PASSWORD_MIN_LENGTH,
            pattern=PASSWORD_POLICY_PATTERN,
            message=(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters and contain at least one "
                "uppercase letter, one lowercase letter, and one number"
            ),
        ),
    )
)

EMPLOYEE_LOGIN_RULES = RuleTable(
    (
        FieldRule("employeeId", message="Employee ID is required"),
        FieldRule("password", strip=False, message="Password is required"),
    )
)

ADMIN_LOGIN_RULES = RuleTable(
    (
        FieldRule("username", message="Username is required"),
        FieldRule("password", strip=False, message="Password is required"),
    )
)
