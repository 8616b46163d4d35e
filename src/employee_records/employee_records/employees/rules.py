from __future__ import annotations

from ..common.rules import DATE, EMAIL, ENUM, INTEGER, NUMBER, FieldRule, RuleTable
from ..core.constants import DEFAULT_COUNTRY, EMPLOYEE_ID_PATTERN, MAX_PAGE_LIMIT, MAX_SEARCH_LENGTH
from ..core.enums import Department, EmployeeStatus

NAME_PATTERN = r"^[a-zA-Z\s]+$"
PHONE_PATTERN = r"^\+?[\d\s\-\(\)]{10,15}$"
ZIP_PATTERN = r"^\d{5}(-\d{4})?$"

DEPARTMENTS = tuple(d.value for d in Department)
STATUSES = tuple(s.value for s in EmployeeStatus)

EMPLOYEE_RULES = RuleTable(
    (
        FieldRule("employeeId", pattern=EMPLOYEE_ID_PATTERN, message="Employee ID must be in format EMP0001"),
        FieldRule(
            "firstName",
            min_length=2,
            max_length=50,
            pattern=NAME_PATTERN,
            message="First name must be 2-50 characters and contain only letters",
        ),
        FieldRule(
            "lastName",
            min_length=2,
            max_length=50,
            pattern=NAME_PATTERN,
            message="Last name must be 2-50 characters and contain only letters",
        ),
        FieldRule("email", kind=EMAIL, lowercase=True, message="Please enter a valid email address"),
        FieldRule("phone", pattern=PHONE_PATTERN, message="Please enter a valid phone number"),
        FieldRule("department", kind=ENUM, choices=DEPARTMENTS, message="Please select a valid department"),
        FieldRule("position", min_length=2, max_length=100, message="Position must be 2-100 characters"),
        FieldRule(
            "salary",
            kind=NUMBER,
            minimum=0,
            maximum=10_000_000,
            message="Salary must be a valid number between 0 and 10,000,000",
        ),
        FieldRule("hireDate", kind=DATE, not_future=True, message="Hire date must be a valid date, not in the future"),
        FieldRule(
            "status",
            kind=ENUM,
            choices=STATUSES,
            default=EmployeeStatus.ACTIVE.value,
            message="Status must be Active, Inactive, or Terminated",
        ),
        FieldRule(
            "address.street",
            min_length=1,
            max_length=200,
            message="Street address is required and cannot exceed 200 characters",
        ),
        FieldRule(
            "address.city",
            max_length=50,
            pattern=NAME_PATTERN,
            message="City must contain only letters and spaces, max 50 characters",
        ),
        FieldRule(
            "address.state",
            max_length=50,
            pattern=NAME_PATTERN,
            message="State must contain only letters and spaces, max 50 characters",
        ),
        FieldRule("address.zipCode", pattern=ZIP_PATTERN, message="Please enter a valid ZIP code"),
        FieldRule(
            "address.country",
            max_length=50,
            default=DEFAULT_COUNTRY,
            message="Country cannot exceed 50 characters",
        ),
        FieldRule(
            "emergencyContact.name",
            max_length=100,
            message="Emergency contact name is required, max 100 characters",
        ),
        FieldRule(
            "emergencyContact.relationship",
            max_length=50,
            message="Emergency contact relationship is required, max 50 characters",
        ),
        FieldRule(
            "emergencyContact.phone",
            pattern=PHONE_PATTERN,
            message="Please enter a valid emergency contact phone number",
        ),
    )
)

EMPLOYEE_QUERY_RULES = RuleTable(
    (
        FieldRule("page", kind=INTEGER, required=False, minimum=1, message="Page must be a positive integer"),
        FieldRule(
            "limit",
            kind=INTEGER,
            required=False,
            minimum=1,
            maximum=MAX_PAGE_LIMIT,
            message=f"Limit must be between 1 and {MAX_PAGE_LIMIT}",
        ),
        FieldRule("department", kind=ENUM, required=False, choices=DEPARTMENTS, message="Please select a valid department"),
        FieldRule("status", kind=ENUM, required=False, choices=STATUSES, message="Status must be Active, Inactive, or Terminated"),
        FieldRule(
            "search",
            required=False,
            max_length=MAX_SEARCH_LENGTH,
            message=f"Search term cannot exceed {MAX_SEARCH_LENGTH} characters",
        ),
    )
)
