from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role tag embedded in every bearer token."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AdminRole(str, Enum):
    """Role stored on an Administrator record."""

    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class EmployeeStatus(str, Enum):
    """Employment status. Only ACTIVE employees may claim or log in."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    TERMINATED = "Terminated"


class Department(str, Enum):
    HR = "HR"
    IT = "IT"
    FINANCE = "Finance"
    MARKETING = "Marketing"
    OPERATIONS = "Operations"
    SALES = "Sales"
    ENGINEERING = "Engineering"
    DESIGN = "Design"
