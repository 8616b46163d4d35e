from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..core.enums import Department, EmployeeStatus


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    state: str
    zip_code: str
    country: str


@dataclass(frozen=True)
class EmergencyContact:
    name: str
    relationship: str
    phone: str


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``password_hash`` is None until the account is claimed; ``has_account`` is
    True exactly when it is set. Pure data, no DB access.
    """

    id: int
    employee_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    department: Department
    position: str
    salary: float
    hire_date: date
    status: EmployeeStatus
    address: Address
    emergency_contact: EmergencyContact
    password_hash: Optional[str] = None
    has_account: bool = False
    account_created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def to_public(self) -> dict:
        """Full record as served to administrators (never the hash)."""
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department.value,
            "position": self.position,
            "salary": self.salary,
            "hireDate": isoformat(self.hire_date),
            "status": self.status.value,
            "address": {
                "street": self.address.street,
                "city": self.address.city,
                "state": self.address.state,
                "zipCode": self.address.zip_code,
                "country": self.address.country,
            },
            "emergencyContact": {
                "name": self.emergency_contact.name,
                "relationship": self.emergency_contact.relationship,
                "phone": self.emergency_contact.phone,
            },
            "hasAccount": self.has_account,
            "accountCreatedAt": isoformat(self.account_created_at),
            "lastLogin": isoformat(self.last_login),
            "createdBy": self.created_by,
            "updatedBy": self.updated_by,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def to_profile(self) -> dict:
        """Self-service view returned by the employee auth endpoints."""
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "department": self.department.value,
            "position": self.position,
            "status": self.status.value,
            "hasAccount": self.has_account,
            "lastLogin": isoformat(self.last_login),
        }


@dataclass(frozen=True)
class EmployeeDraft:
    """Validated admin input for create/update (no account fields)."""

    employee_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    department: Department
    position: str
    salary: float
    hire_date: date
    status: EmployeeStatus
    address: Address
    emergency_contact: EmergencyContact

    @classmethod
    def from_cleaned(cls, data: dict) -> "EmployeeDraft":
        address = data["address"]
        contact = data["emergencyContact"]
        return cls(
            employee_id=data["employeeId"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            email=data["email"],
            phone=data["phone"],
            department=Department(data["department"]),
            position=data["position"],
            salary=float(data["salary"]),
            hire_date=data["hireDate"],
            status=EmployeeStatus(data["status"]),
            address=Address(
                street=address["street"],
                city=address["city"],
                state=address["state"],
                zip_code=address["zipCode"],
                country=address["country"],
            ),
            emergency_contact=EmergencyContact(
                name=contact["name"],
                relationship=contact["relationship"],
                phone=contact["phone"],
            ),
        )


@dataclass(frozen=True)
class EmployeeQuery:
    page: int = 1
    limit: int = 10
    department: Optional[Department] = None
    status: Optional[EmployeeStatus] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class DepartmentStat:
    department: str
    count: int
    avg_salary: float
