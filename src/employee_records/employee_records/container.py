from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admins.memory_admin_repository import InMemoryAdminRepository
from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AdminService
from .auth.gate import AuthorizationGate
from .auth.passwords import PasswordHasher
from .auth.service import AccountClaimService, AuthService
from .auth.tokens import TokenService
from .database.connection import DBConfig, DatabaseConnection
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService

STORE_MYSQL = "mysql"
STORE_MEMORY = "memory"


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    admins_repo: AdminRepository
    employees_repo: EmployeeRepository

    hasher: PasswordHasher
    tokens: TokenService
    gate: AuthorizationGate

    auth_service: AuthService
    claim_service: AccountClaimService
    admin_service: AdminService
    employee_service: EmployeeService


def build_container(
    *,
    jwt_secret: str,
    db_config: Optional[dict] = None,
    store_backend: str = STORE_MYSQL,
    password_method: Optional[str] = None,
) -> Container:
    conn: Optional[DatabaseConnection] = None
    admins_repo: AdminRepository
    employees_repo: EmployeeRepository

    if store_backend == STORE_MEMORY:
        admins_repo = InMemoryAdminRepository()
        employees_repo = InMemoryEmployeeRepository()
    elif store_backend == STORE_MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql store")
        config = DBConfig(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
            connection_timeout=int(db_config.get("connection_timeout", 5)),
        )
        conn = DatabaseConnection.get_instance(config)
        admins_repo = MySQLAdminRepository(conn)
        employees_repo = MySQLEmployeeRepository(conn)
    else:
        raise ValueError(f"Unknown STORE_BACKEND: {store_backend!r}")

    hasher = PasswordHasher(password_method)
    tokens = TokenService(jwt_secret)

    return Container(
        conn=conn,
        admins_repo=admins_repo,
        employees_repo=employees_repo,
        hasher=hasher,
        tokens=tokens,
        gate=AuthorizationGate(tokens, admins_repo, employees_repo),
        auth_service=AuthService(admins_repo, employees_repo, hasher, tokens),
        claim_service=AccountClaimService(employees_repo, hasher, tokens),
        admin_service=AdminService(admins_repo, hasher),
        employee_service=EmployeeService(employees_repo),
    )
