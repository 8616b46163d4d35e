from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import AdminRole
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, from_db_datetime, to_db_datetime
from .model import Admin
from .repository import AdminRepository


def _row_to_admin(row: dict) -> Admin:
    return Admin(
        admin_id=int(row["admin_id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=AdminRole(row["role"]),
        is_active=bool(row.get("is_active", True)),
        last_login=from_db_datetime(row.get("last_login")),
        created_at=from_db_datetime(row.get("created_at")),
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, username, email, password_hash, role, is_active, last_login, created_at
                FROM admins
                WHERE admin_id=%s
                """,
                (admin_id,),
            )
            row = fetchone(cur)
            return _row_to_admin(row) if row else None

    def find_active_by_login(self, identifier: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, username, email, password_hash, role, is_active, last_login, created_at
                FROM admins
                WHERE (username=%s OR email=%s) AND is_active=1
                LIMIT 1
                """,
                (identifier, identifier.lower()),
            )
            row = fetchone(cur)
            return _row_to_admin(row) if row else None

    def create_admin(self, *, username: str, email: str, password_hash: str, role: AdminRole, now: datetime) -> Admin:
        with db_cursor(self._conn_factory, conflict_message="Admin with this username or email already exists") as (_, cur):
            cur.execute(
                """
                INSERT INTO admins(username, email, password_hash, role, is_active, created_at)
                VALUES(%s,%s,%s,%s,1,%s)
                """,
                (username, email, password_hash, role.value, to_db_datetime(now)),
            )
            admin_id = int(cur.lastrowid)
        created = self.get_by_id(admin_id)
        if created is None:
            raise StoreError()
        return created

    def touch_last_login(self, admin_id: int, *, now: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE admins SET last_login=%s WHERE admin_id=%s", (to_db_datetime(now), admin_id))

    def set_active(self, admin_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE admins SET is_active=%s WHERE admin_id=%s", (1 if is_active else 0, admin_id))
            return cur.rowcount > 0
