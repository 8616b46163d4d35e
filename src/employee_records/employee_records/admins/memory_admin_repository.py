from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..core.enums import AdminRole
from ..core.exceptions import Conflict
from .model import Admin
from .repository import AdminRepository


class InMemoryAdminRepository(AdminRepository):
    def __init__(self):
        self._lock = threading.RLock()
        self._rows: dict[int, Admin] = {}
        self._next_id = 1

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with self._lock:
            return self._rows.get(int(admin_id))

    def find_active_by_login(self, identifier: str) -> Optional[Admin]:
        email = identifier.lower()
        with self._lock:
            rows = list(self._rows.values())
        return next(
            (a for a in rows if a.is_active and (a.username == identifier or a.email == email)),
            None,
        )

    def create_admin(self, *, username: str, email: str, password_hash: str, role: AdminRole, now: datetime) -> Admin:
        with self._lock:
            if any(a.username == username or a.email == email for a in self._rows.values()):
                raise Conflict("Admin with this username or email already exists")
            admin = Admin(
                admin_id=self._next_id,
                username=username,
                email=email,
                password_hash=password_hash,
                role=role,
                created_at=now,
            )
            self._rows[admin.admin_id] = admin
            self._next_id += 1
            return admin

    def set_active(self, admin_id: int, *, is_active: bool) -> bool:
        with self._lock:
            current = self._rows.get(int(admin_id))
            if not current:
                return False
            self._rows[current.admin_id] = replace(current, is_active=is_active)
            return True

    def touch_last_login(self, admin_id: int, *, now: datetime) -> None:
        with self._lock:
            current = self._rows.get(int(admin_id))
            if current:
                self._rows[current.admin_id] = replace(current, last_login=now)
