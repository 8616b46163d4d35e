from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..core.enums import AdminRole
from .model import Admin


class AdminRepository(Protocol):
    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def find_active_by_login(self, identifier: str) -> Optional[Admin]:
        """Active admin whose username or (lowercased) email equals ``identifier``."""
        raise NotImplementedError

    def create_admin(self, *, username: str, email: str, password_hash: str, role: AdminRole, now: datetime) -> Admin:
        raise NotImplementedError

    def touch_last_login(self, admin_id: int, *, now: datetime) -> None:
        raise NotImplementedError

    def set_active(self, admin_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
