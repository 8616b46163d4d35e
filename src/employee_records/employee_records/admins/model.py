from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..core.enums import AdminRole


@dataclass(frozen=True)
class Admin:
    """Domain entity: Administrator. Created out-of-band, never self-registered."""

    admin_id: int
    username: str
    email: str
    password_hash: str
    role: AdminRole
    is_active: bool = True
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def to_public(self) -> dict:
        return {
            "id": self.admin_id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "lastLogin": isoformat(self.last_login),
        }
