from __future__ import annotations

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher:
    """One-way salted hashing (werkzeug's scrypt by default)."""

    def __init__(self, method: Optional[str] = None):
        self._method = method

    def hash(self, password: str) -> str:
        if self._method:
            return generate_password_hash(password, method=self._method)
        return generate_password_hash(password)

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        if not password_hash:
            return False
        try:
            return check_password_hash(password_hash, password)
        except (ValueError, TypeError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            return False
