"""Stateless bearer tokens.

Tokens are HS256 JWTs carrying ``sub`` (principal record id), ``role``, ``iat``
and ``exp``. Nothing is stored server-side, so a token stays valid until it
expires; there is no revocation list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from ..common.datetime_utils import now_utc
from ..core.constants import TOKEN_ALGORITHM, TOKEN_LIFETIME_DAYS
from ..core.enums import Role
from ..core.exceptions import Unauthenticated

CLAIM_SUB = "sub"
CLAIM_ROLE = "role"
CLAIM_IAT = "iat"
CLAIM_EXP = "exp"


@dataclass(frozen=True)
class TokenClaims:
    principal_id: int
    role: Role
    issued_at: datetime
    expires_at: datetime
    extra: dict[str, Any] = field(default_factory=dict)


class TokenService:
    def __init__(self, secret: str, *, lifetime: timedelta = timedelta(days=TOKEN_LIFETIME_DAYS)):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._lifetime = lifetime

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, principal_id: int, role: Role, *, extra: Optional[dict] = None, now: Optional[datetime] = None) -> str:
        now = now or now_utc()
        payload: dict[str, Any] = dict(extra or {})
        payload.update(
            {
                CLAIM_SUB: str(principal_id),
                CLAIM_ROLE: role.value,
                CLAIM_IAT: int(now.timestamp()),
                CLAIM_EXP: int((now + self._lifetime).timestamp()),
            }
        )
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """Check signature and expiry (no leeway) and return the claims."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                leeway=0,
                options={"require": [CLAIM_SUB, CLAIM_ROLE, CLAIM_EXP]},
            )
        except jwt.ExpiredSignatureError:
            raise Unauthenticated("Token expired")
        except jwt.InvalidTokenError:
            raise Unauthenticated("Invalid token")

        try:
            principal_id = int(payload[CLAIM_SUB])
            role = Role(payload[CLAIM_ROLE])
        except (TypeError, ValueError):
            raise Unauthenticated("Invalid token")

        extra = {k: v for k, v in payload.items() if k not in (CLAIM_SUB, CLAIM_ROLE, CLAIM_IAT, CLAIM_EXP)}
        return TokenClaims(
            principal_id=principal_id,
            role=role,
            issued_at=datetime.fromtimestamp(int(payload.get(CLAIM_IAT, 0)), tz=timezone.utc),
            expires_at=datetime.fromtimestamp(int(payload[CLAIM_EXP]), tz=timezone.utc),
            extra=extra,
        )
