# File: app/services/route_guard.py

"""
Route guard.

Every protected request walks the same ordered steps:

    UNCHECKED -> AUTHENTICATED | REJECTED
    AUTHENTICATED -> AUTHORIZED | FORBIDDEN   (admin routes)
    AUTHENTICATED -> AUTHORIZED               (everything else)

The admin check only ever runs on an AUTHENTICATED decision, so an
unauthenticated caller can never be told anything about roles.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

import jwt

from app.core.security import decode_access_token
from app.models.user import ROLE_ADMIN

logger = logging.getLogger(__name__)


class GuardState(str, enum.Enum):
    UNCHECKED = "unchecked"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"
    AUTHORIZED = "authorized"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Identity:
    user_id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @classmethod
    def from_claims(cls, payload: dict[str, Any]) -> "Identity":
        return cls(
            user_id=int(payload["sub"]),
            email=str(payload.get("email") or ""),
            role=str(payload.get("role") or ""),
        )


@dataclass(frozen=True)
class GuardDecision:
    state: GuardState = GuardState.UNCHECKED
    identity: Optional[Identity] = None
    reason: str = ""

    @property
    def allowed(self) -> bool:
        return self.state is GuardState.AUTHORIZED


class RouteGuard:
    def __init__(self, *, secret: str, algorithm: str = "HS256", require_admin: bool = False):
        self.secret = secret
        self.algorithm = algorithm
        self.require_admin = require_admin

    def authenticate(self, decision: GuardDecision, token: Optional[str]) -> GuardDecision:
        """UNCHECKED -> AUTHENTICATED | REJECTED."""
        if decision.state is not GuardState.UNCHECKED:
            raise ValueError(f"cannot authenticate a {decision.state.value} request")

        if not token:
            return GuardDecision(GuardState.REJECTED, reason="missing_token")

        try:
            payload = decode_access_token(token, secret=self.secret, algorithm=self.algorithm)
        except jwt.ExpiredSignatureError:
            return GuardDecision(GuardState.REJECTED, reason="token_expired")
        except jwt.InvalidTokenError:
            return GuardDecision(GuardState.REJECTED, reason="token_invalid")

        try:
            identity = Identity.from_claims(payload)
        except (KeyError, TypeError, ValueError):
            return GuardDecision(GuardState.REJECTED, reason="token_bad_subject")

        return GuardDecision(GuardState.AUTHENTICATED, identity=identity)

    def authorize(self, decision: GuardDecision) -> GuardDecision:
        """AUTHENTICATED -> AUTHORIZED | FORBIDDEN."""
        if decision.state is not GuardState.AUTHENTICATED:
            raise ValueError(f"cannot authorize a {decision.state.value} request")

        if self.require_admin and not decision.identity.is_admin:
            return GuardDecision(GuardState.FORBIDDEN, identity=decision.identity, reason="admin_required")
        return GuardDecision(GuardState.AUTHORIZED, identity=decision.identity)

    def evaluate(self, token: Optional[str]) -> GuardDecision:
        decision = self.authenticate(GuardDecision(), token)
        if decision.state is GuardState.REJECTED:
            logger.info("Request rejected: %s", decision.reason)
            return decision

        decision = self.authorize(decision)
        if decision.state is GuardState.FORBIDDEN:
            logger.info("User id=%s forbidden: %s", decision.identity.user_id, decision.reason)
        return decision
