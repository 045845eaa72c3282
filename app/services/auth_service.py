# File: app/services/auth_service.py

"""
Authentication service.

  - Credential check against the UserStore (bcrypt compare)
  - Registration of ordinary "user" accounts
  - Access token issuance
"""

import logging
from datetime import timedelta
from functools import lru_cache

from app.core.config import Settings
from app.core.errors import InvalidCredentials
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import ROLE_USER, User
from app.schemas.user import UserCreate, UserRead
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_hash(rounds: int) -> str:
    # Compared against when the email is unknown, so a miss costs as much as a wrong password.
    return hash_password("not-a-real-password", rounds=rounds)


class AuthService:
    def __init__(self, store: UserStore, settings: Settings):
        self.store = store
        self.settings = settings

    def login(self, email: str, password: str) -> User:
        """
        Return the user whose credentials match.

        Unknown email and wrong password both raise the same
        InvalidCredentials, so callers cannot enumerate accounts.
        """
        user = self.store.find_user_by_email(email)
        if user is None:
            verify_password(password, _dummy_hash(self.settings.bcrypt_rounds))
            logger.warning("Failed login attempt")
            raise InvalidCredentials()

        if not verify_password(password, user.password):
            logger.warning("Failed login attempt")
            raise InvalidCredentials()

        logger.info("User id=%s logged in", user.id)
        return user

    def register(self, payload: UserCreate) -> tuple[UserRead, str]:
        # Self-service signups are always plain users; admins come from create_user.py.
        user = self.store.create_user(
            payload.email,
            payload.password,
            name=payload.name,
            role=ROLE_USER,
        )
        return user, self.issue_token(user)

    def issue_token(self, user: User | UserRead) -> str:
        return create_access_token(
            secret=self.settings.secret_key,
            subject=user.id,
            claims={"email": user.email, "role": user.role},
            expires_delta=timedelta(minutes=self.settings.access_token_expire_minutes),
            algorithm=self.settings.algorithm,
        )
