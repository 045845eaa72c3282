# File: app/services/user_store.py

"""
Credential store.

Durable storage and lookup of User rows. The store is handed its Session
explicitly, so each request (or script, or test) decides which database it
talks to. Every call goes straight to the database; nothing is cached.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateEmailError, StoreError
from app.core.security import DEFAULT_BCRYPT_ROUNDS, hash_password
from app.models.user import ROLE_USER, ROLES, User
from app.schemas.user import UserRead

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class UserStore:
    def __init__(self, db: Session, *, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    def create_user(
        self,
        email: str,
        password: str,
        *,
        name: Optional[str] = None,
        role: str = ROLE_USER,
    ) -> UserRead:
        """
        Hash the password and insert a new user.

        Returns the public view of the row (no hash). The unique index on
        `email` is the source of truth for duplicates, so two concurrent
        signups for the same address cannot both succeed.
        """
        normalized = normalize_email(email)
        if not normalized:
            raise ValueError("email must not be blank")
        if role not in ROLES:
            raise ValueError(f"unknown role: {role!r}")

        user = User(
            email=normalized,
            password=hash_password(password, rounds=self.bcrypt_rounds),
            name=name,
            role=role,
        )
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Signup rejected, email already registered")
            raise DuplicateEmailError() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to insert user")
            raise StoreError() from exc

        logger.info("Created user id=%s role=%s", user.id, user.role)
        return UserRead.model_validate(user)

    def find_user_by_email(self, email: str) -> Optional[User]:
        """
        Exact-match lookup on the normalized email.

        Returns the full row (hash included) or None when nothing matches.
        """
        normalized = normalize_email(email)
        if not normalized:
            return None
        return self._first(select(User).where(User.email == normalized))

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self._first(select(User).where(User.id == int(user_id)))

    def _first(self, stmt) -> Optional[User]:
        try:
            return self.db.execute(stmt).scalars().first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("User lookup failed")
            raise StoreError() from exc
