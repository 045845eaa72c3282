"""
Create a user (admins included) straight in the database.

Run this from the backend root:

    (.venv) python create_user.py admin@example.com s3cret --role admin

Self-service registration over the API only ever creates plain users,
so this is how the first admin account gets made.
"""

import argparse
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.errors import DuplicateEmailError, StoreError
from app.db.init_db import init_db
from app.db.session import create_db_engine, create_session_factory
from app.models.user import ROLE_USER, ROLES
from app.schemas.user import UserCreate
from app.services.user_store import UserStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a new user.")
    parser.add_argument("email", help="Email address (login)")
    parser.add_argument("password", help="Plaintext password, hashed before storing")
    parser.add_argument("--role", choices=ROLES, default=ROLE_USER, help="User role")
    parser.add_argument("--name", default=None, help="Display name")
    args = parser.parse_args(argv)

    try:
        payload = UserCreate(email=args.email, password=args.password, name=args.name)
    except ValidationError as exc:
        print(f"[ERROR] Invalid input: {exc.errors()[0]['msg']}")
        return 2

    settings = get_settings()
    engine = create_db_engine(settings.database_url)
    init_db(engine)

    db = create_session_factory(engine)()
    try:
        store = UserStore(db, bcrypt_rounds=settings.bcrypt_rounds)
        user = store.create_user(payload.email, payload.password, name=payload.name, role=args.role)
    except DuplicateEmailError:
        print(f"[WARN] User '{payload.email}' already exists.")
        return 1
    except (StoreError, ValueError) as exc:
        print(f"[ERROR] Could not create user: {exc}")
        return 1
    finally:
        db.close()
        engine.dispose()

    print(f"[INFO] Created user: {user.email} (id={user.id}, role={user.role})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
