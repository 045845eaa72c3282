# File: app/db/session.py

"""
Engine and session factory construction.

Nothing here is a module-level global: create_application() builds the
engine from Settings and keeps it on app.state, so tests and scripts can
each bring their own database.
"""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def create_db_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        # In-memory SQLite lives and dies with one connection, share it.
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    return create_engine(database_url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ----------------------------------------------------
# DB Session Dependency
# ----------------------------------------------------
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a request-scoped SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
