# File: tests/conftest.py

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.security import create_access_token
from app.main import create_application
from app.services.user_store import UserStore

TEST_SECRET = "test-secret"


@pytest.fixture()
def settings():
    return Settings(
        database_url="sqlite://",
        secret_key=TEST_SECRET,
        bcrypt_rounds=4,  # lowest cost bcrypt allows, keeps the suite fast
        create_tables=True,
    )


@pytest.fixture()
def app(settings):
    app = create_application(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(db, settings):
    return UserStore(db, bcrypt_rounds=settings.bcrypt_rounds)


@pytest.fixture()
def make_token():
    def _make(user_id=1, email="someone@example.com", role="user", minutes=5, secret=TEST_SECRET):
        return create_access_token(
            secret=secret,
            subject=user_id,
            claims={"email": email, "role": role},
            expires_delta=timedelta(minutes=minutes),
        )

    return _make
