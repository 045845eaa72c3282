# File: tests/test_auth_service.py

import jwt
import pytest

from app.core.errors import DuplicateEmailError, InvalidCredentials
from app.core.security import decode_access_token
from app.schemas.user import UserCreate
from app.services.auth_service import AuthService


@pytest.fixture()
def auth(store, settings):
    return AuthService(store, settings)


def test_login_with_correct_password(auth, store):
    created = store.create_user("alice@example.com", "wonderland")

    user = auth.login("alice@example.com", "wonderland")

    assert user.id == created.id


def test_wrong_password_and_unknown_email_fail_identically(auth, store):
    store.create_user("alice@example.com", "wonderland")

    with pytest.raises(InvalidCredentials) as wrong_password:
        auth.login("alice@example.com", "looking-glass")
    with pytest.raises(InvalidCredentials) as unknown_email:
        auth.login("nobody@example.com", "wonderland")

    assert type(wrong_password.value) is type(unknown_email.value)
    assert wrong_password.value.message == unknown_email.value.message
    assert wrong_password.value.status_code == unknown_email.value.status_code


def test_issued_token_carries_identity(auth, store, settings):
    store.create_user("root@example.com", "pw", role="admin")
    user = auth.login("root@example.com", "pw")

    claims = decode_access_token(auth.issue_token(user), secret=settings.secret_key)

    assert claims["sub"] == str(user.id)
    assert claims["email"] == "root@example.com"
    assert claims["role"] == "admin"
    assert claims["exp"] - claims["iat"] == settings.access_token_expire_minutes * 60


def test_issued_token_is_signed_with_the_configured_secret(auth, store):
    created = store.create_user("alice@example.com", "pw")

    with pytest.raises(jwt.InvalidSignatureError):
        decode_access_token(auth.issue_token(created), secret="some-other-secret")


def test_register_always_creates_plain_users(auth):
    user, token = auth.register(UserCreate(email="new@example.com", password="pw", name="New"))

    assert user.role == "user"
    assert user.name == "New"
    assert token


def test_register_twice_fails(auth):
    auth.register(UserCreate(email="new@example.com", password="pw"))

    with pytest.raises(DuplicateEmailError):
        auth.register(UserCreate(email="new@example.com", password="other"))
