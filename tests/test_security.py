# File: tests/test_security.py

from datetime import timedelta

import jwt
import pytest

from app.core.config import Settings
from app.core.security import create_access_token, decode_access_token, hash_password, verify_password


def test_hash_is_salted():
    first = hash_password("same", rounds=4)
    second = hash_password("same", rounds=4)

    assert first != second
    assert verify_password("same", first)
    assert verify_password("same", second)


def test_hash_uses_requested_cost():
    assert hash_password("pw", rounds=5).startswith("$2b$05$")


def test_verify_handles_junk():
    assert not verify_password("pw", "")
    assert not verify_password("", hash_password("pw", rounds=4))
    assert not verify_password("pw", "not-a-bcrypt-hash")


def test_decode_requires_subject():
    token = jwt.encode({"exp": 9999999999}, "k", algorithm="HS256")
    with pytest.raises(jwt.MissingRequiredClaimError):
        decode_access_token(token, secret="k")


def test_token_round_trip_keeps_claims():
    token = create_access_token(secret="k", subject=3, claims={"role": "admin"}, expires_delta=timedelta(minutes=1))

    claims = decode_access_token(token, secret="k")

    assert claims["sub"] == "3"
    assert claims["role"] == "admin"


def test_blank_secret_refused():
    with pytest.raises(ValueError):
        create_access_token(secret="", subject=1, expires_delta=timedelta(minutes=1))


def test_settings_parse_cors_and_rounds():
    settings = Settings(backend_cors_origins="http://a.test, http://b.test,", bcrypt_rounds=12)
    assert settings.backend_cors_origins == ["http://a.test", "http://b.test"]

    with pytest.raises(ValueError):
        Settings(bcrypt_rounds=3)
