# File: tests/test_create_user.py

import pytest

import create_user
from app.core.config import Settings
from app.db.session import create_db_engine, create_session_factory
from app.services.user_store import UserStore


@pytest.fixture()
def file_settings(tmp_path, monkeypatch):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'users.db'}", bcrypt_rounds=4)
    monkeypatch.setattr(create_user, "get_settings", lambda: settings)
    return settings


def _lookup(settings, email):
    engine = create_db_engine(settings.database_url)
    db = create_session_factory(engine)()
    try:
        return UserStore(db).find_user_by_email(email)
    finally:
        db.close()
        engine.dispose()


def test_creates_admin(file_settings, capsys):
    assert create_user.main(["root@example.com", "s3cret", "--role", "admin"]) == 0

    assert "Created user: root@example.com" in capsys.readouterr().out
    assert _lookup(file_settings, "root@example.com").role == "admin"


def test_reports_duplicate(file_settings, capsys):
    create_user.main(["dup@example.com", "pw"])

    assert create_user.main(["dup@example.com", "pw"]) == 1
    assert "already exists" in capsys.readouterr().out


def test_rejects_invalid_email(file_settings, capsys):
    assert create_user.main(["nope", "pw"]) == 2
    assert "Invalid input" in capsys.readouterr().out
