from pathlib import Path

import pytest
from fastapi.testclient import TestClient


def _configure_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_file.as_posix()}")
    monkeypatch.setenv("AUTO_SEED_DEFAULTS", "true")
    monkeypatch.setenv("JWT_SECRET", "test-secret-key-for-classroom-rewards-suite")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    from app import models  # noqa: F401
    from app.core.config import clear_settings_cache
    from app.db.base import Base
    from app.db.session import get_engine, reset_engine

    clear_settings_cache()
    reset_engine()
    Base.metadata.create_all(bind=get_engine())


def _teardown_database() -> None:
    from app.db.base import Base
    from app.db.session import get_engine, reset_engine

    Base.metadata.drop_all(bind=get_engine())
    reset_engine()


@pytest.fixture()
def app_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _configure_database(tmp_path, monkeypatch)

    from app.main import create_app

    app = create_app()
    with TestClient(app) as client:
        yield client

    _teardown_database()


@pytest.fixture()
def db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _configure_database(tmp_path, monkeypatch)

    from app.db.session import get_session_factory
    from app.services.defaults import seed_defaults

    with get_session_factory()() as session:
        seed_defaults(session)
        yield session

    _teardown_database()


def register(client: TestClient, name: str = "Ms. A", email: str = "ms.a@school.test", password: str = "secret123") -> dict:
    response = client.post("/teachers", json={"name": name, "email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(client: TestClient, email: str = "ms.a@school.test", name: str = "Ms. A") -> dict[str, str]:
    token = register(client, name=name, email=email)["token"]
    return {"Authorization": f"Bearer {token}"}
