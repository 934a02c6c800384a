from pathlib import Path

import pytest
from fastapi.testclient import TestClient

BOOTSTRAP_EMAIL = "professor@example.com"
BOOTSTRAP_PASSWORD = "professor123"


def _configure_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, store_backend: str) -> str:
    database_url = f"sqlite+pysqlite:///{(tmp_path / 'test.db').as_posix()}"
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("STORE_BACKEND", store_backend)
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "true")
    monkeypatch.setenv("AUTO_CREATE_TEACHER", "true")
    monkeypatch.setenv("BOOTSTRAP_TEACHER_EMAIL", BOOTSTRAP_EMAIL)
    monkeypatch.setenv("BOOTSTRAP_TEACHER_PASSWORD", BOOTSTRAP_PASSWORD)
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    return database_url


@pytest.fixture(params=["sql", "memory"])
def app_client(request: pytest.FixtureRequest, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _configure_env(monkeypatch, tmp_path, request.param)

    from classboard.core.config import clear_settings_cache
    from classboard.main import create_app

    clear_settings_cache()
    app = create_app()
    with TestClient(app) as client:
        yield client

    clear_settings_cache()


@pytest.fixture()
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _configure_env(monkeypatch, tmp_path, "sql")

    from classboard.core.config import clear_settings_cache, get_settings
    from classboard.db.session import Database

    clear_settings_cache()
    db = Database(get_settings())
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()
    clear_settings_cache()


@pytest.fixture(params=["memory", "sql"])
def store(request: pytest.FixtureRequest):
    from classboard.store.memory import MemoryRecordStore
    from classboard.store.sql import SqlRecordStore

    if request.param == "memory":
        record_store = MemoryRecordStore()
    else:
        record_store = SqlRecordStore(request.getfixturevalue("database"))
    yield record_store
    record_store.close()


def auth_headers(client: TestClient, email: str = BOOTSTRAP_EMAIL, password: str = BOOTSTRAP_PASSWORD) -> dict[str, str]:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
