import contextlib
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from ideaboard.config import Settings
from ideaboard.main import create_app

PASSWORD = "s3cret-pass"


@pytest.fixture
def make_settings(tmp_path):
    def _make_settings(**overrides):
        values = {
            "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'ideaboard.db'}",
            "JWT_SECRET": "test-secret",
            "PASSWORD_HASH_ROUNDS": 4,
            "CREATE_SCHEMA_ON_STARTUP": True,
            "LOG_LEVEL": "WARNING",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make_settings


@pytest.fixture
def make_client(make_settings):
    with contextlib.ExitStack() as stack:

        def _make_client(**overrides):
            app = create_app(make_settings(**overrides))
            return stack.enter_context(TestClient(app))

        yield _make_client


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def make_user(client):
    """Register and log in a user, returning its id, name and auth headers."""

    def _make_user(username, password=PASSWORD):
        email = f"{username}@example.com"
        resp = client.post(
            "/api/register",
            json={"username": username, "email": email, "password": password, "name": username.title()},
        )
        assert resp.status_code == 201, resp.text
        resp = client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        headers = {"Authorization": f"Bearer {resp.json()['token']}"}
        me = client.get("/api/me", headers=headers).json()
        return SimpleNamespace(
            id=me["id"], username=username, email=email, password=password, headers=headers
        )

    return _make_user


@pytest.fixture
def make_idea(client):
    def _make_idea(user, **fields):
        body = {"title": "Foo"}
        body.update(fields)
        resp = client.post("/api/ideas", json=body, headers=user.headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _make_idea
