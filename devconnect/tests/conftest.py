import itertools

import pytest
from fastapi.testclient import TestClient

from devconnect.config import Settings
from devconnect.main import create_app

PASSWORD = "secret123"


@pytest.fixture
def settings():
    # in-memory SQLite + cheap bcrypt keeps the suite fast
    return Settings(env="test", database_url="sqlite://", jwt_secret="test-secret", bcrypt_rounds=4)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.db.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(client):
    """Register + log in a user; returns (user_json, auth_headers)."""
    counter = itertools.count(1)

    def _make(name=None, email=None, password=PASSWORD):
        n = next(counter)
        name = name or f"Dev {n}"
        email = email or f"dev{n}@example.com"
        r = client.post(
            "/api/users/register",
            json={"name": name, "email": email, "password": password, "password2": password},
        )
        assert r.status_code == 200, r.text
        t = client.post("/api/users/login", json={"email": email, "password": password})
        assert t.status_code == 200, t.text
        return r.json(), {"Authorization": t.json()["token"]}

    return _make


@pytest.fixture
def profile_payload():
    return {
        "handle": "janedev",
        "status": "Developer",
        "skills": "python, fastapi ,sql",
        "company": "Acme",
        "website": "https://jane.dev",
        "twitter": "https://twitter.com/jane",
    }
