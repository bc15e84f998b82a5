# tests/conftest.py
"""
Shared fixtures: an app bound to a throwaway SQLite file per test, a
preloaded film, and clients already logged in as alice and bob.
"""
import pytest

from filmreview import create_app
from filmreview.models import Film, db


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DATABASE_PATH": str(tmp_path / "test.db"),
        # cheap hashes keep the suite fast
        "PASSWORD_HASH_METHOD": "pbkdf2:sha256:1000",
    })
    yield app
    with app.app_context():
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def film_id(app):
    with app.app_context():
        film = Film(title="A", director="D", year=2001, description="x")
        db.session.add(film)
        db.session.commit()
        return film.id


def register(client, username, password):
    return client.post("/register", json={"username": username, "password": password})


def login(client, username, password):
    return client.post("/login", json={"username": username, "password": password})


def logged_in_client(app, username, password="pw"):
    client = app.test_client()
    assert register(client, username, password).status_code == 201
    assert login(client, username, password).status_code == 200
    return client


@pytest.fixture()
def alice(app):
    return logged_in_client(app, "alice")


@pytest.fixture()
def bob(app):
    return logged_in_client(app, "bob")
