from types import SimpleNamespace
from urllib.parse import urlsplit

import pytest

import models
from app import app as flask_app


@pytest.fixture
def db(tmp_path):
    """Fresh seeded SQLite database per test."""
    models.bind_engine(f"sqlite:///{tmp_path / 'lab.db'}")
    models.init_db()
    models.seed_users()
    yield models.engine
    models.engine.dispose()


@pytest.fixture
def client(db):
    flask_app.config.update(TESTING=True)
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def lab_http(mocker, client):
    """Route requests.get/post from the scanner into the Flask test client."""

    def _wrap(response):
        return SimpleNamespace(text=response.get_data(as_text=True), status_code=response.status_code)

    def fake_get(url, params=None, timeout=None):
        parts = urlsplit(url)
        return _wrap(client.get(parts.path or "/", query_string=params or parts.query))

    def fake_post(url, data=None, timeout=None):
        return _wrap(client.post(urlsplit(url).path or "/", data=data))

    mocker.patch("requests.get", side_effect=fake_get)
    mocker.patch("requests.post", side_effect=fake_post)
    return client
