import pytest

from db import get_engine, get_session
from main import create_app


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Application bound to a throwaway SQLite database."""
    monkeypatch.setenv("SHIPDB_DB_URL", f"sqlite:///{tmp_path / 'shipdb.sqlite'}")
    app = create_app()
    app.config["TESTING"] = True
    yield app
    get_engine().dispose()


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture
def session(app):
    s = get_session()
    yield s
    s.close()
