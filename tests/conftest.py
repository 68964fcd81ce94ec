import pytest
from fastapi.testclient import TestClient

from person_directory.app.core.config import Settings
from person_directory.app.main import create_app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def app(db_path):
    return create_app(Settings(database_url=str(db_path)))


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
