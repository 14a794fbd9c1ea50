"""
Shared fixtures: a throwaway SQLite database and image directory.

The environment must be set before soil_server is imported because the
engine and settings are created at import time.
"""
import os
import shutil
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="soil-server-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["IMAGE_DIR"] = os.path.join(_TMP_DIR, "images")
os.environ["SCHEDULER_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from soil_server.database import SessionLocal, engine, settings
from soil_server.main import app
from soil_server.models import Base
from soil_server.state import TelemetryState


@pytest.fixture(autouse=True)
def _fresh_storage():
    """Recreate the schema and empty the image directory for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    shutil.rmtree(settings.image_dir, ignore_errors=True)
    os.makedirs(settings.image_dir, exist_ok=True)
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def image_dir() -> str:
    return settings.image_dir


@pytest.fixture()
def client():
    """TestClient with startup (schema + default phase) already run."""
    app.state.ready = False
    app.state.telemetry = TelemetryState(max_events=settings.event_log_max_entries)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_image(image_dir):
    """Write an image file into the image directory and return its path."""
    def _make(name: str, content: bytes = b"img") -> str:
        path = os.path.join(image_dir, name)
        with open(path, "wb") as f:
            f.write(content)
        return path
    return _make


@pytest.fixture()
def drop_table():
    """Drop one table so every statement against it fails in the store."""
    def _drop(name: str) -> None:
        with engine.begin() as conn:
            Base.metadata.tables[name].drop(bind=conn)
    return _drop


@pytest.fixture()
def failing_commit():
    """Make ``session.commit`` fail the way a full disk would."""
    def _install(monkeypatch, session) -> None:
        def _commit():
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))
        monkeypatch.setattr(session, "commit", _commit)
    return _install
