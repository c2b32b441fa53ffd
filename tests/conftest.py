import os
import tempfile

# Keep the module-level app away from the working directory and Redis
_scratch = tempfile.mkdtemp(prefix="songbook-tests-")
os.environ.setdefault("UPLOAD_DIR", os.path.join(_scratch, "uploads"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_scratch, 'import.db')}")
os.environ["REDIS_URL"] = ""

import pytest
from fastapi.testclient import TestClient

from songbook.config import Settings
from songbook.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'catalog.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        REDIS_URL="",
        MAX_FILE_SIZE=1024,
        MAX_FILES_PER_UPLOAD=3,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def upload_dir(settings):
    return settings.UPLOAD_DIR


def audio(filename, content=b"ID3 fake audio", content_type="audio/mpeg"):
    return ("file", (filename, content, content_type))


@pytest.fixture
def upload(client):
    def _upload(*filenames):
        return client.post("/upload", files=[audio(name) for name in filenames])
    return _upload
