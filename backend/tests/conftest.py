import os
import shutil
import tempfile
from typing import Generator

import pytest

# Point the application at a throwaway data directory before it is imported
os.environ["DATA_DIR"] = tempfile.mkdtemp(prefix="storefront-settings-")
os.environ.pop("DATABASE_URL", None)
os.environ.pop("FILES_UPLOAD_PATH", None)
os.environ.pop("FILES_UPLOAD_URL", None)

from fastapi.testclient import TestClient  # noqa: E402

from config import UPLOADS_DIR  # noqa: E402
from database import Base, engine  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database() -> Generator[None, None, None]:
    """Start every test from an empty settings table."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def upload_dir() -> Generator:
    """The configured upload directory, emptied after the test."""
    UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
    yield UPLOADS_DIR
    shutil.rmtree(UPLOADS_DIR, ignore_errors=True)
    UPLOADS_DIR.mkdir(parents=True, exist_ok=True)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
