"""Application configuration."""

import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("DATA_DIR", str(Path(__file__).parent.parent / "data")))
DATA_DIR.mkdir(parents=True, exist_ok=True)

DATABASE_URL = os.environ.get("DATABASE_URL", f"sqlite:///{DATA_DIR}/settings.db")

# Uploaded assets (store logo)
UPLOADS_DIR = Path(os.environ.get("FILES_UPLOAD_PATH", str(DATA_DIR / "content")))
UPLOADS_DIR.mkdir(parents=True, exist_ok=True)

FILES_UPLOAD_URL = "/" + os.environ.get("FILES_UPLOAD_URL", "/content").strip("/")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
