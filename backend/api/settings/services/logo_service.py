"""Logo service — stores the store logo on disk and keeps `logo_file` in sync."""

import logging
import re
from pathlib import Path

from fastapi import Request
from starlette.datastructures import UploadFile
from starlette.formparsers import MultiPartException, MultiPartParser

from config import UPLOADS_DIR
from errors import UploadError
from api.settings.dto.settings import LogoUploadResponse
from api.settings.services import settings_service

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB

FILELESS_CONTENT_TYPES = ("application/x-www-form-urlencoded", "application/json")

_UNSAFE_CHARS = re.compile(r"[\s*/:;&?@$()<>#%{}|\\^~\[\]]")


def correct_file_name(filename: str | None) -> str:
    """Drop any directory part and replace characters unsafe in paths or URLs."""
    if not filename:
        return ""
    name = re.split(r"[/\\]", filename)[-1]
    if name in (".", ".."):
        return ""
    return _UNSAFE_CHARS.sub("-", name)


async def _save_part(upload: UploadFile, destination: Path) -> int:
    size = 0
    with open(destination, "wb") as f:
        while chunk := await upload.read(CHUNK_SIZE):
            size += len(chunk)
            f.write(chunk)
    return size


async def upload_logo(request: Request) -> LogoUploadResponse:
    """Write the uploaded file(s) to the upload directory and point the settings at the last one."""
    UPLOADS_DIR.mkdir(parents=True, exist_ok=True)

    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()
    if media_type in FILELESS_CONTENT_TYPES:
        # Parseable, but can never carry a file part
        raise UploadError("Required fields are missing")
    if media_type != "multipart/form-data":
        raise UploadError(
            f"bad content-type header, unknown content-type: {content_type or 'none'}",
            status_code=500,
        )

    try:
        form = await MultiPartParser(request.headers, request.stream()).parse()
    except MultiPartException as e:
        raise UploadError(e.message, status_code=500)

    file_name = None
    file_size = 0
    try:
        for _, value in form.multi_items():
            if not isinstance(value, UploadFile):
                continue
            name = correct_file_name(value.filename)
            if not name:
                continue
            file_size = await _save_part(value, UPLOADS_DIR / name)
            file_name = name
    finally:
        await form.close()

    if not file_name:
        raise UploadError("Required fields are missing")

    settings_service.update({"logo_file": file_name})
    logger.info("Uploaded store logo %s (%d bytes)", file_name, file_size)
    return LogoUploadResponse(file=file_name, size=file_size)


def delete_logo() -> None:
    """Remove the logo file, if any, and clear the reference to it."""
    settings = settings_service.get_all()
    if not settings.logo_file:
        return

    upload_root = UPLOADS_DIR.resolve()
    file_path = (upload_root / settings.logo_file).resolve()
    if file_path.parent != upload_root:
        logger.warning("Refusing to delete logo outside the upload directory: %s", file_path)
    else:
        try:
            file_path.unlink()
        except OSError as e:
            logger.warning("Failed to delete logo at %s: %s", file_path, e)

    settings_service.update({"logo_file": None})
    logger.info("Deleted store logo %s", settings.logo_file)
