"""Settings controller — API routes for store settings and the store logo."""

from typing import Any

from fastapi import APIRouter, Body, Request, status

from api.settings.dto.settings import LogoUploadResponse, SettingsResponse
from api.settings.services import logo_service, settings_service

router = APIRouter(prefix="/api/v1/settings", tags=["Settings"])


@router.get("", response_model=SettingsResponse)
async def get_settings():
    return settings_service.get_all()


@router.put("", response_model=SettingsResponse)
async def update_settings(data: dict[str, Any] = Body(...)):
    return settings_service.update(data)


@router.post("/logo", response_model=LogoUploadResponse)
async def upload_logo(request: Request):
    """Upload the store logo as multipart/form-data."""
    return await logo_service.upload_logo(request)


@router.delete("/logo", status_code=status.HTTP_204_NO_CONTENT)
async def delete_logo():
    logo_service.delete_logo()
