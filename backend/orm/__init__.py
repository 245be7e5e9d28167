"""Central ORM module — imports all models for Alembic metadata discovery."""

from api.settings.orm import StoreSettingsModel

__all__ = [
    "StoreSettingsModel",
]
