"""Store settings ORM model."""

from sqlalchemy import JSON, Column, DateTime, Integer, func

from database import Base

# The settings document is a singleton stored under a fixed row id.
SETTINGS_ID = 1


class StoreSettingsModel(Base):
    __tablename__ = "store_settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ID)
    document = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
