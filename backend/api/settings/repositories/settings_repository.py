"""Settings repository — data access layer for the singleton settings document."""

import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from database import SessionLocal
from api.settings.orm.settings_model import SETTINGS_ID, StoreSettingsModel

logger = logging.getLogger(__name__)


def _get_session():
    return SessionLocal()


def find_one() -> dict[str, Any] | None:
    with _get_session() as session:
        model = session.get(StoreSettingsModel, SETTINGS_ID)
        return dict(model.document or {}) if model else None


def count() -> int:
    with _get_session() as session:
        return session.query(func.count(StoreSettingsModel.id)).scalar() or 0


def insert_one(document: dict[str, Any]) -> None:
    """Create the settings document. A concurrent insert that won the race is kept."""
    with _get_session() as session:
        session.add(StoreSettingsModel(id=SETTINGS_ID, document=dict(document)))
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.debug("Settings document already exists, skipping insert")


def upsert(patch: dict[str, Any]) -> None:
    """Set the patch fields on the document, creating it if missing."""
    with _get_session() as session:
        if _merge(session, patch):
            session.commit()
            return
        session.add(StoreSettingsModel(id=SETTINGS_ID, document=dict(patch)))
        try:
            session.commit()
        except IntegrityError:
            # Created by another writer in the meantime
            session.rollback()
            _merge(session, patch)
            session.commit()


def _merge(session, patch: dict[str, Any]) -> bool:
    model = session.get(StoreSettingsModel, SETTINGS_ID, with_for_update=True)
    if model is None:
        return False
    # Assign a new dict so the JSON column is flagged as changed
    model.document = {**(model.document or {}), **patch}
    return True
