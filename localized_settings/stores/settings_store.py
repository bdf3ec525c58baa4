"""Store for named settings persisted as raw or JSON text."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from localized_settings.core.error_codes import DatabaseErrorCode
from localized_settings.core.exceptions import DatabaseException
from localized_settings.core.logger import get_logger
from localized_settings.models import Setting
from localized_settings.stores.database import database_session

logger = get_logger(__name__)


class SettingsStore:
    """Row-level access to the ``settings`` table."""

    def find_by_key(self, key: str) -> Optional[Setting]:
        """Return the stored setting for ``key`` or None."""
        try:
            with database_session() as db:
                return db.query(Setting).filter(Setting.key == key).first()
        except SQLAlchemyError as exc:
            logger.error("Failed to load setting %s: %s", key, exc)
            raise DatabaseException.wrap(
                exc,
                f"Failed to load setting: {key}",
                DatabaseErrorCode.QUERY_FAILED,
                key=key,
            ) from exc

    def update_or_create(self, key: str, value: Optional[str]) -> Setting:
        """Insert the row for ``key`` or overwrite its value."""
        try:
            with database_session() as db:
                record = db.query(Setting).filter(Setting.key == key).first()
                if record is None:
                    record = Setting(key=key, value=value)
                    db.add(record)
                    created = True
                else:
                    record.value = value
                    created = False
                db.commit()
                db.refresh(record)
                logger.info(
                    "%s setting '%s'", "Created" if created else "Updated", key
                )
                return record
        except SQLAlchemyError as exc:
            logger.error("Failed to persist setting %s: %s", key, exc)
            raise DatabaseException.wrap(
                exc,
                f"Failed to persist setting: {key}",
                DatabaseErrorCode.QUERY_FAILED,
                key=key,
            ) from exc

    def delete(self, key: str) -> bool:
        """Delete the row for ``key``; False when it did not exist."""
        try:
            with database_session() as db:
                deleted = db.query(Setting).filter(Setting.key == key).delete()
                db.commit()
        except SQLAlchemyError as exc:
            logger.error("Failed to delete setting %s: %s", key, exc)
            raise DatabaseException.wrap(
                exc,
                f"Failed to delete setting: {key}",
                DatabaseErrorCode.QUERY_FAILED,
                key=key,
            ) from exc

        if deleted:
            logger.info("Deleted setting '%s'", key)
        return bool(deleted)

    def list_keys(self) -> List[str]:
        """Return all stored keys in alphabetical order."""
        try:
            with database_session() as db:
                rows = db.query(Setting.key).order_by(Setting.key).all()
        except SQLAlchemyError as exc:
            logger.error("Failed to list settings: %s", exc)
            raise DatabaseException.wrap(
                exc, "Failed to list settings", DatabaseErrorCode.QUERY_FAILED
            ) from exc
        return [row[0] for row in rows]


__all__ = ["SettingsStore"]
