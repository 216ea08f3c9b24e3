# fitplanner/models/store.py
import logging
from datetime import datetime, timezone
from typing import Optional

from .. import db

logger = logging.getLogger(__name__)

# keys shared with the browser front-end
SESSION_PROFILE_KEY = "userProfile"
DIRECTORY_KEY = "allFitnessUsers"


def _utcnow():
    return datetime.now(timezone.utc)


class StoredValue(db.Model):
    __tablename__ = "kv_store"

    key = db.Column(db.String(255), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)


class KeyValueStore:
    """
    Synchronous key -> string store.

    Each call commits on its own; there are no multi-key transactions.
    Must be used inside an application context.
    """

    def get(self, key: str) -> Optional[str]:
        row = db.session.get(StoredValue, key)
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        row = db.session.get(StoredValue, key)
        if row is None:
            db.session.add(StoredValue(key=key, value=value))
        else:
            row.value = value
        self._commit(f"set {key}")

    def remove(self, key: str) -> None:
        row = db.session.get(StoredValue, key)
        if row is None:
            return
        db.session.delete(row)
        self._commit(f"remove {key}")

    def _commit(self, action: str) -> None:
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.exception("[store] %s failed", action)
            raise
