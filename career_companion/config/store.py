"""
Persistent document store for the Career Companion job tracker.

This module keeps the top-level app documents (applications, resume, career
preferences, dashboard filters, onboarding flag) as whole JSON blobs in a
SQLite key-value table. Every write replaces one document atomically.
"""

import copy
import json
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..tracker.models import Application, DashboardFilters, MOCK_APPLICATIONS, MOCK_RESUME
from ..utils import get_logger

logger = get_logger("store")


class StoreKey(Enum):
    """Keys of the persisted documents."""
    APPLICATIONS = "job-applications"
    RESUME = "user-resume"
    PREFERENCES = "career-preferences"
    FILTERS = "job-filters"
    TOUR_COMPLETED = "has-completed-tour"


class DocumentStore:
    """Manages SQLite storage of JSON documents keyed by name."""

    def __init__(self, db_path: str = "data/career_companion.db"):
        """Initialize the store with the path to its SQLite database."""
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.init_database()

    @contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and is always closed."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def init_database(self) -> None:
        """Create the documents table if needed."""
        with self.get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
        logger.info(f"Document store initialized at {self.db_path}")

    def get(self, key: StoreKey, default: Any = None) -> Any:
        """Return the decoded document, or ``default`` if absent or corrupt."""
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT value FROM documents WHERE key = ?", (key.value,)
            ).fetchone()

        if row is None:
            return default

        try:
            return json.loads(row["value"])
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt document '{key.value}' ignored, using default: {e}")
            return default

    def set(self, key: StoreKey, value: Any) -> None:
        """Overwrite the whole document for ``key``."""
        encoded = json.dumps(value)
        with self.get_connection() as conn:
            conn.execute("""
                INSERT INTO documents (key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """, (key.value, encoded, datetime.now().isoformat()))
        logger.debug(f"Stored document '{key.value}' ({len(encoded)} bytes)")

    def get_stats(self) -> Dict[str, Any]:
        """Get document sizes and last write times."""
        with self.get_connection() as conn:
            rows = conn.execute(
                "SELECT key, LENGTH(value) AS size, updated_at FROM documents"
            ).fetchall()
        return {row["key"]: {"size": row["size"], "updated_at": row["updated_at"]} for row in rows}


class PersistedState:
    """Typed access to the store with a default value per document."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def load_applications(self) -> List[Application]:
        raw = self.store.get(StoreKey.APPLICATIONS)
        if raw is None:
            return copy.deepcopy(MOCK_APPLICATIONS)
        if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
            logger.warning("Stored applications have the wrong shape, using defaults")
            return copy.deepcopy(MOCK_APPLICATIONS)
        try:
            return [Application.from_dict(item) for item in raw]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Stored applications unreadable, using defaults: {e}")
            return copy.deepcopy(MOCK_APPLICATIONS)

    def save_applications(self, applications: List[Application]) -> None:
        self.store.set(StoreKey.APPLICATIONS, [app.to_dict() for app in applications])

    def load_resume(self) -> str:
        value = self.store.get(StoreKey.RESUME, MOCK_RESUME)
        return value if isinstance(value, str) else MOCK_RESUME

    def save_resume(self, resume: str) -> None:
        self.store.set(StoreKey.RESUME, resume)

    def load_preferences(self) -> str:
        value = self.store.get(StoreKey.PREFERENCES, "")
        return value if isinstance(value, str) else ""

    def save_preferences(self, preferences: str) -> None:
        self.store.set(StoreKey.PREFERENCES, preferences)

    def load_filters(self) -> DashboardFilters:
        value = self.store.get(StoreKey.FILTERS)
        if not isinstance(value, dict):
            return DashboardFilters()
        return DashboardFilters.from_dict(value)

    def save_filters(self, filters: DashboardFilters) -> None:
        self.store.set(StoreKey.FILTERS, filters.to_dict())

    def has_completed_tour(self) -> bool:
        return bool(self.store.get(StoreKey.TOUR_COMPLETED, False))

    def mark_tour_completed(self) -> None:
        self.store.set(StoreKey.TOUR_COMPLETED, True)

    def applications_writer(self) -> Callable[[List[Application]], None]:
        """Callback suitable for ``ApplicationRepository(on_change=...)``."""
        return self.save_applications


def open_store(db_path: Optional[str] = None) -> DocumentStore:
    """Open the configured document store."""
    if db_path is None:
        from .settings import get_config
        db_path = get_config().store_path
    return DocumentStore(db_path)
