"""Backends for the saved-analysis list.

The whole list is one JSON blob. Every backend exposes ``load()`` and
``save(items)``; writes replace the blob, with no locking or versioning.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from prepmaster.storage import SavedAnalysis

logger = logging.getLogger(__name__)


def dump_blob(items: list[SavedAnalysis]) -> str:
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


def parse_blob(raw: str | None) -> list[SavedAnalysis]:
    """Decode a stored blob.

    Unparseable JSON, or a top-level value that is not a list, reads as an
    empty list. Malformed entries inside a valid list are skipped one by one.
    """
    if not raw:
        return []
    try:
        entries = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Failed to parse saved analyses, starting empty")
        return []
    if not isinstance(entries, list):
        logger.warning("Saved analyses blob is not a list, starting empty")
        return []

    items: list[SavedAnalysis] = []
    for index, entry in enumerate(entries):
        try:
            items.append(SavedAnalysis.from_dict(entry))
        except (TypeError, KeyError, AttributeError) as exc:
            logger.warning("Skipping malformed saved analysis #%d: %r", index, exc)
    return items


class AnalysisRepository(ABC):
    """Load/save access to the saved-analysis list."""

    @abstractmethod
    async def load(self) -> list[SavedAnalysis]: ...

    @abstractmethod
    async def save(self, items: list[SavedAnalysis]) -> None: ...

    async def close(self) -> None:
        return None


class MemoryRepository(AnalysisRepository):
    """Keeps the serialized blob in memory (tests, throwaway sessions)."""

    def __init__(self) -> None:
        self._blob: str | None = None

    async def load(self) -> list[SavedAnalysis]:
        return parse_blob(self._blob)

    async def save(self, items: list[SavedAnalysis]) -> None:
        self._blob = dump_blob(items)


class JsonFileRepository(AnalysisRepository):
    """Blob persisted as a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def load(self) -> list[SavedAnalysis]:
        if not self.path.exists():
            return []
        return parse_blob(self.path.read_text(encoding="utf-8"))

    async def save(self, items: list[SavedAnalysis]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump_blob(items), encoding="utf-8")


_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS blobs (
    key         TEXT PRIMARY KEY,
    value       TEXT NOT NULL,
    updated_at  TEXT NOT NULL
);
"""


class SqliteRepository(AnalysisRepository):
    """Blob stored under one key of an async SQLite key/value table."""

    def __init__(self, db_path: str, key: str) -> None:
        self.db_path = db_path
        self.key = key
        self._db: aiosqlite.Connection | None = None

    async def _ensure_db(self) -> aiosqlite.Connection:
        if self._db is not None:
            return self._db

        os.makedirs(os.path.dirname(self.db_path) or ".", exist_ok=True)
        self._db = await aiosqlite.connect(self.db_path)
        await self._db.execute("PRAGMA journal_mode=WAL")
        await self._db.executescript(_CREATE_TABLE)
        return self._db

    async def load(self) -> list[SavedAnalysis]:
        db = await self._ensure_db()
        async with db.execute(
            "SELECT value FROM blobs WHERE key = ?", (self.key,)
        ) as cursor:
            row = await cursor.fetchone()
        return parse_blob(row[0] if row else None)

    async def save(self, items: list[SavedAnalysis]) -> None:
        db = await self._ensure_db()
        value = dump_blob(items)
        now = datetime.now(timezone.utc).isoformat()
        await db.execute(
            "INSERT INTO blobs (key, value, updated_at) VALUES (?, ?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value=?, updated_at=?",
            (self.key, value, now, value, now),
        )
        await db.commit()

    async def close(self) -> None:
        if self._db is not None:
            await self._db.close()
            self._db = None


def create_repository(
    backend: str,
    path: str | None = None,
    db_path: str | None = None,
    key: str | None = None,
) -> AnalysisRepository:
    """Build a repository from config values."""
    from prepmaster import config

    if backend == "memory":
        return MemoryRepository()
    if backend == "file":
        return JsonFileRepository(path or config.SAVED_ANALYSES_PATH)
    if backend == "sqlite":
        return SqliteRepository(db_path or config.SAVED_ANALYSES_DB_PATH, key or config.STORAGE_KEY)
    raise ValueError(f"Unknown storage backend: {backend!r}")
