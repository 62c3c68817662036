"""Saved-analysis operations on top of a repository.

Every write is read-modify-write of the whole list: newest first on
save, filter-and-rewrite on delete.
"""

from __future__ import annotations

import logging
import random
import string
import time
from datetime import datetime, timezone

from prepmaster.editorial import Editorial
from prepmaster.prep import AiPrepAnalysis, PrepAnalysis
from prepmaster.storage import SavedAnalysis
from prepmaster.storage.repository import AnalysisRepository, create_repository

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_analysis_id() -> str:
    """``<epoch ms>-<9 base36 chars>``"""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}-{suffix}"


class SavedAnalyses:
    """Singleton access to the saved-analysis list."""

    _instance: SavedAnalyses | None = None

    def __init__(self, repository: AnalysisRepository) -> None:
        self.repository = repository

    @classmethod
    def create(cls, backend: str | None = None) -> SavedAnalyses:
        """Create the singleton from config (or an explicit backend name)."""
        from prepmaster.config import STORAGE_BACKEND

        instance = cls(create_repository(backend or STORAGE_BACKEND))
        cls._instance = instance
        logger.info("Saved analyses stored via %s", type(instance.repository).__name__)
        return instance

    @classmethod
    def get_instance(cls) -> SavedAnalyses:
        """Return the singleton, creating it from config on first use."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def set_instance(cls, instance: SavedAnalyses | None) -> None:
        cls._instance = instance

    @classmethod
    async def shutdown(cls) -> None:
        """Close the singleton's repository, if one was created."""
        if cls._instance is not None:
            await cls._instance.close()

    async def all(self) -> list[SavedAnalysis]:
        return await self.repository.load()

    async def save(self, editorial: Editorial, analysis: AiPrepAnalysis) -> SavedAnalysis:
        """Persist an editorial with its PREP sentences, newest first."""
        saved = SavedAnalysis(
            id=new_analysis_id(),
            editorial=editorial,
            prep=PrepAnalysis.from_ai_analysis(analysis),
            saved_at=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )
        items = await self.repository.load()
        await self.repository.save([saved, *items])
        logger.info("Saved analysis %s for %s", saved.id, editorial.link)
        return saved

    async def delete(self, analysis_id: str) -> bool:
        """Remove one analysis. Returns False if the id was not stored."""
        items = await self.repository.load()
        kept = [item for item in items if item.id != analysis_id]
        if len(kept) == len(items):
            return False
        await self.repository.save(kept)
        logger.info("Deleted analysis %s", analysis_id)
        return True

    async def is_saved(self, link: str) -> bool:
        items = await self.repository.load()
        return any(item.editorial.link == link for item in items)

    async def close(self) -> None:
        await self.repository.close()
