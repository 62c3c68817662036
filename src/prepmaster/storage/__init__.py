"""Saved analyses: data model."""

from dataclasses import dataclass

from prepmaster.editorial import Editorial
from prepmaster.prep import PrepAnalysis


@dataclass
class SavedAnalysis:
    """An editorial plus its four PREP sentences, as the user saved it."""

    id: str
    editorial: Editorial
    prep: PrepAnalysis
    saved_at: str  # ISO-8601, UTC

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "editorial": self.editorial.to_dict(),
            "prep": self.prep.to_dict(),
            "savedAt": self.saved_at,
        }

    @classmethod
    def from_dict(cls, raw: dict) -> "SavedAnalysis":
        return cls(
            id=raw["id"],
            editorial=Editorial.from_dict(raw.get("editorial") or {}),
            prep=PrepAnalysis.from_dict(raw.get("prep") or {}),
            saved_at=raw.get("savedAt", ""),
        )
