"""PREP (Point-Reason-Example-Point) analysis: data models."""

from dataclasses import dataclass

ROLES = ("point1", "reason", "example", "point2")

PREP_LABELS = {
    "point1": {"letter": "P", "name": "핵심 주장"},
    "reason": {"letter": "R", "name": "근거"},
    "example": {"letter": "E", "name": "사례/데이터"},
    "point2": {"letter": "P", "name": "최종 강조"},
}


@dataclass
class PrepItem:
    """A role's templated summary and the article sentence it points at."""

    summary: str
    source_text: str

    def to_dict(self) -> dict:
        return {"summary": self.summary, "sourceText": self.source_text}


@dataclass
class AiPrepAnalysis:
    point1: PrepItem
    reason: PrepItem
    example: PrepItem
    point2: PrepItem

    def items(self) -> list[tuple[str, PrepItem]]:
        return [(role, getattr(self, role)) for role in ROLES]

    def to_dict(self) -> dict:
        return {role: item.to_dict() for role, item in self.items()}

    @classmethod
    def from_dict(cls, raw: dict) -> "AiPrepAnalysis":
        def _item(role: str) -> PrepItem:
            data = raw.get(role) or {}
            return PrepItem(
                summary=data.get("summary", ""),
                source_text=data.get("sourceText", ""),
            )

        return cls(**{role: _item(role) for role in ROLES})


@dataclass
class PrepAnalysis:
    """The four source sentences only; this is what gets persisted."""

    point1: str = ""
    reason: str = ""
    example: str = ""
    point2: str = ""

    def to_dict(self) -> dict:
        return {role: getattr(self, role) for role in ROLES}

    @classmethod
    def from_dict(cls, raw: dict) -> "PrepAnalysis":
        return cls(**{role: raw.get(role, "") for role in ROLES})

    @classmethod
    def from_ai_analysis(cls, analysis: AiPrepAnalysis) -> "PrepAnalysis":
        return cls(**{role: item.source_text for role, item in analysis.items()})


@dataclass
class BestPractice:
    """Each role's sentence rewritten as a line of argument."""

    point1: str
    reason: str
    example: str
    point2: str

    def to_dict(self) -> dict:
        return {role: getattr(self, role) for role in ROLES}
