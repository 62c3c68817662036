"""Editorial scraping: data models."""

from dataclasses import asdict, dataclass


@dataclass
class EditorialListItem:
    """One entry of an outlet's editorial list page."""

    title: str
    link: str
    date: str  # "YYYY.MM.DD"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Editorial:
    """A fetched editorial with its extracted body text."""

    title: str
    content: str  # paragraphs joined by a blank line
    date: str
    link: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict) -> "Editorial":
        return cls(
            title=raw.get("title", ""),
            content=raw.get("content", ""),
            date=raw.get("date", ""),
            link=raw.get("link", ""),
        )


def group_by_date(items: list[EditorialListItem]) -> dict[str, list[EditorialListItem]]:
    """Group list items by their date, keeping first-seen order."""
    groups: dict[str, list[EditorialListItem]] = {}
    for item in items:
        groups.setdefault(item.date, []).append(item)
    return groups
