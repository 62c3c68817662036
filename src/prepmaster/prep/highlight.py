"""Mark where each PREP sentence appears in the editorial body."""

from prepmaster.prep import AiPrepAnalysis, PREP_LABELS

Segment = tuple[str, str | None]  # (text, role or None)


def highlight_paragraphs(content: str, analysis: AiPrepAnalysis) -> list[list[Segment]]:
    """Split content into paragraphs of (text, role) segments.

    Roles are looked up in PREP order against the text remaining after
    the previous match, so a role whose sentence only occurs earlier in
    the paragraph is not marked.
    """
    paragraphs: list[list[Segment]] = []
    for paragraph in content.split("\n\n"):
        segments: list[Segment] = []
        remaining = paragraph
        for role, item in analysis.items():
            text = item.source_text
            if not text or text not in remaining:
                continue
            before, _, after = remaining.partition(text)
            if before:
                segments.append((before, None))
            segments.append((text, role))
            remaining = after
        if remaining or not segments:
            segments.append((remaining, None))
        paragraphs.append(segments)
    return paragraphs


def render_marked(paragraphs: list[list[Segment]]) -> str:
    """Plain-text rendering with [P]/[R]/[E] markers around labelled sentences."""
    lines = []
    for segments in paragraphs:
        parts = []
        for text, role in segments:
            if role is None:
                parts.append(text)
            else:
                letter = PREP_LABELS[role]["letter"]
                parts.append(f"[{letter}] {text} [/{letter}]")
        lines.append("".join(parts))
    return "\n\n".join(lines)
