"""Fixed Korean phrasing wrapped around classified sentences."""

import re

from prepmaster.prep import AiPrepAnalysis, BestPractice

_EDITORIAL_TAG_RE = re.compile(r"\[사설\]\s*")

_TITLE_SUMMARY_CHARS = 30

REASON_SUMMARY = "법/정책 자체의 모호함과 불명확한 기준이 현장 혼란을 야기한다는 점을 근거로 제시합니다."
EXAMPLE_SUMMARY = "구체적인 조항, 현장 사례, 예상되는 결과 등을 통해 주장을 뒷받침합니다."
POINT2_SUMMARY = "현재 접근법의 한계를 지적하며 근본적인 재검토를 촉구합니다."


def clean_title(title: str) -> str:
    """Drop the leading "[사설]" tag."""
    return _EDITORIAL_TAG_RE.sub("", title, count=1)


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def point1_summary(title: str) -> str:
    # The title is always cut to 30 characters and followed by "...".
    short_title = clean_title(title)[:_TITLE_SUMMARY_CHARS]
    return f'이 사설은 "{short_title}..."에 대해 비판적 입장을 취하며, 근본적인 문제점을 지적합니다.'


def generate_best_practice(title: str, analysis: AiPrepAnalysis) -> BestPractice:
    """Rewrite the four sentences as an argument addressed to a reader."""
    return BestPractice(
        point1=f'"{clean_title(title)}" 문제를 짚어보자. {analysis.point1.source_text}',
        reason=f"왜 그런가. {analysis.reason.source_text}",
        example=f"실제로 {analysis.example.source_text}",
        point2=f"결론적으로 {analysis.point2.source_text}",
    )
