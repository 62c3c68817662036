"""Rule-based PREP classification of editorial sentences.

Each role first picks a preferred sentence by keyword or pattern, with a
positional fallback. The roles then claim sentences in PREP order so that
one sentence is not reused, unless the article runs out of sentences.
"""

import re

from prepmaster.editorial import Editorial
from prepmaster.prep import AiPrepAnalysis, PrepItem
from prepmaster.prep.narrative import (
    EXAMPLE_SUMMARY,
    POINT2_SUMMARY,
    REASON_SUMMARY,
    clean_title,
    generate_best_practice,
    point1_summary,
)
from prepmaster.prep.splitter import split_sentences

REASON_KEYWORDS = (
    "때문",
    "이유",
    "왜냐",
    "근거",
    "결함",
    "문제",
    "하자",
    "모호",
    "불명확",
    "포괄적",
)

EXAMPLE_PATTERNS = tuple(
    re.compile(p)
    for p in (
        r"[0-9]+",
        "예를 들어",
        "경우",
        "사례",
        "현장",
        "실제",
        "현재",
        "구조",
        "계약",
        "기업",
    )
)

CONCLUSION_KEYWORDS = (
    "촉구",
    "필요",
    "해야",
    "바란다",
    "되어야",
    "요구",
    "결국",
    "따라서",
)

_KEYWORD_SPLIT_RE = re.compile(r"[,\s]+")


def title_keywords(title: str) -> list[str]:
    return [w for w in _KEYWORD_SPLIT_RE.split(clean_title(title)) if len(w) > 2]


def _first_containing(sentences: list[str], keywords) -> str | None:
    for sentence in sentences:
        if any(kw in sentence for kw in keywords):
            return sentence
    return None


def _first_matching(sentences: list[str], patterns) -> str | None:
    for sentence in sentences:
        if any(p.search(sentence) for p in patterns):
            return sentence
    return None


def _at(sentences: list[str], index: int) -> str:
    if 0 <= index < len(sentences):
        return sentences[index]
    return ""


class _SentenceClaims:
    """Tracks which sentences earlier roles already took."""

    def __init__(self, sentences: list[str]) -> None:
        self.sentences = sentences
        self.used: set[str] = set()

    def claim(self, preferred: str, start: int) -> str:
        if preferred and preferred not in self.used:
            self.used.add(preferred)
            return preferred
        # Negative start (point2 on an empty article) scans nothing
        for sentence in self.sentences[max(start, 0):]:
            if sentence not in self.used:
                self.used.add(sentence)
                return sentence
        return preferred


def select_sources(sentences: list[str], title: str) -> dict[str, str]:
    """Pick one sentence per role, in PREP order, avoiding reuse."""
    keywords = title_keywords(title)
    candidates = [
        ("point1", _first_containing(sentences, keywords) or _at(sentences, 0), 0),
        ("reason", _first_containing(sentences, REASON_KEYWORDS) or _at(sentences, 1), 1),
        ("example", _first_matching(sentences, EXAMPLE_PATTERNS) or _at(sentences, 2), 2),
        (
            "point2",
            _first_containing(sentences, CONCLUSION_KEYWORDS) or _at(sentences, len(sentences) - 1),
            len(sentences) - 1,
        ),
    ]

    claims = _SentenceClaims(sentences)
    return {role: claims.claim(preferred, start) for role, preferred, start in candidates}


def analyze_prep(content: str, title: str) -> AiPrepAnalysis:
    """Label four sentences of an editorial with PREP roles. Never raises."""
    sources = select_sources(split_sentences(content), title)
    return AiPrepAnalysis(
        point1=PrepItem(summary=point1_summary(title), source_text=sources["point1"]),
        reason=PrepItem(summary=REASON_SUMMARY, source_text=sources["reason"]),
        example=PrepItem(summary=EXAMPLE_SUMMARY, source_text=sources["example"]),
        point2=PrepItem(summary=POINT2_SUMMARY, source_text=sources["point2"]),
    )


def analysis_payload(editorial: Editorial) -> dict:
    """The ``{editorial, aiAnalysis, bestPractice}`` payload for one editorial."""
    analysis = analyze_prep(editorial.content, editorial.title)
    return {
        "editorial": editorial.to_dict(),
        "aiAnalysis": analysis.to_dict(),
        "bestPractice": generate_best_practice(editorial.title, analysis).to_dict(),
    }
