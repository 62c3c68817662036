"""Tests for rule-based PREP classification."""

from __future__ import annotations

from prepmaster.editorial import Editorial
from prepmaster.prep.classifier import (
    analysis_payload,
    analyze_prep,
    select_sources,
    title_keywords,
)

S_ANNOUNCE = "정부가 새로운 정책을 발표했다."
S_PROBLEM = "이번 정책에는 분명한 문제가 있다."
S_REACTION = "시민들은 당황스러운 반응을 보였다."
S_NEED = "정부의 신중한 재검토가 필요하다."


def _sources(content: str, title: str) -> dict[str, str]:
    analysis = analyze_prep(content, title)
    return {role: item.source_text for role, item in analysis.items()}


def test_title_keywords_strip_tag_and_short_tokens():
    assert title_keywords("[사설] 반도체 지원, 서둘러야 한다") == ["반도체", "서둘러야"]
    assert title_keywords("[사설] 모호한 정책") == ["모호한"]
    assert title_keywords("") == []


def test_keyword_and_positional_selection():
    content = " ".join([S_ANNOUNCE, S_PROBLEM, S_REACTION, S_NEED])

    assert _sources(content, "[사설] 모호한 정책") == {
        "point1": S_ANNOUNCE,  # no title keyword match, first sentence
        "reason": S_PROBLEM,  # "문제"
        "example": S_REACTION,  # no pattern, index 2
        "point2": S_NEED,  # "필요"
    }


def test_point1_prefers_sentence_with_title_keyword():
    content = " ".join(
        [S_ANNOUNCE, "반도체 산업은 국가 경쟁력의 핵심이다.", S_REACTION, S_NEED]
    )

    assert _sources(content, "[사설] 반도체 지원 서둘러야")["point1"] == "반도체 산업은 국가 경쟁력의 핵심이다."


def test_example_prefers_sentence_with_digits():
    with_number = "올해 관련 예산은 300조원에 달한다."
    content = " ".join([S_ANNOUNCE, S_PROBLEM, S_REACTION, with_number, S_NEED])

    assert _sources(content, "[사설] 예산 논란")["example"] == with_number


def test_full_width_digits_do_not_count_as_numbers():
    full_width = "올해 관련 예산은 ３００조원에 달한다."
    content = " ".join([S_ANNOUNCE, S_PROBLEM, S_REACTION, full_width])

    assert _sources(content, "[사설] 예산 논란")["example"] == S_REACTION


def test_empty_content_gives_empty_sources():
    analysis = analyze_prep("", "[사설] 빈 본문")

    for _, item in analysis.items():
        assert item.source_text == ""
        assert item.summary


def test_two_sentences_duplicate_on_exhaustion():
    content = f"{S_ANNOUNCE} {S_REACTION}"

    sources = _sources(content, "[사설] 정책 논란")

    assert sources == {
        "point1": S_ANNOUNCE,
        "reason": S_REACTION,  # index 1 fallback
        "example": "",  # nothing at index 2, nothing left to scan
        "point2": S_REACTION,  # last sentence, already claimed, kept anyway
    }


def test_shared_preferred_sentence_falls_back_to_distinct_sentences():
    # The first sentence matches every role's keywords.
    hub = "이 문제는 2024년에 필요한 개혁 때문이다."
    others = ["첫째 보조 문장은 이렇다.", "둘째 보조 문장은 저렇다.", "셋째 보조 문장은 그렇다."]

    sources = select_sources([hub, *others], "[사설] 개혁의 문제")

    assert sources == {
        "point1": hub,
        "reason": others[0],
        "example": others[1],
        "point2": others[2],
    }
    assert len(set(sources.values())) == 4


def test_point2_scan_only_starts_at_last_sentence():
    # point1 takes the last sentence through the title keyword; point2's
    # fallback scan starts at the last index and finds nothing free.
    sentences = [S_ANNOUNCE, S_REACTION, "다른 평범한 문장이 여기에 있다.", "반도체 산업은 국가 경쟁력의 핵심이다."]

    sources = select_sources(sentences, "[사설] 반도체 육성")

    assert sources["point1"] == sentences[3]
    assert sources["point2"] == sentences[3]


def test_classification_is_deterministic():
    content = " ".join([S_ANNOUNCE, S_PROBLEM, S_REACTION, S_NEED, "추가 문장도 하나 더 있다."])

    first = analyze_prep(content, "[사설] 모호한 정책")
    second = analyze_prep(content, "[사설] 모호한 정책")

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_analysis_payload_shape():
    editorial = Editorial(
        title="[사설] 모호한 정책",
        content=" ".join([S_ANNOUNCE, S_PROBLEM, S_REACTION, S_NEED]),
        date="2026.10.18",
        link="https://www.mk.co.kr/news/editorial/11111111",
    )

    payload = analysis_payload(editorial)

    assert set(payload) == {"editorial", "aiAnalysis", "bestPractice"}
    assert payload["editorial"]["link"] == editorial.link
    assert payload["aiAnalysis"]["reason"]["sourceText"] == S_PROBLEM
    assert payload["bestPractice"]["reason"] == f"왜 그런가. {S_PROBLEM}"
