"""Tests for the command-line script."""

from __future__ import annotations

import json

import pytest

from prepmaster import cli
from prepmaster.editorial import Editorial, EditorialListItem
from prepmaster.editorial.scrapers import EditorialFetchError
from prepmaster.storage.repository import MemoryRepository
from prepmaster.storage.saved import SavedAnalyses

URL = "https://www.mk.co.kr/news/editorial/11111111"
CONTENT = "정부가 새로운 정책을 발표했다. 이번 정책에는 분명한 문제가 있다."


class _StubSource:
    def fetch_list(self):
        return [
            EditorialListItem(title="[사설] 첫 사설 제목", link=URL, date="2026.10.18"),
            EditorialListItem(title="[사설] 둘째 사설 제목", link=URL + "2", date="2026.10.17"),
        ]

    def fetch_detail(self, url):
        return Editorial(title="[사설] 정책 논란", content=CONTENT, date="2026.10.18", link=url)


@pytest.fixture(autouse=True)
def memory_store(monkeypatch):
    service = SavedAnalyses(MemoryRepository())
    SavedAnalyses.set_instance(service)
    monkeypatch.setattr(cli, "get_source", lambda site=None: _StubSource())
    yield service
    SavedAnalyses.set_instance(None)


def test_list_groups_by_date(capsys):
    assert cli.main(["list"]) == 0

    out = capsys.readouterr().out
    assert out.index("2026.10.18") < out.index("[사설] 첫 사설 제목") < out.index("2026.10.17")


def test_analyze_json_prints_api_payload(capsys):
    assert cli.main(["analyze", URL, "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["aiAnalysis"]["point1"]["sourceText"] == "정부가 새로운 정책을 발표했다."
    assert payload["aiAnalysis"]["example"]["sourceText"] == ""


def test_analyze_save_then_saved_and_delete(capsys):
    assert cli.main(["analyze", URL, "--save"]) == 0
    out = capsys.readouterr().out
    assert "[P] 핵심 주장" in out
    assert "저장했습니다" in out

    assert cli.main(["analyze", URL, "--save"]) == 0
    assert "이미 저장된 사설입니다." in capsys.readouterr().out

    assert cli.main(["saved"]) == 0
    listing = capsys.readouterr().out
    analysis_id = listing.split()[0]
    assert "[사설] 정책 논란" in listing

    assert cli.main(["delete", analysis_id]) == 0
    assert cli.main(["delete", analysis_id]) == 1
    assert cli.main(["saved"]) == 0
    assert "저장된 분석이 없습니다." in capsys.readouterr().out


def test_fetch_failure_exits_non_zero(monkeypatch, capsys):
    class _Failing:
        def fetch_detail(self, url):
            raise EditorialFetchError("Failed to fetch article (HTTP 500)")

    monkeypatch.setattr(cli, "get_source", lambda site=None: _Failing())

    assert cli.main(["analyze", URL]) == 1
    assert "HTTP 500" in capsys.readouterr().err
