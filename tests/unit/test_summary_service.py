import logging

import pytest

from summary_tool.core.config import settings
from summary_tool.models.pydantic import SummaryRequest, SummaryResult
from summary_tool.services.summarization import DuplicateSentenceKeyError
from summary_tool.services.summary_service import SummaryService, summary_ratio


def test_summarize_returns_summary_result(cats_and_dogs_text):
    service = SummaryService()
    res = service.summarize(SummaryRequest(title="Cats", content=cats_and_dogs_text))

    assert isinstance(res, SummaryResult)
    assert res.title == "Cats"
    assert res.summary == "Cats\n\nThe cat ran\nThe dog ran\n"
    assert res.rank_table["Thecatran"] == 165
    assert len(res.rank_table) == 8

    assert res.original_length == len("Cats") + len(cats_and_dogs_text)
    assert res.summary_length == 30
    assert res.summary_ratio == 100 - (100 * 30 // res.original_length)


def test_summary_ratio_uses_integer_division():
    assert summary_ratio(200, 50) == 75
    # 100 * 1 // 3 == 33
    assert summary_ratio(3, 1) == 67
    assert summary_ratio(10, 10) == 0


def test_summary_ratio_empty_original():
    assert summary_ratio(0, 2) == 0


def test_empty_request():
    res = SummaryService().summarize(SummaryRequest(title="", content=""))

    assert res.summary == "\n\n"
    assert res.rank_table == {}
    assert res.original_length == 0
    assert res.summary_ratio == 0


def test_policies_default_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "collision_policy", "error")
    service = SummaryService()

    assert service.collision_policy == "error"
    with pytest.raises(DuplicateSentenceKeyError):
        service.summarize(SummaryRequest(title="T", content="Hello world. Hello-world. Hello there"))


def test_explicit_policy_overrides_settings(monkeypatch):
    monkeypatch.setattr(settings, "collision_policy", "error")
    service = SummaryService(collision_policy="sum")

    res = service.summarize(SummaryRequest(title="T", content="Hello world. Hello-world. Hello there"))
    assert res.rank_table == {"Helloworld": 50, "Hellothere": 50}


def test_summarize_logs_one_line(cats_and_dogs_text, caplog):
    with caplog.at_level(logging.INFO, logger="summary_tool.services.summary_service"):
        SummaryService().summarize(SummaryRequest(title="Cats", content=cats_and_dogs_text))

    records = [r for r in caplog.records if r.name == "summary_tool.services.summary_service"]
    assert len(records) == 1
    assert "Cats" in records[0].getMessage()


def test_result_serializes_to_json(cats_and_dogs_text):
    res = SummaryService().summarize(SummaryRequest(title="Cats", content=cats_and_dogs_text))
    data = res.model_dump()

    assert data["summary"] == res.summary
    assert data["rank_table"]["Birdssing"] == 0
