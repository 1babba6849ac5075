import json

import pytest

from prospect_search import service as search_module
from prospect_search.config import Settings
from prospect_search.exceptions import (
    EntitySearchError,
    MissingCriteriaError,
    NoArrayFoundError,
    UpstreamHTTPError,
)
from prospect_search.types import SearchCriteria, SearchResult

SETTINGS = Settings(gemini_api_key="k", gemini_model="m", gemini_api_url="https://api.test", request_timeout_s=5)


@pytest.fixture
def fake_upstream(monkeypatch):
    calls = []

    def fake_generate_content(prompt, api_key, model, api_url, timeout_s):
        calls.append({"prompt": prompt, "api_key": api_key, "model": model, "api_url": api_url, "timeout_s": timeout_s})
        return fake_generate_content.reply

    fake_generate_content.reply = ""
    fake_generate_content.calls = calls
    monkeypatch.setattr(search_module.gemini, "generate_content", fake_generate_content)
    return fake_generate_content


@pytest.mark.parametrize(
    "criteria",
    [SearchCriteria(), SearchCriteria(industry="Utilities"), SearchCriteria(state="Ohio"), SearchCriteria(" ", " ")],
)
def test_missing_criteria(fake_upstream, criteria):
    with pytest.raises(MissingCriteriaError) as exc:
        search_module.search(criteria, settings=SETTINGS)
    assert exc.value.message == "Please select both industry and state"
    assert fake_upstream.calls == []


def test_search_returns_validated_records(fake_upstream, caplog):
    fake_upstream.reply = "```json\n" + json.dumps(
        [
            {"id": 1, "entityName": "Ohio Water", "websiteUrl": "https://water.test"},
            {"id": 2, "entityName": "Buckeye Gas", "websiteUrl": "https://gas.test"},
        ]
    ) + "\n```"

    with caplog.at_level("INFO"):
        results = search_module.search(SearchCriteria("Utilities", "Ohio"), settings=SETTINGS)

    assert results == [
        SearchResult(1, "Ohio Water", "https://water.test"),
        SearchResult(2, "Buckeye Gas", "https://gas.test"),
    ]
    call = fake_upstream.calls[0]
    assert "in Ohio" in call["prompt"]
    assert call["model"] == "m"
    assert call["timeout_s"] == 5
    assert "Search returned 2 results" in caplog.messages


def test_extraction_failure_is_logged_and_raised(fake_upstream, caplog):
    fake_upstream.reply = "Sorry, I cannot help with that."
    with caplog.at_level("ERROR"):
        with pytest.raises(NoArrayFoundError):
            search_module.search(SearchCriteria("Taxes", "Texas"), settings=SETTINGS)
    assert "Could not extract results" in " ".join(caplog.messages)


def test_upstream_errors_propagate(monkeypatch):
    def failing(*args, **kwargs):
        raise UpstreamHTTPError("quota exceeded", status_code=429)

    monkeypatch.setattr(search_module.gemini, "generate_content", failing)
    with pytest.raises(EntitySearchError) as exc:
        search_module.search(SearchCriteria("Insurance", "Florida"), settings=SETTINGS)
    assert exc.value.message == "quota exceeded"
    assert str(exc.value) == "[upstream_http] quota exceeded"


def test_uses_global_settings_when_none_given(fake_upstream, monkeypatch):
    monkeypatch.setattr(search_module, "get_settings", lambda: SETTINGS)
    fake_upstream.reply = "[]"
    assert search_module.search(SearchCriteria("Insurance", "Ohio")) == []
    assert fake_upstream.calls[0]["api_key"] == "k"
